"""
Utilitaires partages pour les commandes CLI.

Ce module fournit :
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container neuf
- parse_int : conversion tolerante d'une saisie en entier
- console : instance Rich Console partagee (reexportee depuis display)
"""

from contextlib import contextmanager
from functools import wraps
from typing import Optional

from loguru import logger as loguru_logger

from movie_catalog.container import Container

# Re-export console depuis display pour que tous les modules puissent l'importer ici
from movie_catalog.adapters.cli.display import console

__all__ = ["console", "parse_int", "suppress_loguru", "with_container"]


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("movie_catalog")
    try:
        yield
    finally:
        loguru_logger.enable("movie_catalog")


def with_container():
    """
    Decorateur qui injecte un container neuf en premier argument.

    Chaque invocation repart d'un catalogue vide.

    Usage:
        @with_container()
        def my_command(container, ...):
            catalog = container.catalog_service()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


def parse_int(text: str) -> Optional[int]:
    """
    Convertit une saisie en entier.

    Args:
        text: Saisie utilisateur (espaces ignores)

    Returns:
        L'entier, ou None si la saisie n'est pas un entier
    """
    try:
        return int(text.strip())
    except ValueError:
        return None
