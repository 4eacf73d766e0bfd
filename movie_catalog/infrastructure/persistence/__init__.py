"""
Module de persistance en memoire.

Les fiches vivent le temps du processus ; aucune donnee n'est ecrite sur disque.

Usage:
    from movie_catalog.infrastructure.persistence import InMemoryMovieRepository

    repo = InMemoryMovieRepository()
"""

from movie_catalog.infrastructure.persistence.memory import InMemoryMovieRepository

__all__ = [
    "InMemoryMovieRepository",
]
