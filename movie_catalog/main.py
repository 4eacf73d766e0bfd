"""
Point d'entree CLI du catalogue de films.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import shell
from .config import Settings
from .container import Container
from .logging_config import configure_logging, resolve_log_level

app = typer.Typer(
    name="movie-catalog",
    help="Gestion d'un catalogue de films en memoire",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Movie Catalog - catalogue de films interactif."""
    config = get_config()
    configure_logging(
        log_level=resolve_log_level(config.log_level, verbose, quiet),
        log_file=config.log_file,
        rotation_size=config.log_rotation_size,
        retention_count=config.log_retention_count,
    )


# Monter les commandes depuis commands/
app.command()(shell)


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration Movie Catalog")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")
    typer.echo(f"Rotation : {config.log_rotation_size} ({config.log_retention_count} fichiers)")
    typer.echo(f"Decimales des moyennes : {config.rating_decimals}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Movie Catalog v{__version__}")


if __name__ == "__main__":
    app()
