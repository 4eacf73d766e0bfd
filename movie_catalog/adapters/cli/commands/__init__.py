"""Sous-package CLI commands - re-exporte les commandes publiques."""

from movie_catalog.adapters.cli.commands.catalog_commands import shell

__all__ = [
    "shell",
]
