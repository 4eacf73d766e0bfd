"""
Ports (interfaces abstraites) de la couche domaine.

Exports:
- IMovieRepository: Contrat de stockage des fiches de films
"""

from movie_catalog.core.ports.repositories import IMovieRepository

__all__ = [
    "IMovieRepository",
]
