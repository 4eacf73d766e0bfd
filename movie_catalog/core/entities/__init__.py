"""
Entites metier representant les concepts du domaine.

Les entites sont des objets mutables dotes d'une identite.

Exports:
- Movie: Fiche d'un film du catalogue
"""

from movie_catalog.core.entities.movie import Movie

__all__ = [
    "Movie",
]
