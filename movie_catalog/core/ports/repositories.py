"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) definissant le contrat de stockage des fiches.
L'implementation fournie est en memoire : le catalogue ne persiste rien
entre deux sessions.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from movie_catalog.core.entities.movie import Movie


class IMovieRepository(ABC):
    """
    Interface de stockage des fiches de films.

    L'ordre d'iteration est l'ordre d'insertion.
    """

    @abstractmethod
    def get_by_id(self, movie_id: str) -> Optional[Movie]:
        """Recupere un film par son ID."""
        ...

    @abstractmethod
    def save(self, movie: Movie) -> Movie:
        """Sauvegarde un film (insertion ou mise a jour)."""
        ...

    @abstractmethod
    def delete(self, movie_id: str) -> bool:
        """Supprime un film par ID. Retourne True si supprime."""
        ...

    @abstractmethod
    def iter_all(self) -> Iterator[Movie]:
        """Itere sur tous les films dans l'ordre d'insertion."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Retourne le nombre de films stockes."""
        ...
