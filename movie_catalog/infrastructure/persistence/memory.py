"""
Implementation en memoire du repository de films.

Les fiches vivent dans un dict ordonne par insertion ; elles disparaissent
avec le processus.
"""

from typing import Iterator, Optional

from movie_catalog.core.entities.movie import Movie
from movie_catalog.core.ports.repositories import IMovieRepository


class InMemoryMovieRepository(IMovieRepository):
    """
    Repository de films stocke dans un dict.

    Une mise a jour d'une fiche existante conserve sa position d'insertion.
    """

    def __init__(self) -> None:
        self._movies: dict[str, Movie] = {}

    def get_by_id(self, movie_id: str) -> Optional[Movie]:
        """Recupere un film par son ID."""
        return self._movies.get(movie_id)

    def save(self, movie: Movie) -> Movie:
        """Sauvegarde un film (insertion ou mise a jour)."""
        self._movies[movie.id] = movie
        return movie

    def delete(self, movie_id: str) -> bool:
        """Supprime un film par ID. Retourne True si supprime."""
        return self._movies.pop(movie_id, None) is not None

    def iter_all(self) -> Iterator[Movie]:
        """Itere sur tous les films dans l'ordre d'insertion."""
        return iter(list(self._movies.values()))

    def count(self) -> int:
        return len(self._movies)
