"""
Service de catalogue de films.

Le CatalogService est la seule autorite sur les fiches : il attribue les
identifiants, applique les regles de notation et repond aux requetes.

Responsabilites:
- Creation des fiches avec un identifiant unique jamais reutilise
- Ajout de notes dans l'intervalle [1, 5]
- Requetes par genre, realisateur, mot-cle et classement par moyenne
- Suppression des fiches
"""

from typing import Optional

from loguru import logger

from movie_catalog.core.entities.movie import Movie
from movie_catalog.core.exceptions import InvalidRatingError, NotFoundError
from movie_catalog.core.ports.repositories import IMovieRepository
from movie_catalog.utils.constants import (
    FIRST_MOVIE_NUMBER,
    MAX_RATING,
    MIN_RATING,
    MOVIE_ID_PREFIX,
)


def _is_valid_rating(rating: object) -> bool:
    """Une note est un entier (bool exclu) dans [MIN_RATING, MAX_RATING]."""
    if isinstance(rating, bool) or not isinstance(rating, int):
        return False
    return MIN_RATING <= rating <= MAX_RATING


class CatalogService:
    """
    Catalogue en memoire des films d'une session.

    Le compteur d'identifiants appartient a l'instance : deux catalogues
    ne partagent jamais leur numerotation.

    Example:
        catalog = CatalogService(movie_repo=InMemoryMovieRepository())
        movie_id = catalog.add("Inception", "Nolan", 2010, "SciFi")  # "MV1"
        catalog.rate(movie_id, 5)
        catalog.average_rating(movie_id)  # 5.0
    """

    def __init__(self, movie_repo: IMovieRepository) -> None:
        """
        Initialise le catalogue.

        Args:
            movie_repo: Repository de stockage des fiches
        """
        self._movie_repo = movie_repo
        self._next_number = FIRST_MOVIE_NUMBER

    def __len__(self) -> int:
        return self._movie_repo.count()

    def _generate_movie_id(self) -> str:
        """Alloue le prochain identifiant (le compteur ne recule jamais)."""
        movie_id = f"{MOVIE_ID_PREFIX}{self._next_number}"
        self._next_number += 1
        return movie_id

    def _require(self, movie_id: str) -> Movie:
        movie = self._movie_repo.get_by_id(movie_id)
        if movie is None:
            logger.warning(f"Film introuvable: {movie_id}")
            raise NotFoundError(movie_id)
        return movie

    def add(self, title: str, director: str, release_year: int, genre: str) -> str:
        """
        Ajoute un film au catalogue.

        Aucun champ n'est valide : le titre peut etre un doublon et l'annee
        n'est pas controlee.

        Args:
            title: Titre du film
            director: Realisateur
            release_year: Annee de sortie
            genre: Genre

        Returns:
            Identifiant attribue au film
        """
        movie_id = self._generate_movie_id()
        self._movie_repo.save(
            Movie(
                id=movie_id,
                title=title,
                director=director,
                release_year=release_year,
                genre=genre,
            )
        )
        logger.info(f"Film ajoute: {movie_id} ({title})")
        return movie_id

    def rate(self, movie_id: str, rating: int) -> None:
        """
        Ajoute une note a un film.

        L'existence du film est verifiee avant la note.

        Args:
            movie_id: Identifiant du film
            rating: Note entiere dans [1, 5]

        Raises:
            NotFoundError: Si aucun film ne porte cet identifiant
            InvalidRatingError: Si la note n'est pas un entier de [1, 5]
        """
        movie = self._require(movie_id)
        if not _is_valid_rating(rating):
            logger.warning(f"Note refusee pour {movie_id}: {rating}")
            raise InvalidRatingError(rating)

        movie.ratings.append(rating)
        logger.info(f"Note {rating} ajoutee a {movie_id}")

    def average_rating(self, movie_id: str) -> Optional[float]:
        """
        Calcule la note moyenne d'un film.

        Returns:
            Moyenne des notes, ou None si le film est inconnu ou sans note
        """
        movie = self._movie_repo.get_by_id(movie_id)
        if movie is None:
            return None
        return movie.average_rating

    def top_rated(self) -> list[Movie]:
        """
        Liste les films notes, tries par moyenne decroissante.

        Les films sans note sont exclus. Les ex aequo gardent l'ordre
        d'insertion (sorted est stable, y compris avec reverse=True).
        """
        rated = [movie for movie in self._movie_repo.iter_all() if movie.ratings]
        return sorted(rated, key=lambda movie: movie.average_rating, reverse=True)

    def by_genre(self, genre: str) -> list[Movie]:
        """Films dont le genre est exactement `genre`, sans tenir compte de la casse."""
        wanted = genre.lower()
        movies = [m for m in self._movie_repo.iter_all() if m.genre.lower() == wanted]
        logger.debug(f"Recherche genre '{genre}': {len(movies)} resultat(s)")
        return movies

    def by_director(self, director: str) -> list[Movie]:
        """Films dont le realisateur est exactement `director`, sans tenir compte de la casse."""
        wanted = director.lower()
        movies = [m for m in self._movie_repo.iter_all() if m.director.lower() == wanted]
        logger.debug(f"Recherche realisateur '{director}': {len(movies)} resultat(s)")
        return movies

    def search(self, keyword: str) -> list[Movie]:
        """Films dont le titre contient `keyword`, sans tenir compte de la casse."""
        wanted = keyword.lower()
        movies = [m for m in self._movie_repo.iter_all() if wanted in m.title.lower()]
        logger.debug(f"Recherche mot-cle '{keyword}': {len(movies)} resultat(s)")
        return movies

    def get(self, movie_id: str) -> Optional[Movie]:
        """Recupere un film par son ID, None si absent."""
        return self._movie_repo.get_by_id(movie_id)

    def list_all(self) -> list[Movie]:
        """Liste tous les films dans l'ordre d'insertion."""
        return list(self._movie_repo.iter_all())

    def count(self) -> int:
        return self._movie_repo.count()

    def remove(self, movie_id: str) -> None:
        """
        Supprime definitivement un film.

        L'identifiant libere n'est jamais reattribue.

        Raises:
            NotFoundError: Si aucun film ne porte cet identifiant
        """
        if not self._movie_repo.delete(movie_id):
            logger.warning(f"Suppression impossible, film introuvable: {movie_id}")
            raise NotFoundError(movie_id)
        logger.info(f"Film supprime: {movie_id}")
