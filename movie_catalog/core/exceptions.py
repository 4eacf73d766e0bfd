"""
Exceptions metier du catalogue.

Toutes les erreurs sont recuperables : elles signalent une saisie invalide
ou une fiche absente, jamais une ressource indisponible.
"""

from movie_catalog.utils.constants import MAX_RATING, MIN_RATING


class CatalogError(Exception):
    """Classe de base des erreurs levees par le catalogue."""


class NotFoundError(CatalogError):
    """
    Exception levee quand aucun film ne correspond a l'identifiant.

    Attributes:
        movie_id: Identifiant recherche
    """

    def __init__(self, movie_id: str) -> None:
        self.movie_id = movie_id
        super().__init__(f"Film introuvable : {movie_id}")


class InvalidRatingError(CatalogError):
    """
    Exception levee quand une note sort de l'intervalle autorise.

    Attributes:
        rating: Note refusee
        min_rating: Borne basse incluse
        max_rating: Borne haute incluse
    """

    def __init__(
        self,
        rating: int,
        min_rating: int = MIN_RATING,
        max_rating: int = MAX_RATING,
    ) -> None:
        self.rating = rating
        self.min_rating = min_rating
        self.max_rating = max_rating
        super().__init__(
            f"La note doit etre comprise entre {min_rating} et {max_rating} "
            f"(recu : {rating})"
        )
