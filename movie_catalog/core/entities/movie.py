"""
Entite film du catalogue.

Represente une fiche du catalogue en memoire avec son historique de notes.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Movie:
    """
    Fiche d'un film dans le catalogue.

    L'identifiant est attribue par le catalogue a la creation et n'est
    jamais reattribue. Les notes sont uniquement ajoutees, jamais
    modifiees ni retirees.

    Attributes:
        id: Identifiant opaque attribue par le catalogue (ex: "MV1")
        title: Titre libre
        director: Realisateur
        release_year: Annee de sortie (non validee)
        genre: Genre libre
        ratings: Historique des notes, chacune dans [1, 5]
    """

    id: str
    title: str
    director: str
    release_year: int
    genre: str
    ratings: list[int] = field(default_factory=list)

    @property
    def rating_count(self) -> int:
        """Nombre de notes recues."""
        return len(self.ratings)

    @property
    def average_rating(self) -> Optional[float]:
        """Moyenne arithmetique des notes, None si aucune note."""
        if not self.ratings:
            return None
        return sum(self.ratings) / len(self.ratings)
