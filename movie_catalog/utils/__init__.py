"""
Utilitaires et constantes du catalogue.

Ce module contient les constantes partagees.
"""

from movie_catalog.utils.constants import (
    MAX_RATING,
    MENU_OPTIONS,
    MIN_RATING,
    MOVIE_ID_PREFIX,
)

__all__ = [
    "MIN_RATING",
    "MAX_RATING",
    "MOVIE_ID_PREFIX",
    "MENU_OPTIONS",
]
