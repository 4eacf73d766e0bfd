"""
Constantes globales du catalogue.

Ce module contient les constantes partagees par le domaine et le CLI:
- Bornes des notes
- Prefixe des identifiants de films
- Libelles du menu interactif
"""

# Bornes incluses d'une note
MIN_RATING = 1
MAX_RATING = 5

# Prefixe des identifiants generes (MV1, MV2, ...)
MOVIE_ID_PREFIX = "MV"

# Premiere valeur du compteur d'identifiants
FIRST_MOVIE_NUMBER = 1

# Options du menu interactif (cle saisie -> libelle)
MENU_OPTIONS = {
    "1": "Ajouter un film",
    "2": "Noter un film",
    "3": "Note moyenne d'un film",
    "4": "Films les mieux notes",
    "5": "Films par genre",
    "6": "Films par realisateur",
    "7": "Rechercher par mot-cle",
    "8": "Details d'un film",
    "9": "Supprimer un film",
    "10": "Quitter",
}

# Saisies acceptees pour quitter le menu
EXIT_CHOICES = frozenset({"10", "q", "quit"})
