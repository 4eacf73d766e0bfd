"""
Movie Catalog - Gestion interactive d'un catalogue de films en memoire.

Ce package permet d'ajouter, noter, rechercher et supprimer des films
au cours d'une session ; rien n'est persiste.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, exceptions)
- services/ : Couche application (CatalogService)
- infrastructure/ : Stockage en memoire
- adapters/ : Couche interface (CLI)
"""

__version__ = "0.1.0"
