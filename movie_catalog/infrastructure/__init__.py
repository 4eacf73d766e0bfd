"""
Couche infrastructure du catalogue.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- persistence/ : Stockage en memoire des fiches

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer l'implementation sans modifier la logique metier.
"""
