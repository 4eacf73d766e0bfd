"""
Couche domaine (core).

Contient les entites metier, les ports (interfaces abstraites) et les exceptions.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- entities/ : Entites metier (Movie)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- exceptions : Erreurs metier (NotFoundError, InvalidRatingError)
"""
