"""
Couche adaptateurs (infrastructure).

Les adaptateurs branchent le domaine sur le monde exterieur.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + menu interactif Rich)

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""
