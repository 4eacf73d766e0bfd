"""Package CLI : commandes Typer et menu interactif Rich."""
