"""
Affichage Rich des fiches du catalogue.

Fournit la console partagee, le rendu tabulaire des films et le menu.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from movie_catalog.core.entities.movie import Movie
from movie_catalog.utils.constants import MENU_OPTIONS

# Console globale pour tous les affichages
console = Console()


def format_average(average: Optional[float], decimals: int = 2) -> str:
    """
    Formate une note moyenne pour l'affichage.

    Args:
        average: Moyenne ou None
        decimals: Nombre de decimales

    Returns:
        Moyenne formatee (ex: "4.00"), ou "-" si aucune note
    """
    if average is None:
        return "-"
    return f"{average:.{decimals}f}"


def build_movies_table(title: str, movies: list[Movie], decimals: int = 2) -> Table:
    """Construit un tableau Rich listant les films dans l'ordre recu."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Titre", style="bold")
    table.add_column("Realisateur")
    table.add_column("Annee", justify="right")
    table.add_column("Genre")
    table.add_column("Notes", justify="right")
    table.add_column("Moyenne", justify="right", style="green")

    for movie in movies:
        table.add_row(
            movie.id,
            escape(movie.title),
            escape(movie.director),
            str(movie.release_year),
            escape(movie.genre),
            str(movie.rating_count),
            format_average(movie.average_rating, decimals),
        )

    return table


def display_movies(title: str, movies: list[Movie], decimals: int = 2) -> None:
    """Affiche une liste de films, ou un message si elle est vide."""
    if not movies:
        console.print(f"[yellow]{title} : aucun film.[/yellow]")
        return
    console.print(build_movies_table(title, movies, decimals))


def display_menu() -> None:
    """Affiche le menu principal."""
    console.print("\n[bold]Gestion du catalogue de films[/bold]")
    for key, label in MENU_OPTIONS.items():
        console.print(f"  [cyan]{key:>2}[/cyan]. {label}")
