"""
Boucle interactive du catalogue.

Affiche le menu, lit les saisies et appelle le CatalogService. Les erreurs
du catalogue et les saisies numeriques invalides sont affichees puis la
boucle continue : seule l'option Quitter (ou la fin de l'entree) la termine.

Les logs loguru du package sont desactives pendant chaque action : le menu
affiche lui-meme les erreurs.
"""

from typing import Callable

from rich.markup import escape
from rich.prompt import Prompt

from movie_catalog.adapters.cli.display import (
    console,
    display_menu,
    display_movies,
    format_average,
)
from movie_catalog.adapters.cli.helpers import parse_int, suppress_loguru
from movie_catalog.core.exceptions import CatalogError
from movie_catalog.services.catalog import CatalogService
from movie_catalog.utils.constants import EXIT_CHOICES, MAX_RATING, MIN_RATING


def _ask(label: str) -> str:
    return Prompt.ask(f"[bold]{label}[/bold]", console=console)


def _add_movie(catalog: CatalogService, decimals: int) -> None:
    title = _ask("Titre")
    director = _ask("Realisateur")
    year_text = _ask("Annee de sortie")
    genre = _ask("Genre")

    if not title.strip():
        console.print("[red]Le titre est obligatoire.[/red]")
        return
    release_year = parse_int(year_text)
    if release_year is None:
        console.print(f"[red]Annee invalide : {escape(year_text)}[/red]")
        return

    movie_id = catalog.add(title, director, release_year, genre)
    console.print(f"[green]Film ajoute avec l'ID {movie_id}[/green]")


def _rate_movie(catalog: CatalogService, decimals: int) -> None:
    movie_id = _ask("ID du film")
    rating_text = _ask(f"Note ({MIN_RATING}-{MAX_RATING})")

    rating = parse_int(rating_text)
    if rating is None:
        console.print(f"[red]Note invalide : {escape(rating_text)}[/red]")
        return

    try:
        catalog.rate(movie_id, rating)
    except CatalogError as e:
        console.print(f"[red]Erreur : {escape(str(e))}[/red]")
        return
    console.print("[green]Note ajoutee.[/green]")


def _show_average(catalog: CatalogService, decimals: int) -> None:
    average = catalog.average_rating(_ask("ID du film"))
    if average is None:
        console.print("[yellow]Aucune note disponible.[/yellow]")
    else:
        console.print(f"Note moyenne : [bold]{format_average(average, decimals)}[/bold]")


def _show_top_rated(catalog: CatalogService, decimals: int) -> None:
    movies = catalog.top_rated()
    display_movies("Films les mieux notes", movies, decimals)


def _show_by_genre(catalog: CatalogService, decimals: int) -> None:
    genre = _ask("Genre")
    movies = catalog.by_genre(genre)
    display_movies(f"Films du genre {escape(genre)}", movies, decimals)


def _show_by_director(catalog: CatalogService, decimals: int) -> None:
    director = _ask("Realisateur")
    movies = catalog.by_director(director)
    display_movies(f"Films de {escape(director)}", movies, decimals)


def _search(catalog: CatalogService, decimals: int) -> None:
    keyword = _ask("Mot-cle")
    movies = catalog.search(keyword)
    display_movies("Resultats de la recherche", movies, decimals)


def _show_details(catalog: CatalogService, decimals: int) -> None:
    movie = catalog.get(_ask("ID du film"))
    if movie is None:
        console.print("[yellow]Film introuvable.[/yellow]")
        return
    display_movies("Details du film", [movie], decimals)


def _remove_movie(catalog: CatalogService, decimals: int) -> None:
    movie_id = _ask("ID du film")
    try:
        catalog.remove(movie_id)
    except CatalogError as e:
        console.print(f"[red]Erreur : {escape(str(e))}[/red]")
        return
    console.print(f"[green]Film {escape(movie_id)} supprime.[/green]")


# Option du menu -> action
ACTIONS: dict[str, Callable[[CatalogService, int], None]] = {
    "1": _add_movie,
    "2": _rate_movie,
    "3": _show_average,
    "4": _show_top_rated,
    "5": _show_by_genre,
    "6": _show_by_director,
    "7": _search,
    "8": _show_details,
    "9": _remove_movie,
}


def run_shell(catalog: CatalogService, rating_decimals: int = 2) -> None:
    """
    Boucle interactive du menu principal.

    Args:
        catalog: Catalogue de la session
        rating_decimals: Decimales affichees pour les moyennes
    """
    while True:
        display_menu()
        try:
            choice = _ask("Choix").strip().lower()
        except (EOFError, KeyboardInterrupt):
            # Fin de l'entree standard : on sort proprement
            console.print()
            break

        if choice in EXIT_CHOICES:
            break

        action = ACTIONS.get(choice)
        if action is None:
            console.print("[yellow]Option invalide, reessayez.[/yellow]")
            continue

        # Les logs du catalogue ne doivent pas se meler aux messages du menu
        try:
            with suppress_loguru():
                action(catalog, rating_decimals)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

    console.print("[dim]Au revoir.[/dim]")
