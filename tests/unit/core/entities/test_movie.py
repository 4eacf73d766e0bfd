"""
Tests pour l'entite Movie.

Verifie les valeurs par defaut et les proprietes calculees.
"""

from movie_catalog.core.entities.movie import Movie


class TestMovieEntity:
    """Tests pour l'entite Movie."""

    def test_movie_ratings_default_empty(self):
        """Une fiche neuve n'a aucune note."""
        movie = Movie(id="MV1", title="Inception", director="Nolan", release_year=2010, genre="SciFi")
        assert movie.ratings == []
        assert movie.rating_count == 0

    def test_ratings_not_shared_between_instances(self):
        """Chaque fiche possede sa propre liste de notes."""
        first = Movie(id="MV1", title="A", director="X", release_year=2000, genre="G")
        second = Movie(id="MV2", title="B", director="Y", release_year=2001, genre="G")
        first.ratings.append(5)
        assert second.ratings == []

    def test_average_rating_none_without_ratings(self):
        """La moyenne est None (et non 0) sans note."""
        movie = Movie(id="MV1", title="A", director="X", release_year=2000, genre="G")
        assert movie.average_rating is None

    def test_average_rating_is_mean(self):
        """La moyenne est la moyenne arithmetique des notes."""
        movie = Movie(
            id="MV1", title="A", director="X", release_year=2000, genre="G",
            ratings=[5, 3, 4],
        )
        assert movie.average_rating == 4.0
        assert movie.rating_count == 3

    def test_release_year_not_validated(self):
        """L'annee n'est pas controlee."""
        movie = Movie(id="MV1", title="A", director="X", release_year=-42, genre="G")
        assert movie.release_year == -42
