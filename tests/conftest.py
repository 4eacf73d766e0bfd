"""
Fixtures pytest partagees pour les tests du catalogue.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec fichier de log temporaire
- Repository en memoire et catalogue neuf pour chaque test
- Catalogue pre-rempli pour les tests de requetes
"""

from pathlib import Path

import pytest

from movie_catalog.config import Settings
from movie_catalog.infrastructure.persistence.memory import InMemoryMovieRepository
from movie_catalog.services.catalog import CatalogService


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le fichier de log de chaque test.
    """
    return Settings(
        log_level="DEBUG",
        log_file=tmp_path / "logs" / "test.log",
        rating_decimals=2,
    )


@pytest.fixture
def movie_repository() -> InMemoryMovieRepository:
    """Repository en memoire vide."""
    return InMemoryMovieRepository()


@pytest.fixture
def catalog(movie_repository: InMemoryMovieRepository) -> CatalogService:
    """Catalogue vide, compteur d'identifiants a 1."""
    return CatalogService(movie_repo=movie_repository)


@pytest.fixture
def populated_catalog(catalog: CatalogService) -> CatalogService:
    """
    Catalogue avec quatre films (MV1 a MV4).

    - MV1 Inception (Nolan, SciFi) : notes 5, 3 -> 4.0
    - MV2 The Matrix (Wachowski, SciFi) : note 5 -> 5.0
    - MV3 Interstellar (Nolan, Drama) : aucune note
    - MV4 Heat (Mann, Action) : notes 4, 4 -> 4.0
    """
    catalog.add("Inception", "Nolan", 2010, "SciFi")
    catalog.add("The Matrix", "Wachowski", 1999, "SciFi")
    catalog.add("Interstellar", "Nolan", 2014, "Drama")
    catalog.add("Heat", "Mann", 1995, "Action")
    catalog.rate("MV1", 5)
    catalog.rate("MV1", 3)
    catalog.rate("MV2", 5)
    catalog.rate("MV4", 4)
    catalog.rate("MV4", 4)
    return catalog
