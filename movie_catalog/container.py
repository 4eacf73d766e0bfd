"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour le CLI.
Le repository et le catalogue sont des singletons : une session = un catalogue.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.memory import InMemoryMovieRepository
from .services.catalog import CatalogService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        catalog = container.catalog_service()
        catalog.add("Inception", "Nolan", 2010, "SciFi")
    """

    # Configuration - singleton chargee une seule fois
    config = providers.Singleton(Settings)

    # Stockage en memoire - vit aussi longtemps que le container
    movie_repository = providers.Singleton(InMemoryMovieRepository)

    # Catalogue - singleton pour conserver le compteur d'identifiants
    catalog_service = providers.Singleton(
        CatalogService,
        movie_repo=movie_repository,
    )
