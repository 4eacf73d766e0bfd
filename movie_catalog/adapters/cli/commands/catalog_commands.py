"""
Commandes CLI du catalogue (shell interactif).
"""

from movie_catalog.adapters.cli.helpers import with_container
from movie_catalog.adapters.cli.shell import run_shell


def shell() -> None:
    """Lance le menu interactif de gestion du catalogue."""
    _shell()


@with_container()
def _shell(container) -> None:
    """Implementation du shell avec un catalogue neuf."""
    config = container.config()
    run_shell(
        container.catalog_service(),
        rating_decimals=config.rating_decimals,
    )
