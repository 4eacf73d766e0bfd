"""
Configuration du logging du catalogue via loguru.

Deux sorties :
- Console (stderr) : colorée, discrète par défaut (WARNING) car elle partage
  le terminal avec le menu interactif
- Fichier : JSON avec rotation, niveau DEBUG, pour relire une session après coup

Le menu désactive les logs du package pendant ses actions (voir
adapters/cli/helpers.suppress_loguru) ; seuls les messages du menu s'affichent.
"""

import sys
from pathlib import Path

from loguru import logger


def configure_logging(
    log_level: str = "WARNING",
    log_file: Path = Path("logs/movie_catalog.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Remplace le handler loguru par défaut par les sorties console et fichier.

    Args :
        log_level : Niveau minimum affiché sur stderr (déjà ajusté par -v/-q)
        log_file : Fichier JSON de la session, créé avec ses répertoires parents
        rotation_size : Taille déclenchant la rotation (ex: "10 MB")
        retention_count : Nombre d'archives zip conservées
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    # Le processus est mono-thread : écriture synchrone, sans file d'attente
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
    )

    logger.debug("Logging configuré", log_file=str(log_file), level=log_level)


def resolve_log_level(base_level: str, verbose: int = 0, quiet: bool = False) -> str:
    """
    Détermine le niveau console à partir des options --verbose/--quiet.

    --quiet l'emporte sur --verbose.

    Args:
        base_level: Niveau configuré (Settings.log_level)
        verbose: Nombre de -v (1 -> INFO, 2+ -> DEBUG)
        quiet: Si True, seules les erreurs sont affichées

    Returns:
        Nom du niveau loguru
    """
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return base_level
