"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe
MOVIECATALOG_, et peut optionnellement être fournie via un fichier .env.

Elle ne concerne que le logging et l'affichage : le catalogue lui-même n'a
aucun paramètre.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de movie_catalog/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MOVIECATALOG_.
    Exemple : MOVIECATALOG_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIECATALOG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging (fichier + stderr). Console discrète par défaut : le menu
    # interactif partage le terminal avec les logs.
    log_level: str = Field(default="WARNING")
    log_file: Path = Field(default=Path("logs/movie_catalog.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    # Affichage
    rating_decimals: int = Field(default=2, ge=0, le=6)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules (debug -> DEBUG)."""
        return v.strip().upper()
