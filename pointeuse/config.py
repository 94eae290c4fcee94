"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe POINTEUSE_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pointeuse.utils.constants import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_START_SKEW_MINUTES,
    MAX_PAGE_SIZE,
)

# Trouver le fichier .env à la racine du projet (parent de pointeuse/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe POINTEUSE_.
    Exemple : POINTEUSE_DEFAULT_PAGE_SIZE=50
    """

    model_config = SettingsConfigDict(
        env_prefix="POINTEUSE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///pointeuse.db")

    # Pagination des worklogs
    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    max_page_size: int = Field(default=MAX_PAGE_SIZE, ge=1)

    # Tolérance sur une heure de début dans le futur (horloges clientes décalées)
    max_start_skew_minutes: int = Field(default=DEFAULT_START_SKEW_MINUTES, ge=0)

    # En-tête HTTP portant l'utilisateur authentifié en amont
    user_header: str = Field(default="X-User-Id")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/pointeuse.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules."""
        return str(v).upper()
