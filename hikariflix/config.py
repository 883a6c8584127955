"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le prefixe HIKARIFLIX_,
et peut optionnellement être fournie via un fichier .env.

Les URLs des catalogues sont configurables : les instances publiques changent souvent.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hikariflix.utils.constants import MATURE_GENRE_TAG

# Trouver le fichier .env à la racine du projet (parent de hikariflix/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le prefixe HIKARIFLIX_.
    Exemple : HIKARIFLIX_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="HIKARIFLIX_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Métadonnées
    anilist_api_url: str = Field(default="https://graphql.anilist.co")

    # Catalogues d'épisodes et de flux
    hentai_api_url: str = Field(default="https://hentai-api.vercel.app/api")
    hentai_mirror_api_url: str = Field(default="https://hentaistream-api.vercel.app/api")
    anime_api_url: str = Field(default="https://hianime-api.vercel.app")
    http_timeout_seconds: float = Field(default=30.0, gt=0)

    # Classification
    mature_genre_tag: str = Field(default=MATURE_GENRE_TAG)

    # Base de données (favoris)
    database_url: str = Field(default="sqlite:///hikariflix.db")

    # Lecteur vidéo
    player_command: str = Field(default="mpv")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    catalog_log_level: Optional[str] = Field(default=None)
    log_file: Path = Field(default=Path("logs/hikariflix.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator(
        "anilist_api_url", "hentai_api_url", "hentai_mirror_api_url", "anime_api_url"
    )
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Retire le / final pour construire les chemins sans double slash."""
        return v.rstrip("/")
