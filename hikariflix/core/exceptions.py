"""
Exceptions du domaine HikariFlix.

Hiérarchie:
- HikariFlixError : base de toutes les erreurs du projet
- CatalogUnavailable : échec transport/parsing d'un catalogue externe
- MetadataUnavailable : échec de la requête de métadonnées (AniList)
- InvalidTransition : appel illégal sur la machine d'état de lecture

CatalogUnavailable ne remonte jamais jusqu'à la CLI : les résolveurs la
convertissent en résultats du domaine (EXHAUSTED, échec de flux).
"""

from typing import Optional


class HikariFlixError(Exception):
    """Erreur de base du projet."""


class CatalogUnavailable(HikariFlixError):
    """
    Levée quand un catalogue externe ne répond pas ou renvoie une réponse illisible.

    Attributes:
        source: Identifiant du catalogue ("hentai", "hentai-mirror", "anime")
        reason: Description courte de l'échec
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Catalog '{source}' unavailable: {reason}")


class MetadataUnavailable(HikariFlixError):
    """
    Levée quand les métadonnées d'un anime ne peuvent pas être obtenues.

    Attributes:
        media_id: ID AniList demandé (None pour une recherche)
    """

    def __init__(self, reason: str, media_id: Optional[int] = None) -> None:
        self.media_id = media_id
        self.reason = reason
        super().__init__(f"Metadata unavailable ({media_id}): {reason}")


class InvalidTransition(HikariFlixError):
    """Transition demandée depuis un état qui ne l'autorise pas."""
