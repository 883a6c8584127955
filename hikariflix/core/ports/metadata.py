"""
Port du collaborateur de métadonnées (AniList).

Le résolveur n'utilise que romaji, english et les genres ; les autres champs
de MediaTitle servent à l'affichage.
"""

from abc import ABC, abstractmethod

from hikariflix.core.value_objects.media_title import MediaTitle


class IMetadataClient(ABC):
    """Interface de la source de métadonnées anime."""

    @abstractmethod
    async def get_media(self, media_id: int) -> MediaTitle:
        """
        Récupère un anime par son ID numérique.

        Raises:
            MetadataUnavailable: ID inconnu ou erreur de l'API
        """
        ...

    @abstractmethod
    async def search_media(self, query: str, page: int = 1, per_page: int = 20) -> list[MediaTitle]:
        """
        Recherche des animes par titre.

        Raises:
            MetadataUnavailable: Erreur de l'API
        """
        ...
