"""
Recherche d'épisodes à partir des métadonnées AniList.

TitleLookupService porte la relance avec le titre alternatif, explicitement
et au plus une fois : romaji d'abord pour le contenu adulte, puis le titre
anglais si la première résolution n'a rien donné. Le résolveur lui-même ne
boucle jamais.
"""

from loguru import logger

from hikariflix.core.ports.metadata import IMetadataClient
from hikariflix.core.value_objects.media_title import Classification, MediaTitle
from hikariflix.core.value_objects.resolution import ResolutionOutcome
from hikariflix.services.episode_resolver import EpisodeResolver
from hikariflix.utils.constants import MATURE_GENRE_TAG


class TitleLookupService:
    """
    Service applicatif : titre AniList -> ResolutionOutcome.

    Example:
        service = TitleLookupService(resolver, anilist_client)
        media, outcome = await service.lookup_by_id(16498)
    """

    def __init__(
        self,
        resolver: EpisodeResolver,
        metadata_client: IMetadataClient,
        mature_genre_tag: str = MATURE_GENRE_TAG,
    ) -> None:
        self._resolver = resolver
        self._metadata_client = metadata_client
        self._mature_genre_tag = mature_genre_tag

    async def lookup(self, media: MediaTitle) -> ResolutionOutcome:
        """
        Résout les épisodes d'un anime.

        MATURE : resolve(romaji), puis une seule relance avec le titre anglais
        s'il existe et diffère. STANDARD : resolve(anglais ou romaji), sans relance.
        """
        classification = media.classify(self._mature_genre_tag)

        if classification is Classification.STANDARD:
            return await self._resolver.resolve(media.english or media.romaji, classification)

        outcome = await self._resolver.resolve(media.romaji, classification)
        if outcome.is_resolved:
            return outcome

        alternate = media.english
        if not alternate or alternate == media.romaji:
            return outcome

        logger.info(f"Relance avec le titre alternatif '{alternate}'")
        return await self._resolver.resolve(alternate, classification)

    async def lookup_by_id(self, media_id: int) -> tuple[MediaTitle, ResolutionOutcome]:
        """
        Récupère les métadonnées puis résout les épisodes.

        Raises:
            MetadataUnavailable: Si AniList ne renvoie pas l'anime
        """
        media = await self._metadata_client.get_media(media_id)
        return media, await self.lookup(media)
