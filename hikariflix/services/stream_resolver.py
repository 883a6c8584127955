"""
Récupération des variantes de flux d'un épisode.

Un seul appel au catalogue de flux, sans repli ni relance. Un échec, qu'il
vienne du transport ou d'une réponse de forme inattendue, est converti en
StreamFetchResult.failed() ("streaming info not available").
"""

from loguru import logger

from hikariflix.core.exceptions import CatalogUnavailable
from hikariflix.core.ports.catalog_clients import IAnimeCatalogClient
from hikariflix.core.value_objects.resolution import StreamFetchResult
from hikariflix.core.value_objects.stream import StreamVariant
from hikariflix.services.episode_normalizer import variant_from_streaming_entry


class StreamResolver:
    """Épisode -> liste ordonnée de StreamVariant."""

    def __init__(self, stream_client: IAnimeCatalogClient) -> None:
        self._stream_client = stream_client

    async def fetch_variants(self, episode_id: str) -> StreamFetchResult:
        """
        Récupère les variantes (sub, dub...) d'un épisode.

        Les entrées non exploitables (statut rejeté, type inconnu) sont
        ignorées ; l'ordre du catalogue est conservé.

        Returns:
            succeeded(variants), éventuellement vide, ou failed() en cas d'échec
        """
        try:
            entries = await self._stream_client.fetch_streaming_info(episode_id)
        except CatalogUnavailable as e:
            logger.warning(f"Streaming info not available for episode {episode_id}: {e}")
            return StreamFetchResult.failed()

        variants: list[StreamVariant] = []
        try:
            for entry in entries:
                variant = variant_from_streaming_entry(entry)
                if variant is not None:
                    variants.append(variant)
        except (AttributeError, KeyError, TypeError) as e:
            logger.warning(f"Streaming info malformed for episode {episode_id}: {e!r}")
            return StreamFetchResult.failed()

        logger.debug(
            f"Épisode {episode_id}: {len(variants)} variante(s) "
            f"({', '.join(v.kind.value for v in variants) or 'aucune'})"
        )
        return StreamFetchResult.succeeded(variants)
