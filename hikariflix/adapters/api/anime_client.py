"""
Client du catalogue anime grand public.

Implémente IAnimeCatalogClient : recherche de série, liste des épisodes et
variantes de flux (sub/dub) d'un épisode.

Usage:
    client = AnimeCatalogClient(base_url="https://hianime-api.example")
    match = await client.search("Attack%20on%20Titan:%20Final%20Season")
    episodes = await client.list_episodes(match.id)
    entries = await client.fetch_streaming_info(episodes[0].id)
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from hikariflix.adapters.api.http import expect_dict, get_json
from hikariflix.core.exceptions import CatalogUnavailable
from hikariflix.core.ports.catalog_clients import (
    AnimeEpisodeRecord,
    AnimeSeriesMatch,
    IAnimeCatalogClient,
    StreamingInfoEntry,
)


def _optional_str(value: Any) -> Optional[str]:
    """Convertit un numéro d'épisode (int ou str) en str, None si absent."""
    if value is None or value == "":
        return None
    return str(value)


class AnimeCatalogClient(IAnimeCatalogClient):
    """
    Client HTTP du catalogue anime.

    Endpoints utilisés:
        GET /api/search?keyword=...      -> {"success", "result": {"id", "title", "data_id", "link"}}
        GET /api/episodes/{series_id}    -> {"success", "results": [{"id", "title", "episode_no"|"number", "japanese_title"}]}
        GET /api/stream?id={episode_id}  -> {"success", "results": {"streamingInfo": [...]}}
    """

    SOURCE = "anime"
    DEFAULT_TIMEOUT = 30.0

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        """
        Initialise le client.

        Args:
            base_url: URL de base de l'API du catalogue
            timeout: Timeout HTTP en secondes
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le crée si nécessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant du catalogue."""
        return self.SOURCE

    async def search(self, keyword: str) -> Optional[AnimeSeriesMatch]:
        """
        Recherche une série par mot-clé.

        Le mot-clé est déjà encodé (deux-points laissés littéraux) : il est
        place directement dans la query string pour ne pas être re-encode.

        Returns:
            AnimeSeriesMatch, ou None si success=false ou sans résultat
        """
        logger.debug(f"anime: recherche '{keyword}'")
        data = expect_dict(
            await get_json(self._get_client(), f"/api/search?keyword={keyword}", source=self.SOURCE),
            self.SOURCE,
        )
        if not data.get("success"):
            return None

        result = data.get("result")
        if not result:
            return None
        try:
            return AnimeSeriesMatch(
                id=str(result["id"]),
                title=result.get("title") or "",
                data_id=_optional_str(result.get("data_id")),
                link=result.get("link") or "",
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise CatalogUnavailable(self.SOURCE, f"malformed search result: {e}") from e

    async def list_episodes(self, series_id: str) -> list[AnimeEpisodeRecord]:
        """
        Liste les épisodes d'une série.

        Returns:
            Épisodes dans l'ordre du catalogue, vide si success=false
        """
        data = expect_dict(
            await get_json(self._get_client(), f"/api/episodes/{series_id}", source=self.SOURCE),
            self.SOURCE,
        )
        results = data.get("results")
        if not data.get("success") or not isinstance(results, list):
            return []

        try:
            return [
                AnimeEpisodeRecord(
                    id=str(item["id"]),
                    title=item.get("title") or "",
                    episode_no=_optional_str(item.get("episode_no")),
                    number=_optional_str(item.get("number")),
                    japanese_title=item.get("japanese_title") or None,
                )
                for item in results
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise CatalogUnavailable(self.SOURCE, f"malformed episode list: {e}") from e

    async def fetch_streaming_info(self, episode_id: str) -> list[StreamingInfoEntry]:
        """
        Récupère les entrées streamingInfo d'un épisode.

        L'ID d'épisode peut contenir "?ep=" : il est passé en paramètre pour
        être correctement encode.

        Raises:
            CatalogUnavailable: Erreur transport, success=false ou forme inattendue
        """
        data = expect_dict(
            await get_json(
                self._get_client(), "/api/stream", source=self.SOURCE, params={"id": episode_id}
            ),
            self.SOURCE,
        )
        if not data.get("success"):
            raise CatalogUnavailable(self.SOURCE, f"no streaming data for episode {episode_id}")

        results = data.get("results")
        if not isinstance(results, dict) or not isinstance(results.get("streamingInfo"), list):
            raise CatalogUnavailable(self.SOURCE, "missing 'streamingInfo' list")

        try:
            return [self._parse_streaming_entry(item) for item in results["streamingInfo"]]
        except (KeyError, TypeError, AttributeError) as e:
            raise CatalogUnavailable(self.SOURCE, f"malformed streaming info: {e}") from e

    @classmethod
    def _parse_streaming_entry(cls, item: dict[str, Any]) -> StreamingInfoEntry:
        """
        Aplatit une entrée {status, value: {decryptionResult: {...}}}.

        Raises:
            CatalogUnavailable: Si sources/tracks ne sont pas des listes d'objets
                ou si intro/outro ne sont pas des objets
        """
        status = item.get("status") or ""
        decryption = (item.get("value") or {}).get("decryptionResult")
        if not decryption:
            return StreamingInfoEntry(status=status)

        source = decryption.get("source") or {}
        return StreamingInfoEntry(
            status=status,
            variant_type=decryption.get("type"),
            sources=cls._object_list(source, "sources"),
            tracks=cls._object_list(source, "tracks"),
            encrypted=bool(source.get("encrypted", False)),
            intro=cls._optional_object(source, "intro"),
            outro=cls._optional_object(source, "outro"),
            server=str(decryption.get("server") or ""),
        )

    @classmethod
    def _object_list(cls, source: dict[str, Any], key: str) -> list[dict[str, Any]]:
        """Liste d'objets JSON sous `key` (vide si absente)."""
        value = source.get(key) or []
        if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
            raise CatalogUnavailable(cls.SOURCE, f"'{key}' is not a list of objects")
        return value

    @classmethod
    def _optional_object(cls, source: dict[str, Any], key: str) -> Optional[dict[str, Any]]:
        """Objet JSON sous `key`, None si absent."""
        value = source.get(key)
        if value is not None and not isinstance(value, dict):
            raise CatalogUnavailable(cls.SOURCE, f"'{key}' is not an object")
        return value

    async def close(self) -> None:
        """Ferme le client HTTP et libère les ressources."""
        if self._client:
            await self._client.aclose()
            self._client = None
