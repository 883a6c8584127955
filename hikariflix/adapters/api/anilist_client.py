"""
Client AniList (GraphQL) pour les métadonnées anime.

Implémente IMetadataClient. Fournit les titres (romaji, anglais, natif),
les genres (dont le tag adulte qui choisit la chaîne de recherche) et les
champs d'affichage.

Usage:
    client = AniListClient()
    media = await client.get_media(16498)
    results = await client.search_media("Shingeki no Kyojin")
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from hikariflix.adapters.api.http import expect_dict, get_json
from hikariflix.core.exceptions import CatalogUnavailable, MetadataUnavailable
from hikariflix.core.ports.metadata import IMetadataClient
from hikariflix.core.value_objects.media_title import MediaTitle

_MEDIA_FIELDS = """
    id
    title { romaji english native }
    coverImage { large }
    bannerImage
    description
    genres
    averageScore
    popularity
    episodes
    season
    seasonYear
    status
    studios(isMain: true) { nodes { name } }
"""

GET_ANIME_DETAILS = f"""
query ($id: Int) {{
  Media(id: $id, type: ANIME) {{
    {_MEDIA_FIELDS}
  }}
}}
"""

SEARCH_ANIME = f"""
query ($search: String, $page: Int, $perPage: Int) {{
  Page(page: $page, perPage: $perPage) {{
    media(search: $search, type: ANIME) {{
      {_MEDIA_FIELDS}
    }}
  }}
}}
"""


class AniListClient(IMetadataClient):
    """
    Client GraphQL AniList.

    Attributes:
        ANILIST_API_URL: Endpoint GraphQL par défaut
        SOURCE: Identifiant utilisé dans les logs
    """

    ANILIST_API_URL = "https://graphql.anilist.co"
    SOURCE = "anilist"

    def __init__(self, api_url: str = ANILIST_API_URL, timeout: float = 30.0) -> None:
        self._api_url = api_url
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le crée si nécessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json", "Content-Type": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    async def _query(self, query: str, variables: dict[str, Any], media_id: Optional[int] = None) -> dict:
        """
        Exécute une requête GraphQL et retourne le champ "data".

        Raises:
            MetadataUnavailable: Erreur HTTP, JSON invalide ou erreurs GraphQL
        """
        try:
            payload = expect_dict(
                await get_json(
                    self._get_client(),
                    self._api_url,
                    source=self.SOURCE,
                    method="POST",
                    json={"query": query, "variables": variables},
                ),
                self.SOURCE,
            )
        except CatalogUnavailable as e:
            raise MetadataUnavailable(e.reason, media_id=media_id) from e

        errors = payload.get("errors")
        if errors:
            messages = "; ".join(
                str(err.get("message", "?")) if isinstance(err, dict) else str(err)
                for err in (errors if isinstance(errors, list) else [errors])
            )
            raise MetadataUnavailable(messages, media_id=media_id)
        data = payload.get("data") or {}
        if not isinstance(data, dict):
            raise MetadataUnavailable("'data' is not an object", media_id=media_id)
        return data

    async def get_media(self, media_id: int) -> MediaTitle:
        """
        Récupère un anime par son ID AniList.

        Raises:
            MetadataUnavailable: ID inconnu ou erreur de l'API
        """
        data = await self._query(GET_ANIME_DETAILS, {"id": media_id}, media_id=media_id)
        media = data.get("Media")
        if not media:
            raise MetadataUnavailable("media not found", media_id=media_id)
        result = self._to_media_title(media, media_id=media_id)
        logger.debug(f"AniList: media {media_id} -> {result.romaji}")
        return result

    async def search_media(self, query: str, page: int = 1, per_page: int = 20) -> list[MediaTitle]:
        """Recherche des animes par titre (une page de résultats)."""
        data = await self._query(SEARCH_ANIME, {"search": query, "page": page, "perPage": per_page})
        try:
            items = (data.get("Page") or {}).get("media") or []
        except AttributeError as e:
            raise MetadataUnavailable(f"malformed search page: {e}") from e
        if not isinstance(items, list):
            raise MetadataUnavailable("'media' is not a list")
        return [self._to_media_title(item) for item in items]

    @classmethod
    def _to_media_title(cls, media: Any, media_id: Optional[int] = None) -> MediaTitle:
        """
        Transforme un objet Media GraphQL en MediaTitle.

        Raises:
            MetadataUnavailable: Objet Media sans id ou de forme inattendue
        """
        try:
            return cls._map_media(media)
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise MetadataUnavailable(f"malformed media: {e!r}", media_id=media_id) from e

    @staticmethod
    def _map_media(media: dict[str, Any]) -> MediaTitle:
        title = media.get("title") or {}
        studios = ((media.get("studios") or {}).get("nodes")) or []
        return MediaTitle(
            id=int(media["id"]),
            romaji=title.get("romaji") or "",
            english=title.get("english"),
            native=title.get("native"),
            genres=tuple(media.get("genres") or ()),
            description=media.get("description"),
            average_score=media.get("averageScore"),
            popularity=media.get("popularity"),
            episodes=media.get("episodes"),
            status=media.get("status"),
            season=media.get("season"),
            season_year=media.get("seasonYear"),
            studios=tuple(s["name"] for s in studios if s.get("name")),
            cover_image=(media.get("coverImage") or {}).get("large"),
            banner_image=media.get("bannerImage"),
        )

    async def close(self) -> None:
        """Ferme le client HTTP et libère les ressources."""
        if self._client:
            await self._client.aclose()
            self._client = None
