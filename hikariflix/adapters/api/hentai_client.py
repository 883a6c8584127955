"""
Client des catalogues adultes (catalogue principal et miroir).

Implémente IMatureCatalogClient. Le même client sert pour les deux catalogues,
seuls le base_url et l'identifiant de source changent. Le miroir est
interroge avec un suffixe de slug ajoute au mot-clé.

Usage:
    client = HentaiCatalogClient(base_url="https://hentai-api.example/api", source="hentai")
    results = await client.search("Overflow")
    mirror = HentaiCatalogClient(base_url=..., source="hentai-mirror")
    results = await mirror.search("Overflow", suffix="season-1")
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from hikariflix.adapters.api.http import expect_dict, get_json
from hikariflix.core.exceptions import CatalogUnavailable
from hikariflix.core.ports.catalog_clients import (
    HentaiEpisodeRecord,
    HentaiSearchResult,
    IMatureCatalogClient,
)


class HentaiCatalogClient(IMatureCatalogClient):
    """
    Client HTTP d'un catalogue adulte.

    Endpoint utilisé:
        GET {base_url}/search/{keyword}[-{suffix}]
        -> {"results": [{"name", "episodes": [{"id", "name", "slug", "link"}], "streams": [...]}]}

    Attributes:
        DEFAULT_TIMEOUT: Timeout HTTP par défaut en secondes
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        base_url: str,
        source: str = "hentai",
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialise le client.

        Args:
            base_url: URL de base de l'API du catalogue
            source: Identifiant utilisé dans les logs et les erreurs
            timeout: Timeout HTTP en secondes
        """
        self._base_url = base_url.rstrip("/")
        self._source = source
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
        return self._source

    async def search(
        self,
        keyword: str,
        suffix: Optional[str] = None,
    ) -> list[HentaiSearchResult]:
        """
        Recherche une série sur le catalogue.

        Le mot-clé est déjà encodé : il est inséré tel quel dans le chemin.

        Args:
            keyword: Mot-clé assaini et encodé en pourcentage
            suffix: Suffixe de slug (miroir uniquement)

        Returns:
            Liste de HentaiSearchResult (vide si aucun résultat)
        """
        slug = f"{keyword}-{suffix}" if suffix else keyword
        logger.debug(f"{self._source}: recherche '{slug}'")

        data = expect_dict(
            await get_json(self._get_client(), f"/search/{slug}", source=self._source),
            self._source,
        )
        raw_results = data.get("results")
        if raw_results is None:
            return []
        if not isinstance(raw_results, list):
            raise CatalogUnavailable(self._source, "'results' is not a list")

        try:
            return [self._parse_result(item) for item in raw_results]
        except (KeyError, TypeError, AttributeError) as e:
            raise CatalogUnavailable(self._source, f"malformed result: {e}") from e

    @staticmethod
    def _parse_result(item: dict[str, Any]) -> HentaiSearchResult:
        """Transforme un résultat JSON brut en HentaiSearchResult."""
        episodes = [
            HentaiEpisodeRecord(
                id=str(ep["id"]),
                name=ep.get("name") or "",
                link=ep.get("link") or "",
                slug=ep.get("slug"),
            )
            for ep in item.get("episodes") or []
        ]
        return HentaiSearchResult(
            name=item.get("name") or "",
            episodes=episodes,
            streams=list(item.get("streams") or []),
        )

    async def close(self) -> None:
        """Ferme le client HTTP et libère les ressources."""
        if self._client:
            await self._client.aclose()
            self._client = None
