"""
Requêtes HTTP partagées par les clients de catalogues.

Convertit toutes les erreurs de transport, les statuts HTTP en erreur et les
corps non-JSON en CatalogUnavailable. Aucune relance : la politique de repli
est la chaîne de stratégies du résolveur, rien d'autre.

Usage:
    data = await get_json(client, "/search/naruto", source="hentai")
"""

from typing import Any

import httpx
from loguru import logger

from hikariflix.core.exceptions import CatalogUnavailable


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    source: str,
    method: str = "GET",
    **kwargs,
) -> Any:
    """
    Exécute une requête HTTP et retourne le corps JSON décodé.

    Args:
        client: Client httpx async a utiliser
        url: URL (relative au base_url du client ou absolue)
        source: Identifiant du catalogue, repris dans l'exception
        method: Méthode HTTP (GET par défaut)
        **kwargs: Arguments supplémentaires passes a client.request()

    Returns:
        Le JSON décodé (dict, list...)

    Raises:
        CatalogUnavailable: Erreur réseau, statut 4xx/5xx ou JSON invalide
    """
    try:
        response = await client.request(method, url, **kwargs)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.debug(f"{source}: HTTP {e.response.status_code} sur {e.request.url}")
        raise CatalogUnavailable(source, f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        logger.debug(f"{source}: erreur transport {type(e).__name__} sur {url}")
        raise CatalogUnavailable(source, f"{type(e).__name__}: {e}") from e

    try:
        return response.json()
    except ValueError as e:
        raise CatalogUnavailable(source, "invalid JSON body") from e


def expect_dict(payload: Any, source: str) -> dict:
    """Vérifie que la réponse est un objet JSON, sinon lève CatalogUnavailable."""
    if not isinstance(payload, dict):
        raise CatalogUnavailable(source, f"unexpected payload type {type(payload).__name__}")
    return payload
