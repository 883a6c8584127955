"""
Clients API externes pour la résolution d'épisodes et de flux.

Ce module fournit les adaptateurs pour communiquer avec les API externes:
- HentaiCatalogClient: catalogue adulte (instancié deux fois : principal et miroir)
- AnimeCatalogClient: catalogue anime (recherche, episodes, flux)
- AniListClient: métadonnées (titres, genres) via GraphQL

Infrastructure partagée:
- get_json: requête GET/POST convertissant toute erreur en CatalogUnavailable

Aucun retry ni cache : un échec fait simplement avancer la chaîne de repli.
"""

from hikariflix.adapters.api.anilist_client import AniListClient
from hikariflix.adapters.api.anime_client import AnimeCatalogClient
from hikariflix.adapters.api.hentai_client import HentaiCatalogClient
from hikariflix.adapters.api.http import get_json

__all__ = [
    "AniListClient",
    "AnimeCatalogClient",
    "HentaiCatalogClient",
    "get_json",
]
