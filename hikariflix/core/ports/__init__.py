"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports client catalogue : Contrats pour les catalogues d'épisodes et de flux
- IMatureCatalogClient : Catalogue adulte et son miroir
- IAnimeCatalogClient : Catalogue anime (recherche, episodes, flux)

Port métadonnées :
- IMetadataClient : Source des titres et genres (AniList)

Port repository :
- IFavoritesRepository : Stockage des favoris

Port lecteur :
- IPlayerSurface : Surface de rendu vidéo
"""

from hikariflix.core.ports.catalog_clients import (
    AnimeEpisodeRecord,
    AnimeSeriesMatch,
    HentaiEpisodeRecord,
    HentaiSearchResult,
    IAnimeCatalogClient,
    IMatureCatalogClient,
    StreamingInfoEntry,
)
from hikariflix.core.ports.metadata import IMetadataClient
from hikariflix.core.ports.player import IPlayerSurface, PlayerCommand
from hikariflix.core.ports.repositories import IFavoritesRepository

__all__ = [
    # Catalogues
    "IMatureCatalogClient",
    "IAnimeCatalogClient",
    "HentaiSearchResult",
    "HentaiEpisodeRecord",
    "AnimeSeriesMatch",
    "AnimeEpisodeRecord",
    "StreamingInfoEntry",
    # Métadonnées
    "IMetadataClient",
    # Repositories
    "IFavoritesRepository",
    # Lecteur
    "IPlayerSurface",
    "PlayerCommand",
]
