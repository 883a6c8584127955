"""
Container d'injection de dépendances via dependency-injector.

Fournit une gestion centralisée des dépendances pour la CLI :
configuration, clients des catalogues, services de résolution et de lecture,
repository des favoris.
"""

from dependency_injector import containers, providers

from hikariflix.adapters.api.anilist_client import AniListClient
from hikariflix.adapters.api.anime_client import AnimeCatalogClient
from hikariflix.adapters.api.hentai_client import HentaiCatalogClient
from hikariflix.adapters.player.mpv_player import MpvPlayerSurface
from hikariflix.config import Settings
from hikariflix.infrastructure.persistence.database import get_session, init_db
from hikariflix.infrastructure.persistence.repositories import SQLModelFavoritesRepository
from hikariflix.services.episode_resolver import EpisodeResolver
from hikariflix.services.favorites import FavoritesService
from hikariflix.services.playback_session import PlaybackSession
from hikariflix.services.stream_resolver import StreamResolver
from hikariflix.services.title_lookup import TitleLookupService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        lookup = container.title_lookup_service()
        media, outcome = await lookup.lookup_by_id(16498)
    """

    # Configuration - singleton chargé une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session à chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Repositories - Factory pour nouvelle instance avec session fraîche
    favorites_repository = providers.Factory(
        SQLModelFavoritesRepository,
        session=session,
    )

    # Clients API - Singleton pour partager le pool de connexions httpx
    anilist_client = providers.Singleton(
        AniListClient,
        api_url=config.provided.anilist_api_url,
        timeout=config.provided.http_timeout_seconds,
    )
    hentai_client = providers.Singleton(
        HentaiCatalogClient,
        base_url=config.provided.hentai_api_url,
        source="hentai",
        timeout=config.provided.http_timeout_seconds,
    )
    hentai_mirror_client = providers.Singleton(
        HentaiCatalogClient,
        base_url=config.provided.hentai_mirror_api_url,
        source="hentai-mirror",
        timeout=config.provided.http_timeout_seconds,
    )
    anime_client = providers.Singleton(
        AnimeCatalogClient,
        base_url=config.provided.anime_api_url,
        timeout=config.provided.http_timeout_seconds,
    )

    # Services de résolution (sans état - Singletons)
    episode_resolver = providers.Singleton(
        EpisodeResolver,
        mature_client=hentai_client,
        mirror_client=hentai_mirror_client,
        anime_client=anime_client,
    )
    title_lookup_service = providers.Singleton(
        TitleLookupService,
        resolver=episode_resolver,
        metadata_client=anilist_client,
        mature_genre_tag=config.provided.mature_genre_tag,
    )
    stream_resolver = providers.Singleton(
        StreamResolver,
        stream_client=anime_client,
    )

    # Lecture - une session par utilisateur (Factory)
    player_surface = providers.Singleton(
        MpvPlayerSurface,
        command=config.provided.player_command,
    )
    playback_session = providers.Factory(
        PlaybackSession,
        stream_resolver=stream_resolver,
        player=player_surface,
    )

    # Favoris - Factory car dépend du repository (session fraîche)
    favorites_service = providers.Factory(
        FavoritesService,
        repository=favorites_repository,
        mature_genre_tag=config.provided.mature_genre_tag,
    )
