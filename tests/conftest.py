"""
Fixtures pytest partagées pour les tests HikariFlix.

Ce module contient les fixtures communes utilisées dans les tests:
- Mocks des ports catalogues (adulte, miroir, anime), AniList et lecteur
- Titres AniList standard et adulte
- Variantes de flux sub/dub
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from hikariflix.core.ports.catalog_clients import IAnimeCatalogClient, IMatureCatalogClient
from hikariflix.core.ports.metadata import IMetadataClient
from hikariflix.core.ports.player import IPlayerSurface
from hikariflix.core.value_objects.media_title import MediaTitle
from hikariflix.core.value_objects.stream import (
    CaptionTrack,
    StreamSource,
    StreamVariant,
    VariantKind,
)


@pytest.fixture
def mock_mature_client() -> AsyncMock:
    """Catalogue adulte principal : aucun résultat par défaut."""
    mock = AsyncMock(spec=IMatureCatalogClient)
    mock.search.return_value = []
    return mock


@pytest.fixture
def mock_mirror_client() -> AsyncMock:
    """Catalogue miroir : aucun résultat par défaut."""
    mock = AsyncMock(spec=IMatureCatalogClient)
    mock.search.return_value = []
    return mock


@pytest.fixture
def mock_anime_client() -> AsyncMock:
    """Catalogue anime : série introuvable par défaut."""
    mock = AsyncMock(spec=IAnimeCatalogClient)
    mock.search.return_value = None
    mock.list_episodes.return_value = []
    mock.fetch_streaming_info.return_value = []
    return mock


@pytest.fixture
def mock_metadata_client() -> AsyncMock:
    return AsyncMock(spec=IMetadataClient)


@pytest.fixture
def mock_player() -> MagicMock:
    """Surface de lecture : enregistre les commandes reçues."""
    return MagicMock(spec=IPlayerSurface)


@pytest.fixture
def standard_media() -> MediaTitle:
    return MediaTitle(
        id=154587,
        romaji="Sousou no Frieren",
        english="Frieren: Beyond Journey's End",
        genres=("Adventure", "Drama", "Fantasy"),
    )


@pytest.fixture
def mature_media() -> MediaTitle:
    return MediaTitle(
        id=170068,
        romaji="Overflow",
        english="Overflow (English)",
        genres=("Hentai", "Romance"),
    )


@pytest.fixture
def sub_variant() -> StreamVariant:
    return StreamVariant(
        kind=VariantKind.SUB,
        sources=(StreamSource("https://cdn.example/sub/master.m3u8", "hls"),),
        caption_tracks=(
            CaptionTrack("https://cdn.example/sub/eng.vtt", "English", is_default=True),
            CaptionTrack("https://cdn.example/sub/fre.vtt", "French"),
            CaptionTrack("https://cdn.example/sub/thumbs.vtt", "", kind="thumbnails"),
        ),
        provider_server="hd-1",
    )


@pytest.fixture
def dub_variant() -> StreamVariant:
    return StreamVariant(
        kind=VariantKind.DUB,
        sources=(StreamSource("https://cdn.example/dub/master.m3u8", "hls"),),
        provider_server="hd-2",
    )
