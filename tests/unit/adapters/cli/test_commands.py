"""
Tests unitaires pour les commandes CLI.

Tests couvrant:
- search: table des résultats AniList
- episodes: résolution et messages "No episodes found"
- streams: variantes ou "Streaming info not available"
- play: ouverture de session, --dub, --caption
- favorites: add, remove, list
- app: aide, version
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from click.exceptions import Exit
from typer.testing import CliRunner

from hikariflix.adapters.cli.commands.catalog_commands import (
    _episodes_async,
    _search_async,
    _streams_async,
)
from hikariflix.adapters.cli.commands.favorites_commands import (
    _favorites_add_async,
    _favorites_list_async,
    _favorites_remove_async,
)
from hikariflix.adapters.cli.commands.playback_commands import _play_async
from hikariflix.core.entities.episode import Episode
from hikariflix.core.entities.favorite import FavoriteAnime
from hikariflix.core.exceptions import MetadataUnavailable
from hikariflix.core.value_objects.media_title import MediaTitle
from hikariflix.core.value_objects.resolution import ResolutionOutcome, StreamFetchResult
from hikariflix.core.value_objects.stream import VariantKind
from hikariflix.main import app
from hikariflix.services.playback_selection import PlaybackSelection, PlaybackState
from hikariflix.services.playback_session import LoadStatus

# Chemins de patch des sous-modules
_CATALOG = "hikariflix.adapters.cli.commands.catalog_commands"
_PLAYBACK = "hikariflix.adapters.cli.commands.playback_commands"
_FAVORITES = "hikariflix.adapters.cli.commands.favorites_commands"

runner = CliRunner()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_container():
    """Mock le Container pour les tests.

    Patche Container dans helpers.py car c'est là que le décorateur
    @with_container() l'importe et l'instancie.
    """
    with patch("hikariflix.adapters.cli.helpers.Container") as mock_cls:
        container_instance = MagicMock()
        mock_cls.return_value = container_instance
        container_instance.database.init = MagicMock()
        container_instance.config.return_value = MagicMock(mature_genre_tag="Hentai")
        for name in ("anilist_client", "hentai_client", "hentai_mirror_client", "anime_client"):
            getattr(container_instance, name).return_value = AsyncMock()
        yield container_instance


def _printed(mock_console: MagicMock) -> str:
    return " ".join(str(call) for call in mock_console.print.call_args_list)


# ============================================================================
# search / episodes / streams
# ============================================================================


class TestSearchCommand:

    @pytest.mark.asyncio
    async def test_search_prints_table(self, mock_container, standard_media):
        mock_container.anilist_client.return_value.search_media.return_value = [standard_media]

        with patch(f"{_CATALOG}.console") as mock_console:
            await _search_async("Frieren", 1)

        mock_console.print.assert_called_once()
        table = mock_console.print.call_args.args[0]
        assert table.row_count == 1
        mock_container.anilist_client.return_value.close.assert_awaited()

    @pytest.mark.asyncio
    async def test_search_no_results(self, mock_container):
        mock_container.anilist_client.return_value.search_media.return_value = []

        with patch(f"{_CATALOG}.console") as mock_console:
            await _search_async("zzz", 1)

        assert "Aucun résultat" in _printed(mock_console)

    @pytest.mark.asyncio
    async def test_search_metadata_error_exits(self, mock_container):
        mock_container.anilist_client.return_value.search_media.side_effect = (
            MetadataUnavailable("HTTP 500")
        )

        with patch(f"{_CATALOG}.console"):
            with pytest.raises(Exit) as exc_info:
                await _search_async("Frieren", 1)

        assert exc_info.value.exit_code == 1


class TestEpisodesCommand:

    @pytest.mark.asyncio
    async def test_episodes_table(self, mock_container, standard_media):
        outcome = ResolutionOutcome.resolved(
            [Episode(id="ep-1", display_title="The Journey's End", sequence_number="1")],
            "anime-catalog",
        )
        lookup = AsyncMock()
        lookup.lookup_by_id.return_value = (standard_media, outcome)
        mock_container.title_lookup_service.return_value = lookup

        with patch(f"{_CATALOG}.console") as mock_console:
            await _episodes_async(154587)

        lookup.lookup_by_id.assert_awaited_once_with(154587)
        table = mock_console.print.call_args.args[0]
        assert table.row_count == 1

    @pytest.mark.asyncio
    async def test_episodes_exhausted(self, mock_container, mature_media):
        lookup = AsyncMock()
        lookup.lookup_by_id.return_value = (mature_media, ResolutionOutcome.exhausted())
        mock_container.title_lookup_service.return_value = lookup

        with patch(f"{_CATALOG}.console") as mock_console:
            await _episodes_async(170068)

        assert "No episodes found" in _printed(mock_console)

    @pytest.mark.asyncio
    async def test_episodes_unknown_media(self, mock_container):
        lookup = AsyncMock()
        lookup.lookup_by_id.side_effect = MetadataUnavailable("media not found", 1)
        mock_container.title_lookup_service.return_value = lookup

        with patch(f"{_CATALOG}.console"):
            with pytest.raises(Exit):
                await _episodes_async(1)


class TestStreamsCommand:

    @pytest.mark.asyncio
    async def test_streams_table(self, mock_container, sub_variant, dub_variant):
        resolver = AsyncMock()
        resolver.fetch_variants.return_value = StreamFetchResult.succeeded([sub_variant, dub_variant])
        mock_container.stream_resolver.return_value = resolver

        with patch(f"{_CATALOG}.console") as mock_console:
            await _streams_async("ep-1")

        table = mock_console.print.call_args.args[0]
        assert table.row_count == 2

    @pytest.mark.asyncio
    async def test_streams_failure(self, mock_container):
        resolver = AsyncMock()
        resolver.fetch_variants.return_value = StreamFetchResult.failed()
        mock_container.stream_resolver.return_value = resolver

        with patch(f"{_CATALOG}.console") as mock_console:
            with pytest.raises(Exit):
                await _streams_async("ep-1")

        assert "Streaming info not available" in _printed(mock_console)


# ============================================================================
# play
# ============================================================================


def _session(status: LoadStatus, kind=VariantKind.SUB, caption=None) -> MagicMock:
    session = MagicMock()
    session.open_episode = AsyncMock(return_value=status)
    session.selection = PlaybackSelection(
        state=PlaybackState.LOADED, variant_kind=kind, caption_track=caption
    )
    session.state.available_kinds = (VariantKind.DUB,)
    return session


class TestPlayCommand:

    @pytest.mark.asyncio
    async def test_play_default_sub(self, mock_container):
        session = _session(LoadStatus.PLAYING)
        mock_container.playback_session.return_value = session

        with patch(f"{_PLAYBACK}.console") as mock_console:
            await _play_async("ep-1", dub=False, caption=None, title=None)

        session.open_episode.assert_awaited_once_with(
            "ep-1", title="ep-1", preferred_kind=None, caption_label=None
        )
        assert "Lecture" in _printed(mock_console)

    @pytest.mark.asyncio
    async def test_play_dub_and_caption_in_single_open(self, mock_container):
        """--dub et --caption sont transmis à l'ouverture : aucun relancement du lecteur."""
        session = _session(
            LoadStatus.PLAYING, kind=VariantKind.DUB, caption="https://cdn.example/dub/eng.vtt"
        )
        mock_container.playback_session.return_value = session

        with patch(f"{_PLAYBACK}.console") as mock_console:
            await _play_async("ep-1", dub=True, caption="english", title="Episode 1")

        session.open_episode.assert_awaited_once_with(
            "ep-1", title="Episode 1", preferred_kind=VariantKind.DUB, caption_label="english"
        )
        session.switch_variant.assert_not_called()
        session.select_caption_track.assert_not_called()
        assert "introuvable" not in _printed(mock_console)

    @pytest.mark.asyncio
    async def test_play_dub_missing_falls_back_with_warning(self, mock_container):
        mock_container.playback_session.return_value = _session(LoadStatus.PLAYING)

        with patch(f"{_PLAYBACK}.console") as mock_console:
            await _play_async("ep-1", dub=True, caption=None, title=None)

        assert "doublée indisponible" in _printed(mock_console)

    @pytest.mark.asyncio
    async def test_play_unknown_caption_warns(self, mock_container):
        mock_container.playback_session.return_value = _session(LoadStatus.PLAYING)

        with patch(f"{_PLAYBACK}.console") as mock_console:
            await _play_async("ep-1", dub=False, caption="German", title=None)

        assert "'German' introuvable" in _printed(mock_console)

    @pytest.mark.asyncio
    async def test_play_dub_only_without_flag_exits(self, mock_container):
        session = _session(LoadStatus.AWAITING_CHOICE)
        mock_container.playback_session.return_value = session

        with patch(f"{_PLAYBACK}.console") as mock_console:
            with pytest.raises(Exit):
                await _play_async("ep-1", dub=False, caption=None, title=None)

        assert "dub" in _printed(mock_console)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [LoadStatus.FETCH_FAILED, LoadStatus.UNAVAILABLE])
    async def test_play_unplayable_exits(self, mock_container, status):
        mock_container.playback_session.return_value = _session(status)

        with patch(f"{_PLAYBACK}.console"):
            with pytest.raises(Exit) as exc_info:
                await _play_async("ep-1", dub=False, caption=None, title=None)

        assert exc_info.value.exit_code == 1

    @pytest.mark.asyncio
    async def test_play_player_launch_failure_exits(self, mock_container):
        session = _session(LoadStatus.PLAYER_FAILED)
        session.player_error = FileNotFoundError("mpv")
        mock_container.playback_session.return_value = session

        with patch(f"{_PLAYBACK}.console") as mock_console:
            with pytest.raises(Exit) as exc_info:
                await _play_async("ep-1", dub=False, caption=None, title=None)

        assert exc_info.value.exit_code == 1
        printed = _printed(mock_console)
        assert "Impossible de lancer le lecteur" in printed
        assert "Lecture" not in printed


# ============================================================================
# favorites
# ============================================================================


class TestFavoritesCommands:

    @pytest.mark.asyncio
    async def test_add_fetches_metadata(self, mock_container, standard_media):
        mock_container.anilist_client.return_value.get_media.return_value = standard_media
        service = MagicMock()
        service.add.return_value = FavoriteAnime(media_id=154587, title="Frieren")
        mock_container.favorites_service.return_value = service

        with patch(f"{_FAVORITES}.console") as mock_console:
            await _favorites_add_async(154587)

        mock_container.database.init.assert_called_once()
        service.add.assert_called_once_with(standard_media)
        assert "Frieren" in _printed(mock_console)

    @pytest.mark.asyncio
    async def test_remove_missing(self, mock_container):
        service = MagicMock()
        service.remove.return_value = False
        mock_container.favorites_service.return_value = service

        with patch(f"{_FAVORITES}.console") as mock_console:
            await _favorites_remove_async(1)

        assert "n'est pas dans les favoris" in _printed(mock_console)

    @pytest.mark.asyncio
    async def test_list(self, mock_container):
        service = MagicMock()
        service.list_all.return_value = [
            FavoriteAnime(media_id=1, title="Frieren", added_at=datetime(2025, 1, 1)),
        ]
        mock_container.favorites_service.return_value = service

        with patch(f"{_FAVORITES}.console") as mock_console:
            await _favorites_list_async()

        table = mock_console.print.call_args.args[0]
        assert table.row_count == 1


# ============================================================================
# Application
# ============================================================================


class TestApp:

    def test_help_lists_commands(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("search", "episodes", "streams", "play", "favorites"):
            assert command in result.output

    def test_play_help_lists_options(self):
        result = runner.invoke(app, ["play", "--help"])

        assert result.exit_code == 0
        assert "--dub" in result.output
        assert "--caption" in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "HikariFlix v0.1.0" in result.output
