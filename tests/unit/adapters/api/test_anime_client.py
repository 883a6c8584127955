"""
Tests for AnimeCatalogClient - series search, episode list and stream info.

Uses respx to mock httpx calls.
"""

import httpx
import pytest
import respx

from hikariflix.adapters.api.anime_client import AnimeCatalogClient
from hikariflix.core.exceptions import CatalogUnavailable
from hikariflix.core.ports.catalog_clients import IAnimeCatalogClient
from tests.fixtures.catalog_responses import (
    ANIME_EPISODES_RESPONSE,
    ANIME_SEARCH_NOT_FOUND_RESPONSE,
    ANIME_SEARCH_RESPONSE,
    ANIME_STREAM_FAILURE_RESPONSE,
    ANIME_STREAM_RESPONSE,
)

BASE_URL = "https://anime.test"
SERIES_ID = "frieren-beyond-journeys-end-18542"
EPISODE_ID = "frieren-beyond-journeys-end-18542?ep=107257"


@pytest.fixture
def client() -> AnimeCatalogClient:
    return AnimeCatalogClient(base_url=BASE_URL)


class TestAnimeClientInterface:

    def test_implements_interface(self, client: AnimeCatalogClient):
        assert isinstance(client, IAnimeCatalogClient)
        assert client.source == "anime"


class TestAnimeSearch:
    """Tests for AnimeCatalogClient.search()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_returns_match(self, client: AnimeCatalogClient):
        respx.get(f"{BASE_URL}/api/search").mock(
            return_value=httpx.Response(200, json=ANIME_SEARCH_RESPONSE)
        )

        match = await client.search("Frieren")

        assert match is not None
        assert match.id == SERIES_ID
        assert match.data_id == "18542"
        assert match.title == "Frieren: Beyond Journey's End"

    @pytest.mark.asyncio
    @respx.mock
    async def test_keyword_sent_without_reencoding(self, client: AnimeCatalogClient):
        route = respx.get(f"{BASE_URL}/api/search").mock(
            return_value=httpx.Response(200, json=ANIME_SEARCH_RESPONSE)
        )

        await client.search("Attack%20on%20Titan:%20Final%20Season")

        request = route.calls.last.request
        assert "keyword=Attack%20on%20Titan:%20Final%20Season" in str(request.url)

    @pytest.mark.asyncio
    @respx.mock
    async def test_success_false_returns_none(self, client: AnimeCatalogClient):
        respx.get(f"{BASE_URL}/api/search").mock(
            return_value=httpx.Response(200, json=ANIME_SEARCH_NOT_FOUND_RESPONSE)
        )

        assert await client.search("Nothing") is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_http_error_raises(self, client: AnimeCatalogClient):
        respx.get(f"{BASE_URL}/api/search").mock(return_value=httpx.Response(502))

        with pytest.raises(CatalogUnavailable) as exc_info:
            await client.search("Frieren")

        assert exc_info.value.source == "anime"


class TestAnimeEpisodes:
    """Tests for AnimeCatalogClient.list_episodes()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_episodes(self, client: AnimeCatalogClient):
        respx.get(f"{BASE_URL}/api/episodes/{SERIES_ID}").mock(
            return_value=httpx.Response(200, json=ANIME_EPISODES_RESPONSE)
        )

        records = await client.list_episodes(SERIES_ID)

        assert [r.id for r in records] == [EPISODE_ID, f"{SERIES_ID}?ep=107258"]
        assert records[0].episode_no == "1"
        assert records[0].japanese_title == "旅の終わり"
        assert records[1].episode_no is None
        assert records[1].number == "2"
        assert records[1].japanese_title is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_success_false_returns_empty(self, client: AnimeCatalogClient):
        respx.get(f"{BASE_URL}/api/episodes/{SERIES_ID}").mock(
            return_value=httpx.Response(200, json={"success": False})
        )

        assert await client.list_episodes(SERIES_ID) == []


class TestAnimeStreamingInfo:
    """Tests for AnimeCatalogClient.fetch_streaming_info()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetch_streaming_info(self, client: AnimeCatalogClient):
        route = respx.get(f"{BASE_URL}/api/stream").mock(
            return_value=httpx.Response(200, json=ANIME_STREAM_RESPONSE)
        )

        entries = await client.fetch_streaming_info(EPISODE_ID)

        assert route.calls.last.request.url.params["id"] == EPISODE_ID
        assert [e.status for e in entries] == ["fulfilled", "fulfilled", "rejected"]
        sub = entries[0]
        assert sub.variant_type == "sub"
        assert sub.server == "hd-1"
        assert sub.sources[0]["file"] == "https://cdn.example/sub/master.m3u8"
        assert len(sub.tracks) == 3
        assert sub.outro == {"start": 1380, "end": 1470}
        assert entries[1].encrypted is True
        assert entries[2].variant_type is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_success_false_raises(self, client: AnimeCatalogClient):
        respx.get(f"{BASE_URL}/api/stream").mock(
            return_value=httpx.Response(200, json=ANIME_STREAM_FAILURE_RESPONSE)
        )

        with pytest.raises(CatalogUnavailable):
            await client.fetch_streaming_info(EPISODE_ID)

    @pytest.mark.asyncio
    @respx.mock
    async def test_missing_streaming_info_raises(self, client: AnimeCatalogClient):
        respx.get(f"{BASE_URL}/api/stream").mock(
            return_value=httpx.Response(200, json={"success": True, "results": {}})
        )

        with pytest.raises(CatalogUnavailable):
            await client.fetch_streaming_info(EPISODE_ID)

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout_raises(self, client: AnimeCatalogClient):
        respx.get(f"{BASE_URL}/api/stream").mock(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(CatalogUnavailable):
            await client.fetch_streaming_info(EPISODE_ID)


def _stream_payload(**source) -> dict:
    return {
        "success": True,
        "results": {
            "streamingInfo": [
                {
                    "status": "fulfilled",
                    "value": {"decryptionResult": {"type": "sub", "server": "hd-1", "source": source}},
                }
            ]
        },
    }


class TestAnimeStreamingInfoShape:
    """Tests for malformed source/track/interval shapes."""

    @pytest.mark.asyncio
    @respx.mock
    @pytest.mark.parametrize(
        "source",
        [
            {"sources": ["https://cdn.example/a.m3u8"]},
            {"sources": "https://cdn.example/a.m3u8"},
            {"sources": [{"file": "https://cdn.example/a.m3u8"}], "tracks": "eng.vtt"},
            {"sources": [{"file": "https://cdn.example/a.m3u8"}], "intro": [0, 90]},
            {"sources": [{"file": "https://cdn.example/a.m3u8"}], "outro": "1380-1470"},
        ],
    )
    async def test_malformed_shape_raises_catalog_unavailable(
        self, client: AnimeCatalogClient, source: dict
    ):
        respx.get(f"{BASE_URL}/api/stream").mock(
            return_value=httpx.Response(200, json=_stream_payload(**source))
        )

        with pytest.raises(CatalogUnavailable) as exc_info:
            await client.fetch_streaming_info(EPISODE_ID)

        assert exc_info.value.source == "anime"

    @pytest.mark.asyncio
    @respx.mock
    async def test_missing_optional_fields_accepted(self, client: AnimeCatalogClient):
        respx.get(f"{BASE_URL}/api/stream").mock(
            return_value=httpx.Response(
                200, json=_stream_payload(sources=[{"file": "https://cdn.example/a.m3u8"}])
            )
        )

        entries = await client.fetch_streaming_info(EPISODE_ID)

        assert entries[0].tracks == []
        assert entries[0].intro is None
