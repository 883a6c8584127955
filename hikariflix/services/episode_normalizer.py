"""
Normalisation des réponses hétérogènes des catalogues.

Une fonction de correspondance explicite par forme de catalogue :
- catalogue adulte / miroir : HentaiEpisodeRecord -> Episode
- catalogue anime : AnimeEpisodeRecord -> Episode
- catalogue de flux : StreamingInfoEntry -> StreamVariant
"""

from typing import Any, Optional

from loguru import logger

from hikariflix.core.entities.episode import Episode
from hikariflix.core.ports.catalog_clients import (
    AnimeEpisodeRecord,
    HentaiEpisodeRecord,
    HentaiSearchResult,
    StreamingInfoEntry,
)
from hikariflix.core.value_objects.stream import (
    CaptionTrack,
    StreamSource,
    StreamVariant,
    TimeInterval,
    VariantKind,
)
from hikariflix.utils.constants import FULFILLED_STATUS


def episode_from_hentai(record: HentaiEpisodeRecord) -> Episode:
    """Épisode du catalogue adulte : seul le nom sert de titre."""
    return Episode(id=record.id, display_title=record.name)


def episodes_from_hentai_results(results: list[HentaiSearchResult]) -> list[Episode]:
    """
    Épisodes du premier résultat de recherche, dans l'ordre du catalogue.

    Les résultats suivants sont ignores : le catalogue classe le meilleur
    résultat en tête.
    """
    if not results:
        return []
    return [episode_from_hentai(record) for record in results[0].episodes]


def episode_from_anime(record: AnimeEpisodeRecord) -> Episode:
    """Épisode du catalogue anime : numéro depuis episode_no, sinon number."""
    return Episode(
        id=record.id,
        display_title=record.title,
        sequence_number=record.episode_no or record.number,
        native_title=record.japanese_title,
    )


def _interval(raw: Optional[dict[str, Any]]) -> Optional[TimeInterval]:
    """{start, end} -> TimeInterval ; None si absent ou vide (0, 0)."""
    if not raw:
        return None
    try:
        start = float(raw.get("start", 0))
        end = float(raw.get("end", 0))
    except (TypeError, ValueError):
        return None
    if start == 0 and end == 0:
        return None
    return TimeInterval(start=start, end=end)


def variant_from_streaming_entry(entry: StreamingInfoEntry) -> Optional[StreamVariant]:
    """
    Convertit une entrée streamingInfo en StreamVariant.

    Returns:
        None si l'entrée n'est pas "fulfilled" ou si son type n'est ni sub ni dub
    """
    if entry.status != FULFILLED_STATUS:
        logger.debug(f"Entrée streamingInfo ignorée (status={entry.status!r})")
        return None
    try:
        kind = VariantKind(entry.variant_type)
    except ValueError:
        logger.debug(f"Entrée streamingInfo ignorée (type={entry.variant_type!r})")
        return None

    sources = tuple(
        StreamSource(file_url=src["file"], media_type=src.get("type") or "")
        for src in entry.sources
        if src.get("file")
    )
    tracks = tuple(
        CaptionTrack(
            file_url=track["file"],
            label=track.get("label") or "",
            kind=track.get("kind") or "captions",
            is_default=bool(track.get("default", False)),
        )
        for track in entry.tracks
        if track.get("file")
    )
    return StreamVariant(
        kind=kind,
        sources=sources,
        caption_tracks=tracks,
        is_encrypted=entry.encrypted,
        intro=_interval(entry.intro),
        outro=_interval(entry.outro),
        provider_server=entry.server,
    )
