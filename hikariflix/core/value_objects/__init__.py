"""
Objets valeur immutables représentant des concepts du domaine sans identité.

Exports :
- Classification : STANDARD ou MATURE, dérivée des genres
- MediaTitle : Titre et métadonnées d'affichage fournis par AniList
- VariantKind : Variante audio d'un épisode (sub, dub)
- StreamSource, CaptionTrack, TimeInterval, StreamVariant : Flux d'un épisode
- ResolutionStatus, ResolutionOutcome : Résultat de la résolution d'épisodes
- StreamFetchResult : Résultat de la récupération des variantes
"""

from hikariflix.core.value_objects.media_title import Classification, MediaTitle
from hikariflix.core.value_objects.resolution import (
    ResolutionOutcome,
    ResolutionStatus,
    StreamFetchResult,
)
from hikariflix.core.value_objects.stream import (
    CaptionTrack,
    StreamSource,
    StreamVariant,
    TimeInterval,
    VariantKind,
)

__all__ = [
    "Classification",
    "MediaTitle",
    "VariantKind",
    "StreamSource",
    "CaptionTrack",
    "TimeInterval",
    "StreamVariant",
    "ResolutionStatus",
    "ResolutionOutcome",
    "StreamFetchResult",
]
