"""
Objets valeur décrivant les flux lisibles d'un épisode.

Un épisode se résout en zéro ou plusieurs StreamVariant (typiquement un
"sub" et un "dub"), chacun avec ses sources vidéo et ses pistes de
sous-titres, dans l'ordre du catalogue.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class VariantKind(Enum):
    """Variante audio d'un épisode."""

    SUB = "sub"
    DUB = "dub"


@dataclass(frozen=True)
class StreamSource:
    """Fichier vidéo lisible (HLS en général)."""

    file_url: str
    media_type: str = ""


@dataclass(frozen=True)
class CaptionTrack:
    """
    Piste de texte associée a un flux.

    Attributs:
        file_url: URL du fichier (WebVTT)
        label: Libellé affiché (ex: "English")
        kind: Type de piste ("captions", "thumbnails"...)
        is_default: Piste marquée par défaut par le fournisseur
    """

    file_url: str
    label: str = ""
    kind: str = "captions"
    is_default: bool = False


@dataclass(frozen=True)
class TimeInterval:
    """Intervalle en secondes (générique de début ou de fin)."""

    start: float
    end: float


@dataclass(frozen=True)
class StreamVariant:
    """
    Rendu lisible d'un épisode pour une variante audio.

    Attributs:
        kind: sub ou dub
        sources: Sources vidéo, la première est utilisée par convention
        caption_tracks: Pistes de sous-titres
        is_encrypted: Indicateur transmis tel quel (aucun déchiffrement)
        intro: Intervalle du générique de début
        outro: Intervalle du générique de fin
        provider_server: Serveur fournissant le flux
    """

    kind: VariantKind
    sources: tuple[StreamSource, ...] = ()
    caption_tracks: tuple[CaptionTrack, ...] = ()
    is_encrypted: bool = False
    intro: Optional[TimeInterval] = None
    outro: Optional[TimeInterval] = None
    provider_server: str = ""

    @property
    def primary_source(self) -> Optional[StreamSource]:
        """Première source listée, None si la variante n'a aucune source."""
        return self.sources[0] if self.sources else None

    @property
    def subtitle_tracks(self) -> tuple[CaptionTrack, ...]:
        """Pistes sélectionnables par l'utilisateur (hors vignettes)."""
        return tuple(t for t in self.caption_tracks if t.kind != "thumbnails")
