"""
Machine d'état de sélection de flux pendant la lecture.

États:
- UNLOADED : aucune variante liée au lecteur (avant chargement, ou pas de
  "sub" alors qu'un autre type existe : l'utilisateur peut choisir "dub")
- LOADED(kind, caption) : variante active et piste de sous-titres (ou aucune)
- UNAVAILABLE : l'épisode n'a aucune variante lisible ; état final jusqu'au
  prochain chargement, au lieu d'un chargement infini

Transitions:
- load(variants) : LOADED(sub, None) si une variante sub existe
- switch_variant(kind) : LOADED(kind, None) si la variante existe, sinon sans effet
- select_caption_track(url) : depuis LOADED uniquement, ne change pas la variante
- reset() : retour a UNLOADED (nouvel épisode)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from loguru import logger

from hikariflix.core.exceptions import InvalidTransition
from hikariflix.core.value_objects.stream import StreamSource, StreamVariant, VariantKind


class PlaybackState(Enum):
    """État de la sélection de lecture."""

    UNLOADED = "unloaded"
    LOADED = "loaded"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class PlaybackSelection:
    """
    Instantané de la sélection courante.

    Attributs:
        state: État de la machine
        variant_kind: Variante active (LOADED uniquement)
        source: Première source de la variante active
        caption_track: URL de la piste de sous-titres active, None pour aucune
    """

    state: PlaybackState
    variant_kind: Optional[VariantKind] = None
    source: Optional[StreamSource] = None
    caption_track: Optional[str] = None


class PlaybackSelectionState:
    """
    Sélection de la variante et des sous-titres pour un épisode.

    Possède exclusivement par une session de lecture ; ne pas partager entre
    deux chargements d'épisode concurrents.

    Example:
        selection = PlaybackSelectionState()
        selection.load(variants)
        selection.select_caption_track(track.file_url)
        selection.switch_variant(VariantKind.DUB)  # sous-titres remis à None
    """

    DEFAULT_KIND = VariantKind.SUB

    def __init__(self) -> None:
        self._variants: tuple[StreamVariant, ...] = ()
        self._state = PlaybackState.UNLOADED
        self._kind: Optional[VariantKind] = None
        self._caption_track: Optional[str] = None

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def variant_kind(self) -> Optional[VariantKind]:
        return self._kind

    @property
    def caption_track(self) -> Optional[str]:
        return self._caption_track

    @property
    def variants(self) -> tuple[StreamVariant, ...]:
        """Variantes lisibles du dernier chargement."""
        return self._variants

    @property
    def available_kinds(self) -> tuple[VariantKind, ...]:
        """Types de variantes disponibles, sans doublon, dans l'ordre du catalogue."""
        return tuple(dict.fromkeys(v.kind for v in self._variants))

    @property
    def active_variant(self) -> Optional[StreamVariant]:
        if self._kind is None:
            return None
        return self._find(self._kind)

    @property
    def active_source(self) -> Optional[StreamSource]:
        """Première source de la variante active (convention du lecteur)."""
        variant = self.active_variant
        return variant.primary_source if variant else None

    @property
    def selection(self) -> PlaybackSelection:
        return PlaybackSelection(
            state=self._state,
            variant_kind=self._kind,
            source=self.active_source,
            caption_track=self._caption_track,
        )

    def _find(self, kind: VariantKind) -> Optional[StreamVariant]:
        return next((v for v in self._variants if v.kind is kind), None)

    def load(self, variants: list[StreamVariant] | tuple[StreamVariant, ...]) -> PlaybackSelection:
        """
        Charge un nouvel ensemble de variantes, en remplacement du précédent.

        Les variantes sans source sont écartées. Sans aucune variante lisible,
        l'état devient UNAVAILABLE. Sans variante sub, l'état reste UNLOADED.
        """
        self.reset()
        playable = tuple(v for v in variants if v.primary_source is not None)
        if len(playable) < len(variants):
            logger.debug(f"{len(variants) - len(playable)} variante(s) sans source ignorée(s)")
        self._variants = playable

        if not playable:
            self._state = PlaybackState.UNAVAILABLE
            logger.info("Aucun flux disponible pour cet épisode")
        elif self._find(self.DEFAULT_KIND) is not None:
            self._bind(self.DEFAULT_KIND)
        else:
            logger.info(
                f"Pas de variante {self.DEFAULT_KIND.value}, "
                f"disponibles: {', '.join(k.value for k in self.available_kinds)}"
            )
        return self.selection

    def switch_variant(self, kind: VariantKind) -> bool:
        """
        Bascule sur une autre variante audio.

        Les sous-titres sont toujours remis à None. Si la variante demandée
        n'existe pas pour cet épisode, rien ne change.

        Returns:
            True si la transition a eu lieu
        """
        if self._find(kind) is None:
            logger.debug(f"Variante {kind.value} indisponible, selection inchangée")
            return False
        self._bind(kind)
        return True

    def select_caption_track(self, file_url: Optional[str]) -> None:
        """
        Active une piste de sous-titres (None pour les désactiver).

        Raises:
            InvalidTransition: Si aucune variante n'est chargée
        """
        if self._state is not PlaybackState.LOADED:
            raise InvalidTransition(
                f"Cannot select a caption track in state {self._state.value}"
            )
        self._caption_track = file_url

    def reset(self) -> None:
        """Retour a UNLOADED, variantes oubliées."""
        self._variants = ()
        self._state = PlaybackState.UNLOADED
        self._kind = None
        self._caption_track = None

    def _bind(self, kind: VariantKind) -> None:
        self._state = PlaybackState.LOADED
        self._kind = kind
        self._caption_track = None
