"""
Résultats de la résolution d'épisodes et de la récupération des flux.

ResolutionOutcome est une union étiquetée : RESOLVED porte toujours au moins
un épisode, NOT_FOUND signifie qu'aucune recherche n'a pu être lancée (titre
absent ou vide), EXHAUSTED que toutes les stratégies ont échoué.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from hikariflix.core.value_objects.stream import StreamVariant, VariantKind

if TYPE_CHECKING:
    from hikariflix.core.entities.episode import Episode


class ResolutionStatus(Enum):
    """Étiquette du résultat de résolution."""

    RESOLVED = "resolved"
    NOT_FOUND = "not_found"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class ResolutionOutcome:
    """
    Résultat de EpisodeResolver.resolve().

    Attributs:
        status: RESOLVED, NOT_FOUND ou EXHAUSTED
        episodes: Épisodes dans l'ordre du catalogue (vide sauf RESOLVED)
        strategy: Nom de la stratégie gagnante (ex: "mature-mirror:1")
    """

    status: ResolutionStatus
    episodes: tuple[Episode, ...] = ()
    strategy: Optional[str] = None

    def __post_init__(self) -> None:
        if self.status is ResolutionStatus.RESOLVED and not self.episodes:
            raise ValueError("A resolved outcome requires at least one episode")
        if self.status is not ResolutionStatus.RESOLVED and self.episodes:
            raise ValueError(f"A {self.status.value} outcome cannot carry episodes")

    @classmethod
    def resolved(cls, episodes: list[Episode] | tuple[Episode, ...], strategy: str) -> ResolutionOutcome:
        return cls(ResolutionStatus.RESOLVED, tuple(episodes), strategy)

    @classmethod
    def not_found(cls) -> ResolutionOutcome:
        return cls(ResolutionStatus.NOT_FOUND)

    @classmethod
    def exhausted(cls) -> ResolutionOutcome:
        return cls(ResolutionStatus.EXHAUSTED)

    @property
    def is_resolved(self) -> bool:
        return self.status is ResolutionStatus.RESOLVED


@dataclass(frozen=True)
class StreamFetchResult:
    """
    Résultat de StreamResolver.fetch_variants().

    Un échec (ok=False) est présente comme "streaming info not available" ;
    la lecture n'est pas tentée.
    """

    ok: bool
    variants: tuple[StreamVariant, ...] = ()

    @classmethod
    def succeeded(cls, variants: list[StreamVariant] | tuple[StreamVariant, ...]) -> StreamFetchResult:
        return cls(True, tuple(variants))

    @classmethod
    def failed(cls) -> StreamFetchResult:
        return cls(False)

    def find(self, kind: VariantKind) -> Optional[StreamVariant]:
        """Première variante du type demandé, dans l'ordre du catalogue."""
        return next((v for v in self.variants if v.kind is kind), None)
