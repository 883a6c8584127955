"""
Port de la surface de lecture vidéo.

La surface reçoit une commande {source, sous-titre} et ne renvoie aucun
accusé de réception : l'application est "fire and forget". Les erreurs de
lecture remontent via PlaybackSession.report_playback_error().
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PlayerCommand:
    """
    Commande envoyée au lecteur.

    Attributs:
        source_url: URL de la source vidéo active
        caption_track_url: URL de la piste de sous-titres, None pour aucune
        title: Titre affiché par le lecteur
    """

    source_url: str
    caption_track_url: Optional[str] = None
    title: Optional[str] = None


class IPlayerSurface(ABC):
    """Interface de la surface de rendu vidéo."""

    @abstractmethod
    def present(self, command: PlayerCommand) -> None:
        """Applique la source et la piste de sous-titres demandées."""
        ...

    @abstractmethod
    def stop(self) -> None:
        """Arrête la lecture en cours (sans effet si rien ne joue)."""
        ...
