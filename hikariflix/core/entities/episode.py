"""
Entité épisode canonique.

Chaque catalogue renvoie sa propre forme d'épisode ; le normaliseur les
ramène toutes à cette représentation unique.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Episode:
    """
    Épisode résolu depuis un catalogue externe.

    Attributs:
        id: Identifiant propre au catalogue, sert à récupérer les flux
        display_title: Titre affiché à l'utilisateur
        sequence_number: Numéro d'épisode tel que fourni par le catalogue
        native_title: Titre japonais quand le catalogue le fournit
    """

    id: str
    display_title: str
    sequence_number: Optional[str] = None
    native_title: Optional[str] = None

    def label(self, position: int) -> str:
        """Libellé d'affichage, numéro du catalogue ou position (1-indexée)."""
        number = self.sequence_number or str(position)
        text = f"Episode {number}: {self.display_title}"
        if self.native_title:
            text += f" ({self.native_title})"
        return text
