"""
Entité favori.

Un favori est identifié par son ID AniList ; le titre et la jaquette stockés
sont figés au moment de l'ajout.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class FavoriteAnime:
    """
    Anime enregistré dans la liste des favoris.

    Attributs:
        media_id: ID AniList (identité)
        title: Titre affiché au moment de l'ajout
        cover_image: URL de la jaquette
        is_mature: True si le titre relève de la classification adulte
        added_at: Date d'ajout
    """

    media_id: int
    title: str = ""
    cover_image: Optional[str] = None
    is_mature: bool = False
    added_at: datetime = field(default_factory=datetime.now)
