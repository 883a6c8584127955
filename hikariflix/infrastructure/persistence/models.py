"""
Modèles SQLModel pour la base de données HikariFlix.

Tables:
- favorites: Animes marqués comme favoris (identifiés par leur ID AniList)
"""

from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, SQLModel


class FavoriteModel(SQLModel, table=True):
    """
    Modèle représentant un favori dans la base de données.

    media_id est unique : un anime ne peut être en favori qu'une fois.
    """

    __tablename__ = "favorites"

    id: int | None = Field(default=None, primary_key=True)
    media_id: int = Field(index=True, unique=True)
    title: str = ""
    cover_image: str | None = None
    is_mature: bool = False
    added_at: datetime = Field(default_factory=datetime.now)
