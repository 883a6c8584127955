"""
Interfaces ports pour la persistance.

Seuls les favoris sont persistés : aucune préférence de lecture (sub/dub,
sous-titres) ni aucun flux résolu n'est stocke.
"""

from abc import ABC, abstractmethod

from hikariflix.core.entities.favorite import FavoriteAnime


class IFavoritesRepository(ABC):
    """Stockage des favoris, vu comme une simple appartenance par ID."""

    @abstractmethod
    def add(self, favorite: FavoriteAnime) -> FavoriteAnime:
        """Ajoute un favori (sans effet s'il existe déjà)."""
        ...

    @abstractmethod
    def remove(self, media_id: int) -> bool:
        """Retire un favori. Retourne False s'il n'existait pas."""
        ...

    @abstractmethod
    def is_favorite(self, media_id: int) -> bool:
        """Indique si l'anime est en favori."""
        ...

    @abstractmethod
    def list_all(self) -> list[FavoriteAnime]:
        """Liste les favoris, du plus recent au plus ancien."""
        ...
