"""
Service de gestion des favoris.

Encapsule le repository pour travailler directement avec les MediaTitle
renvoyés par AniList (ajout, retrait, bascule).
"""

from hikariflix.core.entities.favorite import FavoriteAnime
from hikariflix.core.ports.repositories import IFavoritesRepository
from hikariflix.core.value_objects.media_title import Classification, MediaTitle
from hikariflix.utils.constants import MATURE_GENRE_TAG


class FavoritesService:
    """Ajout, retrait et bascule des favoris."""

    def __init__(
        self,
        repository: IFavoritesRepository,
        mature_genre_tag: str = MATURE_GENRE_TAG,
    ) -> None:
        self._repository = repository
        self._mature_genre_tag = mature_genre_tag

    def _to_favorite(self, media: MediaTitle) -> FavoriteAnime:
        return FavoriteAnime(
            media_id=media.id,
            title=media.display_title,
            cover_image=media.cover_image,
            is_mature=media.classify(self._mature_genre_tag) is Classification.MATURE,
        )

    def add(self, media: MediaTitle) -> FavoriteAnime:
        return self._repository.add(self._to_favorite(media))

    def remove(self, media_id: int) -> bool:
        return self._repository.remove(media_id)

    def is_favorite(self, media_id: int) -> bool:
        return self._repository.is_favorite(media_id)

    def toggle(self, media: MediaTitle) -> bool:
        """
        Bascule l'état favori d'un anime.

        Returns:
            True si l'anime est désormais en favori
        """
        if self._repository.is_favorite(media.id):
            self._repository.remove(media.id)
            return False
        self._repository.add(self._to_favorite(media))
        return True

    def list_all(self) -> list[FavoriteAnime]:
        return self._repository.list_all()
