"""
Implementation SQLModel du repository des favoris.

Implémente l'interface IFavoritesRepository pour la persistance des favoris
dans la base de données SQLite via SQLModel.
"""

from sqlmodel import Session, select

from hikariflix.core.entities.favorite import FavoriteAnime
from hikariflix.core.ports.repositories import IFavoritesRepository
from hikariflix.infrastructure.persistence.models import FavoriteModel


class SQLModelFavoritesRepository(IFavoritesRepository):
    """
    Repository SQLModel pour les favoris.

    Implémente IFavoritesRepository avec conversion bidirectionnelle
    entre l'entité FavoriteAnime (domaine) et FavoriteModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les opérations DB
        """
        self._session = session

    def _to_entity(self, model: FavoriteModel) -> FavoriteAnime:
        """Convertit un modèle DB en entité domaine."""
        return FavoriteAnime(
            media_id=model.media_id,
            title=model.title,
            cover_image=model.cover_image,
            is_mature=model.is_mature,
            added_at=model.added_at,
        )

    def _to_model(self, entity: FavoriteAnime) -> FavoriteModel:
        """Convertit une entité domaine en modèle DB."""
        return FavoriteModel(
            media_id=entity.media_id,
            title=entity.title,
            cover_image=entity.cover_image,
            is_mature=entity.is_mature,
            added_at=entity.added_at,
        )

    def _get_model(self, media_id: int) -> FavoriteModel | None:
        statement = select(FavoriteModel).where(FavoriteModel.media_id == media_id)
        return self._session.exec(statement).first()

    def add(self, favorite: FavoriteAnime) -> FavoriteAnime:
        """Ajoute un favori ; s'il existe déjà, retourne l'entrée existante."""
        existing = self._get_model(favorite.media_id)
        if existing:
            return self._to_entity(existing)

        model = self._to_model(favorite)
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)

    def remove(self, media_id: int) -> bool:
        """Retire un favori. Retourne False s'il n'existait pas."""
        model = self._get_model(media_id)
        if model is None:
            return False
        self._session.delete(model)
        self._session.commit()
        return True

    def is_favorite(self, media_id: int) -> bool:
        """Indique si l'anime est en favori."""
        return self._get_model(media_id) is not None

    def list_all(self) -> list[FavoriteAnime]:
        """Liste les favoris, du plus recent au plus ancien."""
        statement = select(FavoriteModel).order_by(FavoriteModel.added_at.desc())
        return [self._to_entity(model) for model in self._session.exec(statement).all()]
