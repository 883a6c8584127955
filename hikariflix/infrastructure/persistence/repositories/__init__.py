"""
Implementations SQLModel des repositories.

Chaque repository :
- Hérite de l'interface ABC correspondante du domaine
- Reçoit une session SQLModel via injection de dépendances
- Convertit entre entités de domaine (dataclass) et modèles DB (SQLModel)
"""

from hikariflix.infrastructure.persistence.repositories.favorites_repository import (
    SQLModelFavoritesRepository,
)

__all__ = [
    "SQLModelFavoritesRepository",
]
