"""
Module de persistance SQLite pour HikariFlix.

Ce module fournit l'infrastructure de stockage des favoris utilisant SQLModel.
Il contient :

- database.py : Configuration de l'engine SQLite, session factory, initialisation
- models.py : Modèles SQLModel représentant les tables de la base de données

Les modèles ici sont des adapters de persistance, distincts des entités de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.
"""

from hikariflix.infrastructure.persistence.database import (
    get_engine,
    get_session,
    init_db,
)
from hikariflix.infrastructure.persistence.models import FavoriteModel

__all__ = [
    "get_engine",
    "get_session",
    "init_db",
    "FavoriteModel",
]
