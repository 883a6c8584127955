"""
Entités métier représentant les concepts centraux du domaine.

Exports:
- Episode: Épisode canonique, normalisé depuis les différents catalogues
- FavoriteAnime: Anime marqué comme favori par l'utilisateur
"""

from hikariflix.core.entities.episode import Episode
from hikariflix.core.entities.favorite import FavoriteAnime

__all__ = [
    "Episode",
    "FavoriteAnime",
]
