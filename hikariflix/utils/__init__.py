"""
Utilitaires et constantes pour HikariFlix.

Ce module contient les constantes partagées.
"""

from hikariflix.utils.constants import (
    MATURE_GENRE_TAG,
    MIRROR_SLUG_SUFFIXES,
)

__all__ = [
    "MATURE_GENRE_TAG",
    "MIRROR_SLUG_SUFFIXES",
]
