"""
Assainissement des titres avant interrogation des catalogues.

Règle : tout caractère qui n'est ni un caractère de mot ni un espace est
remplacé par un espace, puis le résultat est encodé en pourcentage (espaces
en %20, aucun caractère réservé laissé en clair). Sur la chaîne standard,
les deux-points sont conserves et restaurés littéralement : le catalogue
anime attend "Saison 2: Partie 1" et non "%3A".
"""

import re
from typing import Optional
from urllib.parse import quote

from hikariflix.core.value_objects.media_title import Classification

_UNSAFE_CHARS = re.compile(r"[^\w\s]")
_UNSAFE_CHARS_EXCEPT_COLON = re.compile(r"[^\w\s:]")


def _encode(cleaned: str) -> str:
    if not cleaned.strip():
        return ""
    return quote(cleaned, safe="")


def sanitize_keyword(title: Optional[str]) -> str:
    """
    Assainit un titre pour les catalogues adultes.

    >>> sanitize_keyword("Kuroinu: Kedakaki Seijo")
    'Kuroinu%20%20Kedakaki%20Seijo'

    Returns:
        Mot-clé encodé, ou "" si le titre est absent ou ne contient aucun mot
    """
    if not title:
        return ""
    return _encode(_UNSAFE_CHARS.sub(" ", title))


def sanitize_standard_keyword(title: Optional[str]) -> str:
    """
    Assainit un titre pour le catalogue anime, deux-points restaurés.

    >>> sanitize_standard_keyword("Attack on Titan: Final Season")
    'Attack%20on%20Titan:%20Final%20Season'
    """
    if not title:
        return ""
    return _encode(_UNSAFE_CHARS_EXCEPT_COLON.sub(" ", title)).replace("%3A", ":")


def sanitize_for(title: Optional[str], classification: Classification) -> str:
    """Applique la règle d'assainissement propre à la classification."""
    if classification is Classification.STANDARD:
        return sanitize_standard_keyword(title)
    return sanitize_keyword(title)
