"""
Objets valeur pour les titres fournis par le collaborateur de métadonnées.

Le résolveur ne dépend que de romaji, english et de la présence du genre
adulte. Les autres champs ne servent qu'à l'affichage CLI.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hikariflix.utils.constants import MATURE_GENRE_TAG


class Classification(Enum):
    """Classification d'un titre, qui choisit la chaîne de recherche.

    Valeurs:
        STANDARD: Anime grand public (catalogue anime)
        MATURE: Contenu adulte (catalogue hentai + miroir)
    """

    STANDARD = "standard"
    MATURE = "mature"


@dataclass(frozen=True)
class MediaTitle:
    """
    Titre d'un anime tel que renvoyé par AniList.

    Attributs:
        id: ID AniList
        romaji: Titre romanise (toujours present)
        english: Titre anglais (optionnel)
        native: Titre en langue originale (optionnel)
        genres: Genres AniList
        description: Synopsis (peut contenir du HTML)
        average_score: Score moyen (0-100)
        popularity: Popularité AniList
        episodes: Nombre d'épisodes annoncé
        status: Statut de diffusion (FINISHED, RELEASING...)
        season: Saison de diffusion (WINTER, SPRING...)
        season_year: Année de la saison
        studios: Noms des studios
        cover_image: URL de la jaquette
        banner_image: URL de la bannière
    """

    id: int
    romaji: str
    english: Optional[str] = None
    native: Optional[str] = None
    genres: tuple[str, ...] = ()
    description: Optional[str] = None
    average_score: Optional[int] = None
    popularity: Optional[int] = None
    episodes: Optional[int] = None
    status: Optional[str] = None
    season: Optional[str] = None
    season_year: Optional[int] = None
    studios: tuple[str, ...] = ()
    cover_image: Optional[str] = None
    banner_image: Optional[str] = None

    def classify(self, mature_tag: str = MATURE_GENRE_TAG) -> Classification:
        """Retourne MATURE si les genres contiennent le tag adulte."""
        if mature_tag in self.genres:
            return Classification.MATURE
        return Classification.STANDARD

    @property
    def classification(self) -> Classification:
        """Classification avec le tag adulte par défaut."""
        return self.classify()

    @property
    def display_title(self) -> str:
        """Titre anglais si disponible, sinon romaji."""
        return self.english or self.romaji
