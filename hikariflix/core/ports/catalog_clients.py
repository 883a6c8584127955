"""
Interfaces ports pour les catalogues externes d'épisodes et de flux.

Chaque catalogue renvoie une forme de données différente pour le même concept
("liste d'épisodes"). Les adaptateurs convertissent le JSON brut en
enregistrements typés ci-dessous ; la normalisation vers l'entité Episode
est faite par services/episode_normalizer.py.

Contrat commun : une erreur de transport ou une réponse illisible lève
CatalogUnavailable. Une réponse valide sans résultat renvoie une liste vide
(ou None pour une recherche de série).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class HentaiEpisodeRecord:
    """Épisode tel que renvoyé par le catalogue adulte (et son miroir)."""

    id: str
    name: str
    link: str = ""
    slug: Optional[str] = None


@dataclass
class HentaiSearchResult:
    """
    Résultat d'une recherche sur le catalogue adulte.

    Attributs:
        name: Nom de la série côté catalogue
        episodes: Episodes dans l'ordre du catalogue
        streams: Flux bruts (largeur, hauteur, taille, url), non exploités ici
    """

    name: str
    episodes: list[HentaiEpisodeRecord] = field(default_factory=list)
    streams: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class AnimeSeriesMatch:
    """Série trouvée par la recherche du catalogue anime."""

    id: str
    title: str
    data_id: Optional[str] = None
    link: str = ""


@dataclass
class AnimeEpisodeRecord:
    """
    Épisode du catalogue anime.

    Selon l'endpoint, le numéro est dans episode_no ou dans number.
    """

    id: str
    title: str
    episode_no: Optional[str] = None
    number: Optional[str] = None
    japanese_title: Optional[str] = None


@dataclass
class StreamingInfoEntry:
    """
    Entrée streamingInfo du catalogue de flux.

    Attributs:
        status: Statut de la promesse côté API ("fulfilled", "rejected")
        variant_type: "sub" ou "dub" (None si absent de la réponse)
        sources: Liste brute de {file, type}
        tracks: Liste brute de {file, label, kind, default}
        encrypted: Indicateur de chiffrement
        intro: {start, end} ou None
        outro: {start, end} ou None
        server: Serveur fournissant le flux
    """

    status: str
    variant_type: Optional[str] = None
    sources: list[dict[str, Any]] = field(default_factory=list)
    tracks: list[dict[str, Any]] = field(default_factory=list)
    encrypted: bool = False
    intro: Optional[dict[str, Any]] = None
    outro: Optional[dict[str, Any]] = None
    server: str = ""


class IMatureCatalogClient(ABC):
    """
    Interface des catalogues adultes (catalogue principal et miroir).

    Les deux catalogues partagent la même forme de réponse ; seul le miroir
    est interroge avec un suffixe de slug.
    """

    @abstractmethod
    async def search(
        self,
        keyword: str,
        suffix: Optional[str] = None,
    ) -> list[HentaiSearchResult]:
        """
        Recherche une série par mot-clé déjà assaini et encodé.

        Args:
            keyword: Mot-clé encodé en pourcentage
            suffix: Suffixe de slug optionnel (ex: "1-episode-1")

        Returns:
            Résultats dans l'ordre du catalogue (vide si aucun)

        Raises:
            CatalogUnavailable: En cas d'erreur transport ou de réponse illisible
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Identifiant du catalogue (ex: 'hentai', 'hentai-mirror')."""
        ...


class IAnimeCatalogClient(ABC):
    """
    Interface du catalogue anime grand public.

    Regroupe trois endpoints logiques : recherche de série, liste des
    episodes d'une série et variantes de flux d'un épisode.
    """

    @abstractmethod
    async def search(self, keyword: str) -> Optional[AnimeSeriesMatch]:
        """
        Recherche la série correspondant au mot-clé.

        Returns:
            La série trouvée, ou None si le catalogue répond success=false

        Raises:
            CatalogUnavailable: En cas d'erreur transport ou de réponse illisible
        """
        ...

    @abstractmethod
    async def list_episodes(self, series_id: str) -> list[AnimeEpisodeRecord]:
        """
        Liste les épisodes d'une série.

        Returns:
            Épisodes dans l'ordre du catalogue (vide si success=false)

        Raises:
            CatalogUnavailable: En cas d'erreur transport ou de réponse illisible
        """
        ...

    @abstractmethod
    async def fetch_streaming_info(self, episode_id: str) -> list[StreamingInfoEntry]:
        """
        Récupère les entrées streamingInfo d'un épisode.

        Raises:
            CatalogUnavailable: En cas d'erreur, y compris success=false
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Identifiant du catalogue (ex: 'anime')."""
        ...
