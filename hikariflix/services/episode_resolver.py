"""
Résolution d'un titre en liste d'épisodes, avec chaîne de recherche de repli.

EpisodeResolver construit, pour chaque classification, une liste ordonnée de
stratégies nommées et les évalue de gauche a droite : la première qui renvoie
au moins un épisode gagne et interrompt la chaîne.

Chaîne MATURE:
1. mature-primary : catalogue adulte principal
2. mature-mirror:<suffixe> pour chaque suffixe ("1", "1-episode-1", "season-1")

Chaîne STANDARD (une seule passe):
1. anime-catalog : recherche de série puis liste des épisodes de la série

Un échec de catalogue (CatalogUnavailable) est journalisé puis traité comme
une absence de résultat : il fait avancer la chaîne. La distinction entre
"introuvable" et "catalogue en panne" n'est jamais remontée à l'appelant.

Le résolveur ne connaît pas les titres alternatifs : relancer avec le titre
anglais est la responsabilité de l'appelant (voir TitleLookupService).
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from hikariflix.core.entities.episode import Episode
from hikariflix.core.exceptions import CatalogUnavailable
from hikariflix.core.ports.catalog_clients import IAnimeCatalogClient, IMatureCatalogClient
from hikariflix.core.value_objects.media_title import Classification
from hikariflix.core.value_objects.resolution import ResolutionOutcome
from hikariflix.services.episode_normalizer import (
    episode_from_anime,
    episodes_from_hentai_results,
)
from hikariflix.services.title_sanitizer import sanitize_for
from hikariflix.utils.constants import MIRROR_SLUG_SUFFIXES


@dataclass(frozen=True)
class SearchStrategy:
    """
    Procédure de recherche nommée sur un catalogue.

    Attributs:
        name: Nom stable, repris dans les logs et dans ResolutionOutcome.strategy
        search: Coroutine (mot-clé assaini) -> episodes ; liste vide = aucun résultat
    """

    name: str
    search: Callable[[str], Awaitable[list[Episode]]]


class EpisodeResolver:
    """
    Orchestrateur de la recherche d'épisodes.

    Sans état entre deux appels : chaque resolve() est indépendant et
    n'exécute jamais deux stratégies en parallèle.

    Example:
        resolver = EpisodeResolver(mature_client, mirror_client, anime_client)
        outcome = await resolver.resolve("Overflow", Classification.MATURE)
        if outcome.is_resolved:
            for episode in outcome.episodes:
                print(episode.display_title)
    """

    def __init__(
        self,
        mature_client: IMatureCatalogClient,
        mirror_client: IMatureCatalogClient,
        anime_client: IAnimeCatalogClient,
        mirror_suffixes: tuple[str, ...] = MIRROR_SLUG_SUFFIXES,
    ) -> None:
        """
        Initialise le résolveur.

        Args:
            mature_client: Catalogue adulte principal
            mirror_client: Catalogue adulte miroir (interroge avec suffixes)
            anime_client: Catalogue anime grand public
            mirror_suffixes: Suffixes de slug essayés sur le miroir, dans l'ordre
        """
        self._mature_client = mature_client
        self._mirror_client = mirror_client
        self._anime_client = anime_client
        self._mirror_suffixes = tuple(mirror_suffixes)

    def strategies_for(self, classification: Classification) -> list[SearchStrategy]:
        """Retourne la chaîne ordonnée de stratégies pour une classification."""
        if classification is Classification.MATURE:
            stratégies = [SearchStrategy("mature-primary", self._search_mature_primary)]
            stratégies.extend(
                SearchStrategy(f"mature-mirror:{suffix}", self._mirror_search(suffix))
                for suffix in self._mirror_suffixes
            )
            return stratégies
        return [SearchStrategy("anime-catalog", self._search_anime_catalog)]

    async def resolve(
        self,
        title: Optional[str],
        classification: Classification,
    ) -> ResolutionOutcome:
        """
        Résout un titre en liste d'épisodes.

        Args:
            title: Titre brut (romaji, anglais...) ; jamais modifié
            classification: Choisit la chaîne de stratégies

        Returns:
            RESOLVED avec les épisodes de la première stratégie non vide,
            NOT_FOUND si le titre est absent ou vide après assainissement,
            EXHAUSTED si toutes les stratégies ont échoué ou renvoyé zéro épisode
        """
        keyword = sanitize_for(title, classification)
        if not keyword:
            logger.info(f"Titre inexploitable pour la recherche: {title!r}")
            return ResolutionOutcome.not_found()

        for strategy in self.strategies_for(classification):
            try:
                episodes = await strategy.search(keyword)
            except CatalogUnavailable as e:
                logger.warning(f"[{strategy.name}] {e} - stratégie suivante")
                continue

            if episodes:
                logger.info(
                    f"[{strategy.name}] {len(episodes)} épisode(s) trouvé(s) pour '{title}'"
                )
                return ResolutionOutcome.resolved(episodes, strategy.name)
            logger.debug(f"[{strategy.name}] aucun episode pour '{keyword}'")

        logger.info(f"Aucun épisode trouvé pour '{title}' ({classification.value})")
        return ResolutionOutcome.exhausted()

    async def _search_mature_primary(self, keyword: str) -> list[Episode]:
        results = await self._mature_client.search(keyword)
        if results:
            logger.debug(f"Catalogue adulte: correspondance '{results[0].name}'")
        return episodes_from_hentai_results(results)

    def _mirror_search(self, suffix: str) -> Callable[[str], Awaitable[list[Episode]]]:
        """Construit la stratégie miroir pour un suffixe donne."""

        async def search(keyword: str) -> list[Episode]:
            results = await self._mirror_client.search(keyword, suffix=suffix)
            return episodes_from_hentai_results(results)

        return search

    async def _search_anime_catalog(self, keyword: str) -> list[Episode]:
        """
        Recherche de série puis récupération dépendante des épisodes.

        Une série trouvée sans épisode (ou dont la liste échoue) n'est pas un
        succès partiel : le résultat est vide.
        """
        match = await self._anime_client.search(keyword)
        if match is None:
            return []
        logger.debug(f"Catalogue anime: correspondance '{match.title}' ({match.id})")
        records = await self._anime_client.list_episodes(match.id)
        return [episode_from_anime(record) for record in records]
