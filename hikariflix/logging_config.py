"""
Journalisation HikariFlix via loguru.

Deux sorties :
- stderr : lignes colorées, filtrées par niveau et par module
- fichier : JSON sérialisé avec rotation, tous niveaux confondus

Les échecs des catalogues (timeouts, réponses illisibles, miroir en panne)
ne sont jamais remontés à l'utilisateur : ils n'apparaissent que dans ces
journaux. Le niveau des clients de catalogues est donc réglable à part
(HIKARIFLIX_CATALOG_LOG_LEVEL) pour diagnostiquer une chaîne de repli sans
noyer la console sous les messages DEBUG du reste de l'application.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CATALOG_LOGGER = "hikariflix.adapters.api"

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def console_levels(log_level: str, catalog_log_level: Optional[str] = None) -> dict[str, str]:
    """
    Filtre loguru par module pour la console.

    La clé "" s'applique à tous les modules, CATALOG_LOGGER aux clients HTTP
    des catalogues et d'AniList.

    Example:
        >>> console_levels("WARNING", "debug")
        {'': 'WARNING', 'hikariflix.adapters.api': 'DEBUG'}
    """
    level = log_level.upper()
    return {"": level, CATALOG_LOGGER: (catalog_log_level or level).upper()}


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/hikariflix.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    catalog_log_level: Optional[str] = None,
) -> None:
    """
    Installe les handlers console et fichier (remplace ceux déjà présents).

    Args:
        log_level: Niveau minimum affiché sur stderr
        log_file: Fichier JSON, créé avec ses répertoires parents
        rotation_size: Taille déclenchant la rotation (ex: "10 MB")
        retention_count: Nombre d'archives conservées
        catalog_log_level: Niveau propre aux clients de catalogues (défaut: log_level)
    """
    levels = console_levels(log_level, catalog_log_level)
    logger.remove()

    # Le filtre par module ne voit que ce que le niveau du handler laisse passer
    logger.add(
        sys.stderr,
        level=min(logger.level(name).no for name in levels.values()),
        filter=levels,
        format=_CONSOLE_FORMAT,
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        f"Journalisation: console {levels['']}, catalogues {levels[CATALOG_LOGGER]}, "
        f"fichier {log_file}"
    )
