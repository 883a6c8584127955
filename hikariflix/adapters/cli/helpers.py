"""
Utilitaires partagés pour les commandes CLI de HikariFlix.

Ce module fournit :
- console : instance Rich Console partagée
- suppress_loguru : context manager pour désactiver/réactiver les logs loguru
- with_container : décorateur injectant un container initialise
"""

from contextlib import contextmanager
from functools import wraps

from loguru import logger as loguru_logger
from rich.console import Console

from hikariflix.container import Container

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour désactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("hikariflix")
    try:
        yield
    finally:
        loguru_logger.enable("hikariflix")


async def close_clients(container: Container) -> None:
    """Ferme les pools httpx des clients API instanciés par le container."""
    for provider in (
        container.anilist_client,
        container.hentai_client,
        container.hentai_mirror_client,
        container.anime_client,
    ):
        await provider().close()


def with_container(requires_db: bool = False):
    """
    Décorateur qui injecte un container initialise en premier argument.

    Les clients HTTP sont fermés à la fin de la commande.

    Args:
        requires_db: Si True, initialise la base de données (favoris).

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                container.database.init()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await close_clients(container)
        return wrapper
    return decorator
