"""Sous-package CLI commands - re-exporte les commandes publiques."""

from hikariflix.adapters.cli.commands.catalog_commands import (
    episodes,
    search,
    streams,
)
from hikariflix.adapters.cli.commands.favorites_commands import (
    favorites_add,
    favorites_app,
    favorites_list,
    favorites_remove,
)
from hikariflix.adapters.cli.commands.playback_commands import (
    play,
)

__all__ = [
    "episodes",
    "favorites_add",
    "favorites_app",
    "favorites_list",
    "favorites_remove",
    "play",
    "search",
    "streams",
]
