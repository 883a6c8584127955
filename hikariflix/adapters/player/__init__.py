"""Surfaces de lecture vidéo (implémentations de IPlayerSurface)."""

from hikariflix.adapters.player.mpv_player import MpvPlayerSurface

__all__ = ["MpvPlayerSurface"]
