"""
Surface de lecture basée sur un lecteur externe (mpv par défaut).

Chaque commande relance le lecteur avec la source et la piste de
sous-titres demandées ; le processus précédent est arrête.
"""

import subprocess
from typing import Callable, Optional

from loguru import logger

from hikariflix.core.ports.player import IPlayerSurface, PlayerCommand


class MpvPlayerSurface(IPlayerSurface):
    """
    Lance le lecteur en processus détaché.

    Attributes:
        command: Executable du lecteur (ex: "mpv")
    """

    def __init__(
        self,
        command: str = "mpv",
        launcher: Callable[..., subprocess.Popen] = subprocess.Popen,
    ) -> None:
        self.command = command
        self._launcher = launcher
        self._process: Optional[subprocess.Popen] = None

    def build_args(self, command: PlayerCommand) -> list[str]:
        """Construit la ligne de commande du lecteur."""
        args = [self.command, command.source_url]
        if command.caption_track_url:
            args.append(f"--sub-file={command.caption_track_url}")
        if command.title:
            args.append(f"--force-media-title={command.title}")
        return args

    def present(self, command: PlayerCommand) -> None:
        """
        Lance le lecteur sur la source demandée.

        Raises:
            OSError: Si l'exécutable est introuvable (géré par la session)
        """
        self.stop()
        args = self.build_args(command)
        logger.debug(f"Lancement du lecteur: {args[0]} ({len(args) - 1} argument(s))")
        self._process = self._launcher(
            args,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )

    def stop(self) -> None:
        """Termine le processus du lecteur s'il tourne encore."""
        if self._process is not None and self._process.poll() is None:
            self._process.terminate()
        self._process = None

    @property
    def pid(self) -> Optional[int]:
        """PID du lecteur en cours, None si aucun."""
        return self._process.pid if self._process is not None else None
