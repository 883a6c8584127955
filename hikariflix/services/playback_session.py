"""
Session de lecture : du choix d'un épisode aux commandes envoyées au lecteur.

PlaybackSession relie le StreamResolver, la machine d'état de sélection et la
surface de lecture. Chaque ouverture d'épisode remplace entièrement la
précédente : une réponse de flux arrivée après le chargement d'un autre
épisode est ignorée (comparaison de l'ID d'épisode courant).
"""

from enum import Enum
from typing import Optional

from loguru import logger

from hikariflix.core.ports.player import IPlayerSurface, PlayerCommand
from hikariflix.core.value_objects.stream import CaptionTrack, VariantKind
from hikariflix.services.playback_selection import (
    PlaybackSelection,
    PlaybackSelectionState,
    PlaybackState,
)
from hikariflix.services.stream_resolver import StreamResolver


class LoadStatus(Enum):
    """Résultat de PlaybackSession.open_episode().

    Valeurs:
        PLAYING: Variante chargée et envoyée au lecteur
        AWAITING_CHOICE: Variantes disponibles mais ni sub ni variante préférée
        UNAVAILABLE: Aucune variante lisible
        FETCH_FAILED: Streaming info not available (lecture non tentée)
        PLAYER_FAILED: Variante chargée mais le lecteur n'a pas pu être lancé
        SUPERSEDED: Un autre épisode a été ouvert entre-temps, réponse ignorée
    """

    PLAYING = "playing"
    AWAITING_CHOICE = "awaiting_choice"
    UNAVAILABLE = "unavailable"
    FETCH_FAILED = "fetch_failed"
    PLAYER_FAILED = "player_failed"
    SUPERSEDED = "superseded"


class PlaybackSession:
    """
    Session de lecture d'un utilisateur.

    Example:
        session = PlaybackSession(stream_resolver, player)
        status = await session.open_episode(
            "frieren-18542?ep=107257",
            title="Episode 1",
            preferred_kind=VariantKind.DUB,
        )
        session.select_caption_track(None)
    """

    def __init__(
        self,
        stream_resolver: StreamResolver,
        player: IPlayerSurface,
        selection: Optional[PlaybackSelectionState] = None,
    ) -> None:
        self._stream_resolver = stream_resolver
        self._player = player
        self._selection = selection or PlaybackSelectionState()
        self._episode_id: Optional[str] = None
        self._episode_title: Optional[str] = None
        self._player_error: Optional[OSError] = None

    @property
    def episode_id(self) -> Optional[str]:
        """ID de l'épisode actuellement ouvert."""
        return self._episode_id

    @property
    def selection(self) -> PlaybackSelection:
        return self._selection.selection

    @property
    def state(self) -> PlaybackSelectionState:
        """Machine d'état sous-jacente (lecture seule pour l'affichage)."""
        return self._selection

    @property
    def player_error(self) -> Optional[OSError]:
        """Dernière erreur de lancement du lecteur, None après un lancement réussi."""
        return self._player_error

    async def open_episode(
        self,
        episode_id: str,
        title: Optional[str] = None,
        preferred_kind: Optional[VariantKind] = None,
        caption_label: Optional[str] = None,
    ) -> LoadStatus:
        """
        Ouvre un épisode : récupère ses variantes puis lance la lecture.

        La sélection précédente est remise à zéro avant l'appel réseau. Si un
        autre épisode est ouvert pendant l'attente, la réponse est ignorée.
        La variante préférée et la piste de sous-titres sont appliquées à la
        sélection avant l'envoi au lecteur : une seule commande est émise.

        Args:
            episode_id: ID d'épisode du catalogue anime
            title: Titre affiché par le lecteur
            preferred_kind: Variante à lire à la place de sub, si disponible
            caption_label: Libellé de la piste de sous-titres (insensible à la casse)
        """
        self._episode_id = episode_id
        self._episode_title = title
        self._player_error = None
        self._selection.reset()
        self._player.stop()

        result = await self._stream_resolver.fetch_variants(episode_id)

        if self._episode_id != episode_id:
            logger.debug(
                f"Réponse de flux obsolète ignorée pour {episode_id} "
                f"(épisode courant: {self._episode_id})"
            )
            return LoadStatus.SUPERSEDED

        if not result.ok:
            return LoadStatus.FETCH_FAILED

        selection = self._selection.load(result.variants)
        if selection.state is PlaybackState.UNAVAILABLE:
            return LoadStatus.UNAVAILABLE

        if preferred_kind is not None:
            self._selection.switch_variant(preferred_kind)
        if self._selection.selection.state is PlaybackState.UNLOADED:
            return LoadStatus.AWAITING_CHOICE

        if caption_label:
            track = self.find_caption_track(caption_label)
            if track is not None:
                self._selection.select_caption_track(track.file_url)

        if not self._apply():
            return LoadStatus.PLAYER_FAILED
        return LoadStatus.PLAYING

    def switch_variant(self, kind: VariantKind) -> bool:
        """Bascule sub/dub ; la piste de sous-titres est remise à zéro."""
        switched = self._selection.switch_variant(kind)
        if switched:
            self._apply()
        return switched

    def select_caption_track(self, file_url: Optional[str]) -> None:
        """Applique immédiatement une piste de sous-titres (None pour aucune)."""
        self._selection.select_caption_track(file_url)
        self._apply()

    def find_caption_track(self, label: str) -> Optional[CaptionTrack]:
        """Piste de la variante active dont le libellé correspond (insensible à la casse)."""
        variant = self._selection.active_variant
        if variant is None:
            return None
        wanted = label.casefold()
        return next(
            (t for t in variant.subtitle_tracks if t.label.casefold() == wanted),
            None,
        )

    def report_playback_error(self, error: object) -> None:
        """Signal d'erreur du lecteur : journalisé, sans autre traitement."""
        logger.error(f"Erreur de lecture ({self._episode_id}): {error}")

    def close(self) -> None:
        """Arrête la lecture et oublie l'épisode courant."""
        self._player.stop()
        self._selection.reset()
        self._episode_id = None
        self._episode_title = None
        self._player_error = None

    def _apply(self) -> bool:
        """
        Envoie la sélection courante au lecteur (sans accusé de réception).

        Returns:
            False si le lecteur n'a pas pu être lancé
        """
        source = self._selection.active_source
        if source is None:
            return False
        command = PlayerCommand(
            source_url=source.file_url,
            caption_track_url=self._selection.caption_track,
            title=self._episode_title,
        )
        try:
            self._player.present(command)
        except OSError as e:
            self._player_error = e
            self.report_playback_error(e)
            return False
        self._player_error = None
        return True
