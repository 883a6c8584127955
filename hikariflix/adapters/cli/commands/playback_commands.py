"""
Commande CLI de lecture : ouvre une session et lance le lecteur externe.
"""

import asyncio
from typing import Annotated, Optional

import typer

from hikariflix.adapters.cli.helpers import console, suppress_loguru, with_container
from hikariflix.core.value_objects.stream import VariantKind
from hikariflix.services.playback_session import LoadStatus


def play(
    episode_id: Annotated[str, typer.Argument(help="ID d'épisode du catalogue anime")],
    dub: Annotated[
        bool, typer.Option("--dub", help="Lire la version doublée")
    ] = False,
    caption: Annotated[
        Optional[str],
        typer.Option("--caption", "-c", help="Libellé de la piste de sous-titres (ex: English)"),
    ] = None,
    title: Annotated[
        Optional[str], typer.Option("--title", help="Titre affiché par le lecteur")
    ] = None,
) -> None:
    """Lit un épisode dans le lecteur configuré (mpv par défaut)."""
    asyncio.run(_play_async(episode_id, dub, caption, title))


@with_container()
async def _play_async(
    container,
    episode_id: str,
    dub: bool,
    caption: Optional[str],
    title: Optional[str],
) -> None:
    session = container.playback_session()
    status = await session.open_episode(
        episode_id,
        title=title or episode_id,
        preferred_kind=VariantKind.DUB if dub else None,
        caption_label=caption,
    )

    with suppress_loguru():
        if status is LoadStatus.FETCH_FAILED:
            console.print("[red]Streaming info not available[/red]")
            raise typer.Exit(1)
        if status is LoadStatus.UNAVAILABLE:
            console.print("[red]Aucune variante lisible pour cet épisode.[/red]")
            raise typer.Exit(1)
        if status is LoadStatus.AWAITING_CHOICE:
            kinds = ", ".join(k.value for k in session.state.available_kinds)
            console.print(
                f"[yellow]Pas de version sous-titrée. Variantes disponibles: {kinds}[/yellow]"
            )
            if not dub:
                console.print("[dim]Utilisez --dub pour lancer la version doublée.[/dim]")
            raise typer.Exit(1)
        if status is LoadStatus.PLAYER_FAILED:
            console.print(f"[red]Impossible de lancer le lecteur:[/red] {session.player_error}")
            raise typer.Exit(1)

        selection = session.selection
        if dub and selection.variant_kind is not VariantKind.DUB:
            console.print("[yellow]Version doublée indisponible.[/yellow]")
        if caption and selection.caption_track is None:
            console.print(f"[yellow]Piste '{caption}' introuvable, lecture sans sous-titres.[/yellow]")

        console.print(
            f"[green]Lecture[/green] {episode_id} "
            f"[cyan]({selection.variant_kind.value})[/cyan]"
        )
        if selection.caption_track:
            console.print(f"  Sous-titres: {selection.caption_track}")
