"""
Commandes CLI pour la gestion des favoris (add, remove, list).
"""

import asyncio
from typing import Annotated

import typer
from rich.table import Table

from hikariflix.adapters.cli.helpers import console, suppress_loguru, with_container
from hikariflix.core.exceptions import MetadataUnavailable


# Application Typer pour les commandes de favoris
favorites_app = typer.Typer(
    name="favorites",
    help="Gestion des animes favoris",
    rich_markup_mode="rich",
)


@favorites_app.command("add")
def favorites_add(
    media_id: Annotated[int, typer.Argument(help="ID AniList de l'anime")],
) -> None:
    """Ajoute un anime aux favoris (métadonnées récupérées sur AniList)."""
    asyncio.run(_favorites_add_async(media_id))


@with_container(requires_db=True)
async def _favorites_add_async(container, media_id: int) -> None:
    client = container.anilist_client()
    service = container.favorites_service()

    try:
        media = await client.get_media(media_id)
    except MetadataUnavailable as e:
        console.print(f"[red]Métadonnées indisponibles pour {media_id}: {e}[/red]")
        raise typer.Exit(1)

    favorite = service.add(media)
    with suppress_loguru():
        console.print(f"[green]Ajoute aux favoris:[/green] {favorite.title}")


@favorites_app.command("remove")
def favorites_remove(
    media_id: Annotated[int, typer.Argument(help="ID AniList de l'anime")],
) -> None:
    """Retire un anime des favoris."""
    asyncio.run(_favorites_remove_async(media_id))


@with_container(requires_db=True)
async def _favorites_remove_async(container, media_id: int) -> None:
    service = container.favorites_service()

    with suppress_loguru():
        if service.remove(media_id):
            console.print(f"[green]Retire des favoris:[/green] {media_id}")
        else:
            console.print(f"[yellow]{media_id} n'est pas dans les favoris.[/yellow]")


@favorites_app.command("list")
def favorites_list() -> None:
    """Liste les favoris, du plus recent au plus ancien."""
    asyncio.run(_favorites_list_async())


@with_container(requires_db=True)
async def _favorites_list_async(container) -> None:
    service = container.favorites_service()
    favorites = service.list_all()

    with suppress_loguru():
        if not favorites:
            console.print("[yellow]Aucun favori.[/yellow]")
            return

        table = Table(title="Favoris")
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Titre")
        table.add_column("Adulte", justify="center")
        table.add_column("Ajoute le")

        for favorite in favorites:
            table.add_row(
                str(favorite.media_id),
                favorite.title,
                "oui" if favorite.is_mature else "",
                favorite.added_at.strftime("%Y-%m-%d %H:%M"),
            )

        console.print(table)
