"""
Commandes CLI de consultation : recherche AniList, episodes, flux.
"""

import asyncio
from typing import Annotated

import typer
from rich.table import Table

from hikariflix.adapters.cli.helpers import console, suppress_loguru, with_container
from hikariflix.core.exceptions import MetadataUnavailable
from hikariflix.core.value_objects.resolution import ResolutionStatus


def search(
    query: Annotated[str, typer.Argument(help="Titre a rechercher sur AniList")],
    page: Annotated[int, typer.Option("--page", "-p", min=1, help="Page de résultats")] = 1,
) -> None:
    """Recherche un anime sur AniList."""
    asyncio.run(_search_async(query, page))


@with_container()
async def _search_async(container, query: str, page: int) -> None:
    client = container.anilist_client()
    config = container.config()

    try:
        results = await client.search_media(query, page=page)
    except MetadataUnavailable as e:
        console.print(f"[red]AniList indisponible: {e}[/red]")
        raise typer.Exit(1)

    with suppress_loguru():
        if not results:
            console.print(f"[yellow]Aucun résultat pour '{query}'.[/yellow]")
            return

        table = Table(title=f"Résultats pour '{query}'")
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Titre")
        table.add_column("Episodes", justify="right")
        table.add_column("Score", justify="right")
        table.add_column("Année", justify="right")
        table.add_column("Classe")

        for media in results:
            table.add_row(
                str(media.id),
                media.display_title,
                str(media.episodes or "?"),
                str(media.average_score or "-"),
                str(media.season_year or "-"),
                media.classify(config.mature_genre_tag).value,
            )

        console.print(table)


def episodes(
    media_id: Annotated[int, typer.Argument(help="ID AniList de l'anime")],
) -> None:
    """Liste les épisodes d'un anime depuis les catalogues."""
    asyncio.run(_episodes_async(media_id))


@with_container()
async def _episodes_async(container, media_id: int) -> None:
    lookup = container.title_lookup_service()

    try:
        media, outcome = await lookup.lookup_by_id(media_id)
    except MetadataUnavailable as e:
        console.print(f"[red]Métadonnées indisponibles pour {media_id}: {e}[/red]")
        raise typer.Exit(1)

    with suppress_loguru():
        console.print(f"\n[bold]{media.display_title}[/bold]")

        if outcome.status is ResolutionStatus.NOT_FOUND:
            console.print("[yellow]Titre absent, aucune recherche effectuée.[/yellow]")
            return
        if not outcome.is_resolved:
            console.print("[yellow]No episodes found[/yellow]")
            return

        table = Table(title=f"Episodes ({outcome.strategy})")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Episode")
        table.add_column("ID", style="cyan")

        for position, episode in enumerate(outcome.episodes, start=1):
            table.add_row(str(position), episode.label(position), episode.id)

        console.print(table)


def streams(
    episode_id: Annotated[str, typer.Argument(help="ID d'épisode du catalogue anime")],
) -> None:
    """Affiche les variantes sub/dub disponibles pour un épisode."""
    asyncio.run(_streams_async(episode_id))


@with_container()
async def _streams_async(container, episode_id: str) -> None:
    resolver = container.stream_resolver()
    result = await resolver.fetch_variants(episode_id)

    with suppress_loguru():
        if not result.ok:
            console.print("[red]Streaming info not available[/red]")
            raise typer.Exit(1)
        if not result.variants:
            console.print("[yellow]Aucune variante lisible pour cet épisode.[/yellow]")
            return

        table = Table(title=f"Flux pour {episode_id}")
        table.add_column("Variante", style="cyan")
        table.add_column("Serveur")
        table.add_column("Source")
        table.add_column("Sous-titres")
        table.add_column("Chiffre", justify="center")

        for variant in result.variants:
            source = variant.primary_source
            table.add_row(
                variant.kind.value,
                variant.provider_server or "-",
                source.file_url if source else "-",
                ", ".join(t.label for t in variant.subtitle_tracks) or "-",
                "oui" if variant.is_encrypted else "non",
            )

        console.print(table)
