"""
Point d'entrée CLI de HikariFlix.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import episodes, favorites_app, play, search, streams
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="hikariflix",
    help="Recherche d'épisodes et lecture d'anime",
)
container = Container()

# État global pour les options de verbosité
state = {"verbose": 0, "quiet": False}

_VERBOSITY_LEVELS = {0: None, 1: "INFO", 2: "DEBUG"}


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosité (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """HikariFlix - Épisodes et flux d'anime en ligne de commande."""
    if quiet:
        state["quiet"] = True
        level = "ERROR"
    else:
        state["verbose"] = verbose
        level = _VERBOSITY_LEVELS.get(min(verbose, 2))

    if level is not None:
        settings = get_config()
        configure_logging(
            log_level=level,
            log_file=settings.log_file,
            rotation_size=settings.log_rotation_size,
            retention_count=settings.log_retention_count,
            catalog_log_level=settings.catalog_log_level,
        )


# Commandes de consultation et de lecture
app.command()(search)
app.command()(episodes)
app.command()(streams)
app.command()(play)

# Monter favorites_app comme sous-commande
app.add_typer(favorites_app, name="favorites")


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration HikariFlix")
    typer.echo(f"AniList : {config.anilist_api_url}")
    typer.echo(f"Catalogue hentai : {config.hentai_api_url}")
    typer.echo(f"Catalogue miroir : {config.hentai_mirror_api_url}")
    typer.echo(f"Catalogue anime : {config.anime_api_url}")
    typer.echo(f"Timeout HTTP : {config.http_timeout_seconds}s")
    typer.echo(f"Genre adulte : {config.mature_genre_tag}")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Lecteur : {config.player_command}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Niveau de log catalogues : {config.catalog_log_level or config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"HikariFlix v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        catalog_log_level=settings.catalog_log_level,
    )

    logger.info(f"Démarrage de HikariFlix v{__version__}")

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
