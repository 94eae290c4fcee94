"""
Point d'entrée CLI de Pointeuse.

Configure le logging et fournit les commandes d'administration (init-db,
info, serve) et de consultation (balance, history, worklogs).
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli import balance, history, worklogs
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="pointeuse",
    help="Suivi du temps de travail et solde d'heures",
)
container = Container()


@app.callback()
def use_container(ctx: typer.Context) -> None:
    """Suivi du temps de travail et solde d'heures."""
    # Les commandes de consultation partagent le container de l'application
    ctx.obj = container


# Commandes de consultation
app.command()(balance)
app.command()(history)
app.command()(worklogs)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Taille de page : {config.default_page_size} (max {config.max_page_size})")
    typer.echo(f"Tolérance début futur : {config.max_start_skew_minutes} min")
    typer.echo(f"En-tête utilisateur : {config.user_header}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command(name="init-db")
def init_database() -> None:
    """Crée les tables et index de la base de données."""
    container.database.init()
    typer.echo(f"Base initialisée : {get_config().database_url}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur de l'API Pointeuse."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("pointeuse.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = get_config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    logger.debug("Démarrage de Pointeuse", database=settings.database_url)

    app()


if __name__ == "__main__":
    main()
