"""
Commandes CLI de consultation (balance, history, worklogs).

Les commandes ouvrent une session unique, construisent les services via le
container et affichent les resultats dans des tables Rich. Les erreurs du
domaine sont affichees et terminent la commande avec le code 1.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from pointeuse.container import Container
from pointeuse.core.entities.worklog import WorklogStatus
from pointeuse.core.exceptions import PointeuseError
from pointeuse.core.value_objects.requests import BalanceHistoryQuery, WorklogQuery
from pointeuse.services.balance import BalanceService
from pointeuse.services.worklog import WorklogService

console = Console()

_DATE_FORMAT = "%Y-%m-%d %H:%M"


@contextmanager
def open_services(
    container: Optional[Container] = None,
) -> Iterator[tuple[WorklogService, BalanceService]]:
    """
    Fournit les services partageant une meme session.

    Le container est celui de l'application (ctx.obj, voir pointeuse.main) ;
    a defaut, un nouveau container est construit.

    Les erreurs du domaine sont affichees puis converties en typer.Exit(1).
    """
    container = container or Container()
    container.database.init()
    with container.session() as session:
        worklog_repo = container.worklog_repository(session=session)
        try:
            yield (
                container.worklog_service(repository=worklog_repo),
                container.balance_service(
                    worklog_repo=worklog_repo,
                    balance_repo=container.balance_repository(session=session),
                ),
            )
        except PointeuseError as e:
            console.print(f"[red]Erreur:[/red] {e.message}")
            raise typer.Exit(code=1) from None


def _format(value: Optional[datetime]) -> str:
    return value.strftime(_DATE_FORMAT) if value else "-"


def balance(
    ctx: typer.Context,
    user_id: Annotated[str, typer.Argument(help="Identifiant de l'utilisateur")],
) -> None:
    """Affiche le solde d'heures courant d'un utilisateur."""
    with open_services(ctx.obj) as (_, balance_service):
        current = balance_service.get_balance(user_id)

    table = Table(title=f"Solde de {user_id}")
    table.add_column("Releve", justify="right")
    table.add_column("Non cumule", justify="right", style="yellow")
    table.add_column("Total", justify="right", style="bold green")
    table.add_column("Dernier releve", style="dim")
    table.add_row(
        f"{current.settled_value:.2f} h",
        f"{current.unsettled_hours:.2f} h",
        f"{current.value:.2f} h",
        _format(current.as_of),
    )
    console.print(table)


def history(
    ctx: typer.Context,
    user_id: Annotated[str, typer.Argument(help="Identifiant de l'utilisateur")],
    start: Annotated[
        Optional[datetime],
        typer.Option("--start", help="Date de debut (incluse)"),
    ] = None,
    end: Annotated[
        Optional[datetime],
        typer.Option("--end", help="Date de fin (incluse)"),
    ] = None,
) -> None:
    """Affiche l'historique du solde sur une plage de dates."""
    with open_services(ctx.obj) as (_, balance_service):
        entries = balance_service.get_balance_history(
            BalanceHistoryQuery(user_id=user_id, start_date=start, end_date=end)
        )

    if not entries:
        console.print("[dim]Aucun releve sur cette periode.[/dim]")
        return

    table = Table(title=f"Historique du solde de {user_id}")
    table.add_column("Date", style="cyan")
    table.add_column("Solde", justify="right")
    for entry in entries:
        table.add_row(_format(entry.timestamp), f"{entry.value:.2f} h")
    console.print(table)


def worklogs(
    ctx: typer.Context,
    user_id: Annotated[str, typer.Argument(help="Identifiant de l'utilisateur")],
    status: Annotated[
        Optional[WorklogStatus],
        typer.Option("--status", help="Filtrer par statut"),
    ] = None,
    page: Annotated[int, typer.Option("--page", min=1)] = 1,
    limit: Annotated[Optional[int], typer.Option("--limit", min=1)] = None,
) -> None:
    """Liste les worklogs d'un utilisateur (plus recents en premier)."""
    with open_services(ctx.obj) as (worklog_service, _):
        result = worklog_service.query_worklogs(
            WorklogQuery(user_id=user_id, status=status, page=page, limit=limit)
        )

    table = Table(
        title=f"Worklogs de {user_id} (page {result.page}/{max(result.total_pages, 1)})"
    )
    table.add_column("ID", style="dim")
    table.add_column("Debut", style="cyan")
    table.add_column("Fin", style="cyan")
    table.add_column("Lieu")
    table.add_column("Statut")
    table.add_column("Duree", justify="right")
    table.add_column("Description")
    for worklog in result.items:
        hours = worklog.duration_hours
        table.add_row(
            worklog.id or "",
            _format(worklog.start_time),
            _format(worklog.end_time),
            worklog.location.value,
            "[yellow]en cours[/yellow]" if worklog.is_open else "[green]termine[/green]",
            f"{hours:.2f} h" if hours is not None else "-",
            worklog.description or "",
        )
    console.print(table)
    console.print(f"Total: {result.total} worklog(s)")
