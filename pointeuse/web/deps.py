"""
Dépendances partagées de l'application web.

Fournit aux routes :
- l'utilisateur authentifié en amont (en-tête configurable, X-User-Id par défaut)
- une session SQLModel par requête, fermée à la fin de la requête
- les services construits sur cette session
"""

from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends, HTTPException, Request
from sqlmodel import Session

from ..container import Container
from ..services.balance import BalanceService
from ..services.worklog import WorklogService


def get_container(request: Request) -> Container:
    """Retourne le Container DI attaché à l'application."""
    return request.app.state.container


ContainerDep = Annotated[Container, Depends(get_container)]


def get_user_id(request: Request, container: ContainerDep) -> str:
    """Lit l'identifiant utilisateur fourni par la couche d'authentification."""
    header = container.config().user_header
    user_id = request.headers.get(header, "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail=f"En-tête {header} manquant")
    return user_id


def get_db_session(container: ContainerDep) -> Iterator[Session]:
    """Ouvre une session pour la durée de la requête."""
    with container.session() as session:
        yield session


SessionDep = Annotated[Session, Depends(get_db_session)]


def get_worklog_service(container: ContainerDep, session: SessionDep) -> WorklogService:
    return container.worklog_service(
        repository=container.worklog_repository(session=session)
    )


def get_balance_service(container: ContainerDep, session: SessionDep) -> BalanceService:
    return container.balance_service(
        worklog_repo=container.worklog_repository(session=session),
        balance_repo=container.balance_repository(session=session),
    )


UserId = Annotated[str, Depends(get_user_id)]
WorklogServiceDep = Annotated[WorklogService, Depends(get_worklog_service)]
BalanceServiceDep = Annotated[BalanceService, Depends(get_balance_service)]
