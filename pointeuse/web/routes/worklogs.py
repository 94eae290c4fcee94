"""
Routes de gestion des worklogs.

Démarrage, clôture, modification, création directe d'un worklog terminé,
suppression, lecture et recherche paginée. Chaque route valide la forme de
la requête puis délègue au WorklogService ; les erreurs du domaine sont
traduites par les gestionnaires d'exceptions de l'application.
"""

from datetime import datetime
from typing import Annotated, Optional

from fastapi import APIRouter, Query

from ...core.entities.worklog import WorklogStatus
from ...core.value_objects.requests import (
    CompleteWorkRequest,
    CreateCompletedWorkRequest,
    ModifyWorkRequest,
    StartWorkRequest,
    WorklogQuery,
    WorklogRef,
)
from ..deps import UserId, WorklogServiceDep
from ..responses import success_response
from ..schemas import (
    CompleteWorkBody,
    CreateCompletedWorkBody,
    ModifyWorkBody,
    StartWorkBody,
    WorklogOut,
    WorklogPageOut,
)

router = APIRouter(prefix="/api", tags=["worklogs"])


@router.post("/worklogs/start")
def start_work(body: StartWorkBody, user_id: UserId, service: WorklogServiceDep):
    """Démarre une session de travail."""
    worklog = service.start_work(
        StartWorkRequest(
            user_id=user_id,
            start_time=body.start_time,
            location=body.location,
            description=body.description,
        )
    )
    return success_response(WorklogOut.from_entity(worklog))


@router.post("/worklogs/{worklog_id}/complete")
def complete_work(
    worklog_id: str, body: CompleteWorkBody, user_id: UserId, service: WorklogServiceDep
):
    """Termine une session en cours."""
    worklog = service.complete_work(
        CompleteWorkRequest(worklog_id=worklog_id, user_id=user_id, end_time=body.end_time)
    )
    return success_response(WorklogOut.from_entity(worklog))


@router.patch("/worklogs/{worklog_id}")
def modify_work(
    worklog_id: str, body: ModifyWorkBody, user_id: UserId, service: WorklogServiceDep
):
    """Modifie partiellement un worklog."""
    worklog = service.modify_work(
        ModifyWorkRequest(
            worklog_id=worklog_id,
            user_id=user_id,
            start_time=body.start_time,
            description=body.description,
            location=body.location,
        )
    )
    return success_response(WorklogOut.from_entity(worklog))


@router.post("/worklogs/completed")
def create_completed_work(
    body: CreateCompletedWorkBody, user_id: UserId, service: WorklogServiceDep
):
    """Crée directement un worklog terminé."""
    worklog = service.create_completed_work(
        CreateCompletedWorkRequest(
            user_id=user_id,
            start_time=body.start_time,
            end_time=body.end_time,
            location=body.location,
            description=body.description,
        )
    )
    return success_response(WorklogOut.from_entity(worklog))


@router.delete("/worklogs/{worklog_id}")
def delete_work(worklog_id: str, user_id: UserId, service: WorklogServiceDep):
    """Supprime un worklog (un second appel répond 404)."""
    service.delete_work(WorklogRef(worklog_id=worklog_id, user_id=user_id))
    return success_response({"success": True})


@router.get("/worklog/{worklog_id}")
def get_worklog(worklog_id: str, user_id: UserId, service: WorklogServiceDep):
    """Lit un worklog de l'utilisateur."""
    worklog = service.get_worklog(WorklogRef(worklog_id=worklog_id, user_id=user_id))
    return success_response(WorklogOut.from_entity(worklog))


@router.get("/worklogs")
def query_worklogs(
    user_id: UserId,
    service: WorklogServiceDep,
    start_date: Annotated[Optional[datetime], Query(alias="startDate")] = None,
    end_date: Annotated[Optional[datetime], Query(alias="endDate")] = None,
    status: Annotated[Optional[WorklogStatus], Query()] = None,
    page: Annotated[Optional[int], Query(ge=1)] = None,
    limit: Annotated[Optional[int], Query(ge=1)] = None,
):
    """Recherche paginée des worklogs de l'utilisateur."""
    result = service.query_worklogs(
        WorklogQuery(
            user_id=user_id,
            start_date=start_date,
            end_date=end_date,
            status=status,
            page=page,
            limit=limit,
        )
    )
    return success_response(WorklogPageOut.from_page(result))
