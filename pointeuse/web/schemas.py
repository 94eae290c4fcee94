"""
Schemas pydantic de la couche HTTP.

Les corps de requete sont valides ici (forme, types, enums) avant d'etre
convertis en objets valeur du domaine. Les noms de champs circulent en
camelCase sur le reseau (startTime, endTime, ...).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..core.entities.balance import Balance, BalanceSnapshot
from ..core.entities.worklog import Worklog, WorkLocation, WorklogStatus
from ..core.value_objects.pagination import WorklogPage


class _CamelModel(BaseModel):
    """Base des schemas : alias camelCase, noms Python acceptes aussi."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ----------------------------------------------------------------------------
# Requetes
# ----------------------------------------------------------------------------


class StartWorkBody(_CamelModel):
    start_time: datetime
    location: WorkLocation
    description: Optional[str] = None


class CompleteWorkBody(_CamelModel):
    end_time: datetime


class ModifyWorkBody(_CamelModel):
    start_time: Optional[datetime] = None
    description: Optional[str] = None
    location: Optional[WorkLocation] = None


class CreateCompletedWorkBody(_CamelModel):
    """Heures brutes : le service se charge du parsing et de la coherence."""

    start_time: str
    end_time: str
    location: WorkLocation
    description: Optional[str] = None


# ----------------------------------------------------------------------------
# Reponses
# ----------------------------------------------------------------------------


class WorklogOut(_CamelModel):
    id: str
    user_id: str
    start_time: datetime
    end_time: Optional[datetime] = None
    location: WorkLocation
    description: Optional[str] = None
    status: WorklogStatus
    duration_hours: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, worklog: Worklog) -> "WorklogOut":
        return cls(
            id=worklog.id,
            user_id=worklog.user_id,
            start_time=worklog.start_time,
            end_time=worklog.end_time,
            location=worklog.location,
            description=worklog.description,
            status=worklog.status,
            duration_hours=worklog.duration_hours,
            created_at=worklog.created_at,
            updated_at=worklog.updated_at,
        )


class WorklogPageOut(_CamelModel):
    items: list[WorklogOut]
    total: int
    page: int
    limit: int
    total_pages: int
    has_more: bool

    @classmethod
    def from_page(cls, page: WorklogPage) -> "WorklogPageOut":
        return cls(
            items=[WorklogOut.from_entity(worklog) for worklog in page.items],
            total=page.total,
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
            has_more=page.has_more,
        )


class BalanceOut(_CamelModel):
    user_id: str
    value: float
    settled_value: float
    unsettled_hours: float
    as_of: Optional[datetime] = None

    @classmethod
    def from_entity(cls, balance: Balance) -> "BalanceOut":
        return cls(
            user_id=balance.user_id,
            value=balance.value,
            settled_value=balance.settled_value,
            unsettled_hours=balance.unsettled_hours,
            as_of=balance.as_of,
        )


class BalanceSnapshotOut(_CamelModel):
    timestamp: datetime
    value: float

    @classmethod
    def from_entity(cls, snapshot: BalanceSnapshot) -> "BalanceSnapshotOut":
        return cls(timestamp=snapshot.timestamp, value=snapshot.value)
