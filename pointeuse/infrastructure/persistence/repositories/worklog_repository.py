"""
Implementation SQLModel du repository Worklog.

Implemente l'interface IWorklogRepository pour la persistance des worklogs.
Les ecritures sensibles a la concurrence (ouverture, cloture, suppression)
sont des ecritures conditionnelles en une seule instruction SQL.
"""

from datetime import datetime
from typing import Optional

from loguru import logger
from sqlalchemy import delete, func, or_, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from pointeuse.core.entities.worklog import Worklog, WorkLocation, WorklogStatus
from pointeuse.core.exceptions import ConflictError, NotFoundError, ValidationError
from pointeuse.core.ports.repositories import IWorklogRepository
from pointeuse.infrastructure.persistence.models import OPEN_STATUS, WorklogModel
from pointeuse.utils.helpers import utc_now


class SQLModelWorklogRepository(IWorklogRepository):
    """
    Repository SQLModel pour les worklogs.

    Implemente IWorklogRepository avec conversion bidirectionnelle
    entre l'entite Worklog (domaine) et WorklogModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: WorklogModel) -> Worklog:
        """Convertit un modele DB en entite domaine."""
        return Worklog(
            id=model.id,
            user_id=model.user_id,
            start_time=model.start_time,
            end_time=model.end_time,
            location=WorkLocation(model.location),
            description=model.description,
            status=WorklogStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Worklog) -> WorklogModel:
        """Convertit une entite domaine en modele DB (l'ID est genere si absent)."""
        model = WorklogModel(
            user_id=entity.user_id,
            start_time=entity.start_time,
            end_time=entity.end_time,
            location=entity.location.value,
            description=entity.description,
            status=entity.status.value,
        )
        if entity.id:
            model.id = entity.id
        return model

    def get_by_id(self, worklog_id: str) -> Optional[Worklog]:
        """Recupere un worklog par son ID."""
        model = self._session.get(WorklogModel, worklog_id)
        if model:
            return self._to_entity(model)
        return None

    def add(self, worklog: Worklog) -> Worklog:
        """Insere un worklog ; echoue si un worklog en cours existe deja."""
        model = self._to_model(worklog)
        self._session.add(model)
        try:
            self._session.commit()
        except IntegrityError:
            self._session.rollback()
            logger.debug(f"Insertion refusee par l'index d'unicite: user={worklog.user_id}")
            raise ConflictError(
                "Un worklog est deja en cours pour cet utilisateur"
            ) from None
        self._session.refresh(model)
        return self._to_entity(model)

    def update(self, worklog: Worklog) -> Worklog:
        """
        Met a jour le debut, le lieu et la description d'un worklog.

        L'ecriture est conditionnelle : le nouveau debut doit rester
        strictement avant la fin presente en base au moment de l'UPDATE.

        Raises:
            NotFoundError: Si le worklog n'existe plus pour cet utilisateur
            ValidationError: Si le debut n'est plus anterieur a la fin enregistree
        """
        statement = (
            update(WorklogModel)
            .where(WorklogModel.id == worklog.id)
            .where(WorklogModel.user_id == worklog.user_id)
            .where(
                or_(
                    WorklogModel.end_time.is_(None),
                    WorklogModel.end_time > worklog.start_time,
                )
            )
            .values(
                start_time=worklog.start_time,
                location=worklog.location.value,
                description=worklog.description,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        result = self._session.exec(statement)
        self._session.commit()

        current = self.get_by_id(worklog.id)
        if current is None or current.user_id != worklog.user_id:
            raise NotFoundError(f"Worklog introuvable: {worklog.id}")
        if result.rowcount == 0:
            raise ValidationError("L'heure de debut doit etre anterieure a l'heure de fin")
        return current

    def complete(
        self, worklog_id: str, user_id: str, end_time: datetime
    ) -> Optional[Worklog]:
        """
        Termine le worklog s'il est toujours en cours (UPDATE conditionnel).

        La fin doit etre strictement apres le debut present en base au
        moment de l'UPDATE, pas seulement celui lu par l'appelant.
        """
        statement = (
            update(WorklogModel)
            .where(WorklogModel.id == worklog_id)
            .where(WorklogModel.user_id == user_id)
            .where(WorklogModel.status == OPEN_STATUS)
            .where(WorklogModel.start_time < end_time)
            .values(
                end_time=end_time,
                status=WorklogStatus.COMPLETED.value,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        result = self._session.exec(statement)
        self._session.commit()
        if result.rowcount == 0:
            return None
        return self.get_by_id(worklog_id)

    def delete(self, worklog_id: str, user_id: str) -> bool:
        """Supprime un worklog de l'utilisateur. Retourne True si supprime."""
        statement = (
            delete(WorklogModel)
            .where(WorklogModel.id == worklog_id)
            .where(WorklogModel.user_id == user_id)
        )
        result = self._session.exec(statement)
        self._session.commit()
        return result.rowcount > 0

    def query(
        self,
        user_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        status: Optional[WorklogStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> tuple[list[Worklog], int]:
        """Recherche paginee, plus recent debut en premier."""
        conditions = [WorklogModel.user_id == user_id]
        if start_date is not None:
            conditions.append(WorklogModel.start_time >= start_date)
        if end_date is not None:
            conditions.append(WorklogModel.start_time <= end_date)
        if status is not None:
            conditions.append(WorklogModel.status == status.value)

        count_statement = select(func.count()).select_from(WorklogModel).where(*conditions)
        total = self._session.exec(count_statement).one()

        statement = (
            select(WorklogModel)
            .where(*conditions)
            .order_by(WorklogModel.start_time.desc(), WorklogModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models], total

    def list_completed_since(
        self, user_id: str, since: Optional[datetime] = None
    ) -> list[Worklog]:
        """Liste les worklogs termines apres since (tous si since est None)."""
        statement = (
            select(WorklogModel)
            .where(WorklogModel.user_id == user_id)
            .where(WorklogModel.status == WorklogStatus.COMPLETED.value)
        )
        if since is not None:
            statement = statement.where(WorklogModel.end_time > since)
        statement = statement.order_by(WorklogModel.end_time)
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]
