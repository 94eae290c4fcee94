"""
Service de gestion du cycle de vie des worklogs.

Le WorklogService centralise les regles metier des sessions de travail,
independamment de l'interface appelante (routes HTTP, CLI).

Responsabilites:
- Demarrage d'une session (un seul worklog en cours par utilisateur)
- Cloture, modification partielle et suppression avec controle d'appartenance
- Creation directe d'un worklog termine
- Recherche paginee et filtree

Un worklog appartenant a un autre utilisateur est traite exactement comme un
worklog absent (NotFoundError), pour ne pas reveler son existence.
"""

from datetime import datetime, timedelta
from typing import Callable, Optional

from loguru import logger

from pointeuse.core.entities.worklog import Worklog, WorklogStatus
from pointeuse.core.exceptions import ConflictError, NotFoundError, ValidationError
from pointeuse.core.ports.repositories import IWorklogRepository
from pointeuse.core.value_objects.pagination import WorklogPage
from pointeuse.core.value_objects.requests import (
    CompleteWorkRequest,
    CreateCompletedWorkRequest,
    ModifyWorkRequest,
    StartWorkRequest,
    WorklogQuery,
    WorklogRef,
)
from pointeuse.utils.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_START_SKEW_MINUTES,
    MAX_PAGE_SIZE,
)
from pointeuse.utils.helpers import parse_datetime, to_utc_naive, utc_now


class WorklogService:
    """
    Service de gestion des worklogs.

    Example:
        service = WorklogService(repository=SQLModelWorklogRepository(session))

        worklog = service.start_work(
            StartWorkRequest(user_id="u1", start_time=now, location=WorkLocation.OFFICE)
        )
        service.complete_work(
            CompleteWorkRequest(worklog_id=worklog.id, user_id="u1", end_time=later)
        )
    """

    def __init__(
        self,
        repository: IWorklogRepository,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
        max_start_skew_minutes: int = DEFAULT_START_SKEW_MINUTES,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Initialise le service.

        Args:
            repository: Repository de persistance des worklogs
            default_page_size: Taille de page quand la requete n'en precise pas
            max_page_size: Taille de page maximale acceptee
            max_start_skew_minutes: Tolerance sur une heure de debut future
            clock: Horloge retournant l'instant courant en UTC naif
        """
        self._repository = repository
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size
        self._max_start_skew = timedelta(minutes=max_start_skew_minutes)
        self._clock = clock

    def start_work(self, request: StartWorkRequest) -> Worklog:
        """
        Demarre une session de travail.

        Raises:
            ValidationError: Si start_time depasse l'instant courant + tolerance
            ConflictError: Si l'utilisateur a deja un worklog en cours
        """
        start_time = to_utc_naive(request.start_time)
        self._check_not_in_future(start_time)

        worklog = Worklog(
            user_id=request.user_id,
            start_time=start_time,
            location=request.location,
            description=request.description,
            status=WorklogStatus.IN_PROGRESS,
        )
        try:
            created = self._repository.add(worklog)
        except ConflictError:
            logger.warning(f"Demarrage refuse, worklog deja en cours: user={request.user_id}")
            raise

        logger.info(f"Worklog demarre: {created.id} (user={created.user_id})")
        return created

    def complete_work(self, request: CompleteWorkRequest) -> Worklog:
        """
        Termine une session en cours.

        Raises:
            NotFoundError: Si le worklog est absent ou appartient a un autre utilisateur
            ConflictError: Si le worklog est deja termine
            ValidationError: Si end_time n'est pas strictement apres start_time
        """
        worklog = self._get_owned(request.worklog_id, request.user_id)
        if worklog.status is WorklogStatus.COMPLETED:
            raise ConflictError(f"Worklog deja termine: {worklog.id}")

        end_time = to_utc_naive(request.end_time)
        if end_time <= worklog.start_time:
            raise ValidationError("L'heure de fin doit etre posterieure a l'heure de debut")

        completed = self._repository.complete(worklog.id, request.user_id, end_time)
        if completed is None:
            # Modifie entre la lecture et l'ecriture : relire l'etat en base
            current = self._get_owned(request.worklog_id, request.user_id)
            if current.status is WorklogStatus.COMPLETED:
                raise ConflictError(f"Worklog deja termine: {current.id}")
            raise ValidationError("L'heure de fin doit etre posterieure a l'heure de debut")

        logger.info(
            f"Worklog termine: {completed.id} ({completed.duration_hours:.2f} h)"
        )
        return completed

    def modify_work(self, request: ModifyWorkRequest) -> Worklog:
        """
        Modifie partiellement un worklog (debut, description, lieu).

        Raises:
            NotFoundError: Si le worklog est absent ou appartient a un autre utilisateur
            ValidationError: Si le nouveau debut est dans le futur ou n'est pas
                strictement avant la fin existante
        """
        worklog = self._get_owned(request.worklog_id, request.user_id)
        if not request.has_changes:
            return worklog

        if request.start_time is not None:
            start_time = to_utc_naive(request.start_time)
            self._check_not_in_future(start_time)
            if worklog.end_time is not None and start_time >= worklog.end_time:
                raise ValidationError(
                    "L'heure de debut doit etre anterieure a l'heure de fin"
                )
            worklog.start_time = start_time
        if request.description is not None:
            worklog.description = request.description
        if request.location is not None:
            worklog.location = request.location

        updated = self._repository.update(worklog)
        logger.info(f"Worklog modifie: {updated.id}")
        return updated

    def create_completed_work(self, request: CreateCompletedWorkRequest) -> Worklog:
        """
        Cree directement un worklog termine a partir d'heures ISO-8601.

        Ce worklog n'est jamais ouvert : la regle du worklog unique en cours
        ne s'applique pas.

        Raises:
            ValidationError: Si une date est illisible ou si end_time <= start_time
        """
        start_time = self._parse_time(request.start_time, "start_time")
        end_time = self._parse_time(request.end_time, "end_time")
        if end_time <= start_time:
            raise ValidationError("L'heure de fin doit etre posterieure a l'heure de debut")

        worklog = Worklog(
            user_id=request.user_id,
            start_time=start_time,
            end_time=end_time,
            location=request.location,
            description=request.description,
            status=WorklogStatus.COMPLETED,
        )
        created = self._repository.add(worklog)
        logger.info(
            f"Worklog termine cree: {created.id} ({created.duration_hours:.2f} h)"
        )
        return created

    def delete_work(self, ref: WorklogRef) -> None:
        """
        Supprime un worklog de l'utilisateur.

        La suppression n'est pas idempotente : un second appel sur le meme ID
        leve NotFoundError.

        Raises:
            NotFoundError: Si le worklog est absent ou appartient a un autre utilisateur
        """
        if not self._repository.delete(ref.worklog_id, ref.user_id):
            raise NotFoundError(f"Worklog introuvable: {ref.worklog_id}")
        logger.info(f"Worklog supprime: {ref.worklog_id}")

    def get_worklog(self, ref: WorklogRef) -> Worklog:
        """
        Recupere un worklog de l'utilisateur.

        Raises:
            NotFoundError: Si le worklog est absent ou appartient a un autre utilisateur
        """
        return self._get_owned(ref.worklog_id, ref.user_id)

    def query_worklogs(self, query: WorklogQuery) -> WorklogPage:
        """
        Liste paginee des worklogs d'un utilisateur.

        Les bornes de dates filtrent start_time (incluses). Les resultats sont
        tries du debut le plus recent au plus ancien. La taille de page est
        plafonnee a max_page_size.

        Raises:
            ValidationError: Si page ou limit < 1, ou si start_date > end_date
        """
        page = query.page if query.page is not None else DEFAULT_PAGE
        limit = query.limit if query.limit is not None else self._default_page_size
        if page < 1:
            raise ValidationError("Le numero de page doit etre superieur ou egal a 1")
        if limit < 1:
            raise ValidationError("La taille de page doit etre superieure ou egale a 1")
        limit = min(limit, self._max_page_size)

        start_date = to_utc_naive(query.start_date) if query.start_date else None
        end_date = to_utc_naive(query.end_date) if query.end_date else None
        if start_date and end_date and start_date > end_date:
            raise ValidationError("La date de debut doit preceder la date de fin")

        items, total = self._repository.query(
            user_id=query.user_id,
            start_date=start_date,
            end_date=end_date,
            status=query.status,
            offset=(page - 1) * limit,
            limit=limit,
        )
        logger.debug(
            f"Recherche worklogs user={query.user_id}: {len(items)}/{total} (page {page})"
        )
        return WorklogPage(items=items, total=total, page=page, limit=limit)

    def _get_owned(self, worklog_id: str, user_id: str) -> Worklog:
        """Recupere un worklog en verifiant son proprietaire."""
        worklog = self._repository.get_by_id(worklog_id)
        if worklog is None or worklog.user_id != user_id:
            raise NotFoundError(f"Worklog introuvable: {worklog_id}")
        return worklog

    def _check_not_in_future(self, start_time: datetime) -> None:
        limit = self._clock() + self._max_start_skew
        if start_time > limit:
            raise ValidationError("L'heure de debut ne peut pas etre dans le futur")

    @staticmethod
    def _parse_time(raw: str, field_name: str) -> datetime:
        try:
            return parse_datetime(raw)
        except ValueError:
            raise ValidationError(f"Date invalide pour {field_name}: {raw!r}") from None


def get_duration_hours(worklogs: list[Worklog]) -> float:
    """Somme des durees (heures) des worklogs termines."""
    total = 0.0
    for worklog in worklogs:
        hours: Optional[float] = worklog.duration_hours
        if hours is not None:
            total += hours
    return total
