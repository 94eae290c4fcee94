"""
Service de consultation du solde d'heures.

Le solde courant combine le dernier snapshot ecrit par le processus de cumul
et les heures des worklogs termines depuis ce snapshot. Le service est en
lecture seule.
"""

from loguru import logger

from pointeuse.core.entities.balance import Balance, BalanceSnapshot
from pointeuse.core.exceptions import ValidationError
from pointeuse.core.ports.repositories import IBalanceRepository, IWorklogRepository
from pointeuse.core.value_objects.requests import BalanceHistoryQuery
from pointeuse.services.worklog import get_duration_hours
from pointeuse.utils.constants import HOURS_PRECISION
from pointeuse.utils.helpers import to_utc_naive


class BalanceService:
    """
    Service de solde d'heures.

    Example:
        service = BalanceService(worklog_repo=worklogs, balance_repo=balances)
        balance = service.get_balance("u1")
        history = service.get_balance_history(BalanceHistoryQuery(user_id="u1"))
    """

    def __init__(
        self,
        worklog_repo: IWorklogRepository,
        balance_repo: IBalanceRepository,
    ) -> None:
        self._worklog_repo = worklog_repo
        self._balance_repo = balance_repo

    def get_balance(self, user_id: str) -> Balance:
        """
        Calcule le solde courant d'un utilisateur.

        L'identite est fournie par l'amont : un utilisateur sans activite
        obtient un solde nul, jamais une erreur.
        """
        snapshot = self._balance_repo.get_latest(user_id)
        since = snapshot.timestamp if snapshot else None
        settled = snapshot.value if snapshot else 0.0

        unsettled = get_duration_hours(
            self._worklog_repo.list_completed_since(user_id, since)
        )
        balance = Balance(
            user_id=user_id,
            value=round(settled + unsettled, HOURS_PRECISION),
            settled_value=settled,
            unsettled_hours=round(unsettled, HOURS_PRECISION),
            as_of=since,
        )
        logger.debug(f"Solde user={user_id}: {balance.value} h")
        return balance

    def get_balance_history(self, query: BalanceHistoryQuery) -> list[BalanceSnapshot]:
        """
        Historique du solde sur une plage de dates (bornes incluses).

        Une plage reduite a un instant (start_date == end_date) est acceptee
        et retourne les releves pris exactement a cet instant.

        Raises:
            ValidationError: Si start_date est posterieure a end_date
        """
        start_date = to_utc_naive(query.start_date) if query.start_date else None
        end_date = to_utc_naive(query.end_date) if query.end_date else None
        if start_date and end_date and start_date > end_date:
            raise ValidationError("La date de debut doit preceder la date de fin")

        return self._balance_repo.list_between(query.user_id, start_date, end_date)
