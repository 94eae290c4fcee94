"""
Routes du solde d'heures.
"""

from datetime import datetime
from typing import Annotated, Optional

from fastapi import APIRouter, Query

from ...core.exceptions import ValidationError
from ...core.value_objects.requests import BalanceHistoryQuery
from ...utils.helpers import to_utc_naive
from ..deps import BalanceServiceDep, UserId
from ..responses import success_response
from ..schemas import BalanceOut, BalanceSnapshotOut

router = APIRouter(prefix="/api/balance", tags=["balance"])


@router.get("")
def get_balance(user_id: UserId, service: BalanceServiceDep):
    """Solde courant de l'utilisateur."""
    balance = service.get_balance(user_id)
    return success_response({"balance": BalanceOut.from_entity(balance)})


@router.get("/history")
def get_balance_history(
    user_id: UserId,
    service: BalanceServiceDep,
    start_date: Annotated[Optional[datetime], Query(alias="startDate")] = None,
    end_date: Annotated[Optional[datetime], Query(alias="endDate")] = None,
):
    """Historique du solde ; l'API exige endDate strictement après startDate."""
    if start_date and end_date:
        start_date, end_date = to_utc_naive(start_date), to_utc_naive(end_date)
        if not end_date > start_date:
            raise ValidationError("La date de fin doit être postérieure à la date de début")

    history = service.get_balance_history(
        BalanceHistoryQuery(user_id=user_id, start_date=start_date, end_date=end_date)
    )
    return success_response([BalanceSnapshotOut.from_entity(item) for item in history])
