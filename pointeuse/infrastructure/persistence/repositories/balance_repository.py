"""
Implementation SQLModel du repository des snapshots de solde.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Session, select

from pointeuse.core.entities.balance import BalanceSnapshot
from pointeuse.core.ports.repositories import IBalanceRepository
from pointeuse.infrastructure.persistence.models import BalanceSnapshotModel


class SQLModelBalanceRepository(IBalanceRepository):
    """Repository SQLModel pour les snapshots de solde."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, model: BalanceSnapshotModel) -> BalanceSnapshot:
        return BalanceSnapshot(
            id=model.id,
            user_id=model.user_id,
            timestamp=model.timestamp,
            value=model.value,
        )

    def get_latest(self, user_id: str) -> Optional[BalanceSnapshot]:
        """Recupere le snapshot le plus recent d'un utilisateur."""
        statement = (
            select(BalanceSnapshotModel)
            .where(BalanceSnapshotModel.user_id == user_id)
            .order_by(BalanceSnapshotModel.timestamp.desc())
            .limit(1)
        )
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def list_between(
        self,
        user_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[BalanceSnapshot]:
        """Liste les snapshots de la plage, bornes incluses, par date croissante."""
        statement = select(BalanceSnapshotModel).where(
            BalanceSnapshotModel.user_id == user_id
        )
        if start_date is not None:
            statement = statement.where(BalanceSnapshotModel.timestamp >= start_date)
        if end_date is not None:
            statement = statement.where(BalanceSnapshotModel.timestamp <= end_date)
        statement = statement.order_by(BalanceSnapshotModel.timestamp)
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def add(self, snapshot: BalanceSnapshot) -> BalanceSnapshot:
        """Enregistre un nouveau snapshot."""
        model = BalanceSnapshotModel(
            user_id=snapshot.user_id,
            timestamp=snapshot.timestamp,
            value=snapshot.value,
        )
        if snapshot.id:
            model.id = snapshot.id
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)
