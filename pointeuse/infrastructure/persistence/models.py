"""
Modeles SQLModel pour la base de donnees Pointeuse.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- worklogs: Sessions de travail des utilisateurs
- balance_snapshots: Releves du solde d'heures (ecrits par le processus de cumul)

Les enums du domaine sont stockes par leur valeur texte. Les dates sont
stockees en UTC sans fuseau (NaiveDatetime, colonne DateTime sans timezone).
"""

from uuid import uuid4

from pydantic import NaiveDatetime
from sqlalchemy import DateTime, text
from sqlmodel import Field, Index, SQLModel

from pointeuse.utils.helpers import utc_now

# Un seul worklog en cours par utilisateur, garanti par un index unique partiel
OPEN_STATUS = "in_progress"
_OPEN_CLAUSE = text(f"status = '{OPEN_STATUS}'")


def _new_id() -> str:
    return uuid4().hex


class WorklogModel(SQLModel, table=True):
    """
    Modele representant une session de travail.

    L'index uq_worklogs_one_open_per_user rend atomique la regle
    "un seul worklog en cours par utilisateur".
    """

    __tablename__ = "worklogs"
    __table_args__ = (
        Index("ix_worklogs_user_start", "user_id", "start_time"),
        Index(
            "uq_worklogs_one_open_per_user",
            "user_id",
            unique=True,
            sqlite_where=_OPEN_CLAUSE,
            postgresql_where=_OPEN_CLAUSE,
        ),
    )

    id: str = Field(default_factory=_new_id, primary_key=True)
    user_id: str = Field(index=True)
    start_time: NaiveDatetime = Field(sa_type=DateTime())
    end_time: NaiveDatetime | None = Field(default=None, sa_type=DateTime())
    location: str  # office, remote
    description: str | None = None
    status: str = Field(default=OPEN_STATUS, index=True)  # in_progress, completed
    created_at: NaiveDatetime = Field(default_factory=utc_now, sa_type=DateTime())
    updated_at: NaiveDatetime = Field(default_factory=utc_now, sa_type=DateTime())


class BalanceSnapshotModel(SQLModel, table=True):
    """
    Modele representant un releve du solde d'un utilisateur.

    Lu uniquement par les services ; ecrit par le processus de cumul.
    """

    __tablename__ = "balance_snapshots"
    __table_args__ = (
        Index("ix_balance_snapshots_user_timestamp", "user_id", "timestamp"),
    )

    id: str = Field(default_factory=_new_id, primary_key=True)
    user_id: str = Field(index=True)
    timestamp: NaiveDatetime = Field(sa_type=DateTime())
    value: float = 0.0  # Solde cumule en heures
