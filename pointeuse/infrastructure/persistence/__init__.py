"""
Module de persistance SQL pour Pointeuse.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy) :

- database.py : Creation de l'engine, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees

Usage:
    from pointeuse.infrastructure.persistence import create_db_engine, init_db

    engine = init_db(create_db_engine("sqlite:///pointeuse.db"))
"""

from pointeuse.infrastructure.persistence.database import (
    create_db_engine,
    get_session,
    init_db,
)
from pointeuse.infrastructure.persistence.models import (
    BalanceSnapshotModel,
    WorklogModel,
)

__all__ = [
    "BalanceSnapshotModel",
    "WorklogModel",
    "create_db_engine",
    "get_session",
    "init_db",
]
