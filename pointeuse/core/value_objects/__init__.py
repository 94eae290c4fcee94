"""
Objets valeur immutables du domaine.

Exports:
- Requetes des services (StartWorkRequest, CompleteWorkRequest, ...)
- WorklogPage: Resultat pagine de la recherche de worklogs
"""

from pointeuse.core.value_objects.pagination import WorklogPage
from pointeuse.core.value_objects.requests import (
    BalanceHistoryQuery,
    CompleteWorkRequest,
    CreateCompletedWorkRequest,
    ModifyWorkRequest,
    StartWorkRequest,
    WorklogQuery,
    WorklogRef,
)

__all__ = [
    "BalanceHistoryQuery",
    "CompleteWorkRequest",
    "CreateCompletedWorkRequest",
    "ModifyWorkRequest",
    "StartWorkRequest",
    "WorklogPage",
    "WorklogQuery",
    "WorklogRef",
]
