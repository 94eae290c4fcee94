"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans pointeuse/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from pointeuse.infrastructure.persistence.repositories.balance_repository import (
    SQLModelBalanceRepository,
)
from pointeuse.infrastructure.persistence.repositories.worklog_repository import (
    SQLModelWorklogRepository,
)

__all__ = [
    "SQLModelBalanceRepository",
    "SQLModelWorklogRepository",
]
