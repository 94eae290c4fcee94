"""
Application services layer (use cases).

Services enforce the business rules of worklogs and balances. They depend on
ports (interfaces) from core/, never on concrete implementations.

- WorklogService: worklog lifecycle (start, complete, modify, delete, query)
- BalanceService: current balance and balance history
"""

from pointeuse.services.balance import BalanceService
from pointeuse.services.worklog import WorklogService

__all__ = [
    "BalanceService",
    "WorklogService",
]
