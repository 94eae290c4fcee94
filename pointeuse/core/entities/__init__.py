"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.

Exports:
- Worklog: A single work session of a user
- WorkLocation: Where the work took place
- WorklogStatus: Lifecycle status of a worklog
- BalanceSnapshot: Recorded balance value at a point in time
- Balance: Current derived balance of a user
"""

from pointeuse.core.entities.worklog import Worklog, WorkLocation, WorklogStatus
from pointeuse.core.entities.balance import Balance, BalanceSnapshot

__all__ = [
    "Worklog",
    "WorkLocation",
    "WorklogStatus",
    "Balance",
    "BalanceSnapshot",
]
