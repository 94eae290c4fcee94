"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports repository : Contrats de persistance des données
- IWorklogRepository : Stockage des worklogs
- IBalanceRepository : Stockage des snapshots de solde
"""

from pointeuse.core.ports.repositories import (
    IBalanceRepository,
    IWorklogRepository,
)

__all__ = [
    "IBalanceRepository",
    "IWorklogRepository",
]
