"""
Commandes de la ligne de commande Pointeuse.
"""

from pointeuse.adapters.cli.commands import balance, history, worklogs

__all__ = [
    "balance",
    "history",
    "worklogs",
]
