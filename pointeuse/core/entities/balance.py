"""
Entités de solde d'heures.

Les snapshots sont ecrits par le processus de cumul (hors de ce service) et
ne sont que lus ici. Le solde courant est derive du dernier snapshot et des
worklogs termines depuis.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class BalanceSnapshot:
    """
    Valeur du solde d'un utilisateur a un instant donne.

    Attributs :
        user_id : Utilisateur concerne
        timestamp : Instant du releve (UTC naif)
        value : Solde cumule en heures
        id : Identifiant de l'enregistrement
    """

    user_id: str
    timestamp: datetime
    value: float
    id: Optional[str] = None


@dataclass
class Balance:
    """
    Solde courant d'un utilisateur.

    Attributs :
        user_id : Utilisateur concerne
        value : Solde total (snapshot + heures non encore cumulees)
        settled_value : Valeur du dernier snapshot (0 si aucun)
        unsettled_hours : Heures des worklogs termines apres le snapshot
        as_of : Instant du dernier snapshot, None si aucun
    """

    user_id: str
    value: float = 0.0
    settled_value: float = 0.0
    unsettled_hours: float = 0.0
    as_of: Optional[datetime] = None
