"""
Objets valeur pour les requetes adressees aux services.

La couche d'entree (routes HTTP, CLI) valide la forme des donnees puis
construit ces objets. Les services ne revalident que les regles metier
croisees (ordre des dates, appartenance, unicite).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pointeuse.core.entities.worklog import WorkLocation, WorklogStatus


@dataclass(frozen=True)
class StartWorkRequest:
    """Demarrage d'une session de travail."""

    user_id: str
    start_time: datetime
    location: WorkLocation
    description: Optional[str] = None


@dataclass(frozen=True)
class CompleteWorkRequest:
    """Cloture d'une session en cours."""

    worklog_id: str
    user_id: str
    end_time: datetime


@dataclass(frozen=True)
class ModifyWorkRequest:
    """
    Modification partielle d'un worklog.

    Les champs a None sont laisses inchanges. Le statut n'est pas modifiable.
    """

    worklog_id: str
    user_id: str
    start_time: Optional[datetime] = None
    description: Optional[str] = None
    location: Optional[WorkLocation] = None

    @property
    def has_changes(self) -> bool:
        """Vrai si au moins un champ est a modifier."""
        return any(
            value is not None
            for value in (self.start_time, self.description, self.location)
        )


@dataclass(frozen=True)
class CreateCompletedWorkRequest:
    """
    Creation directe d'un worklog termine.

    Les heures arrivent sous forme de chaines ISO-8601 brutes.
    """

    user_id: str
    start_time: str
    end_time: str
    location: WorkLocation
    description: Optional[str] = None


@dataclass(frozen=True)
class WorklogRef:
    """Reference a un worklog d'un utilisateur (lecture, suppression)."""

    worklog_id: str
    user_id: str


@dataclass(frozen=True)
class WorklogQuery:
    """
    Filtres de recherche des worklogs d'un utilisateur.

    Attributs:
        user_id: Utilisateur dont on liste les worklogs
        start_date: Borne basse (incluse) sur start_time
        end_date: Borne haute (incluse) sur start_time
        status: Filtre optionnel par statut
        page: Numero de page (1 par defaut)
        limit: Taille de page (valeur de configuration par defaut)
    """

    user_id: str
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: Optional[WorklogStatus] = None
    page: Optional[int] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class BalanceHistoryQuery:
    """Plage de dates de l'historique de solde (bornes incluses)."""

    user_id: str
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
