"""
Entité worklog.

Un worklog represente une session de travail d'un utilisateur : heure de
debut, heure de fin (absente tant que la session est en cours), lieu et
description libre.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional


class WorkLocation(Enum):
    """Lieu de travail d'une session."""

    OFFICE = "office"
    REMOTE = "remote"


class WorklogStatus(Enum):
    """Statut d'un worklog.

    Valeurs:
        IN_PROGRESS: Session ouverte, sans heure de fin
        COMPLETED: Session terminee, heure de fin connue
    """

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class Worklog:
    """
    Session de travail d'un utilisateur.

    Attributs :
        id : Identifiant opaque attribue a la creation
        user_id : Proprietaire du worklog (cle de recherche)
        start_time : Debut de la session (UTC naif)
        location : Lieu de travail
        status : Statut courant (en cours ou termine)
        end_time : Fin de la session, None tant qu'elle est en cours
        description : Texte libre optionnel
        created_at : Date de creation de l'enregistrement
        updated_at : Date de derniere modification de l'enregistrement
    """

    user_id: str
    start_time: datetime
    location: WorkLocation
    status: WorklogStatus = WorklogStatus.IN_PROGRESS
    end_time: Optional[datetime] = None
    description: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        """Vrai si la session est en cours."""
        return self.status is WorklogStatus.IN_PROGRESS

    @property
    def duration(self) -> Optional[timedelta]:
        """Duree de la session, None si elle n'est pas terminee."""
        if self.end_time is None:
            return None
        return self.end_time - self.start_time

    @property
    def duration_hours(self) -> Optional[float]:
        """Duree de la session en heures."""
        duration = self.duration
        if duration is None:
            return None
        return duration.total_seconds() / 3600
