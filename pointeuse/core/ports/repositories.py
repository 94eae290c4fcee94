"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLite/PostgreSQL via SQLModel, en mémoire pour les tests, etc.).

Les regles metier restent dans les services ; le stockage ne garantit que
l'atomicite des ecritures conditionnelles decrites ci-dessous.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from pointeuse.core.entities.balance import BalanceSnapshot
from pointeuse.core.entities.worklog import Worklog, WorklogStatus


class IWorklogRepository(ABC):
    """
    Interface de stockage des worklogs.

    Définit les opérations pour persister et récupérer les entités Worklog.
    """

    @abstractmethod
    def get_by_id(self, worklog_id: str) -> Optional[Worklog]:
        """Récupère un worklog par son ID."""
        ...

    @abstractmethod
    def add(self, worklog: Worklog) -> Worklog:
        """
        Insere un nouveau worklog et lui attribue un ID.

        L'insertion d'un worklog en cours est conditionnelle : elle echoue
        atomiquement si l'utilisateur a deja un worklog en cours.

        Raises:
            ConflictError: Si un worklog en cours existe deja pour l'utilisateur
        """
        ...

    @abstractmethod
    def update(self, worklog: Worklog) -> Worklog:
        """
        Met a jour les champs modifiables (debut, lieu, description).

        Le nouveau debut doit etre strictement avant la fin enregistree,
        verifie par la base au moment de l'ecriture.

        Raises:
            NotFoundError: Si le worklog n'existe pas pour cet utilisateur
            ValidationError: Si le debut n'est pas anterieur a la fin enregistree
        """
        ...

    @abstractmethod
    def complete(
        self, worklog_id: str, user_id: str, end_time: datetime
    ) -> Optional[Worklog]:
        """
        Termine un worklog en cours de maniere conditionnelle.

        Retourne :
            Le worklog termine, ou None si aucun worklog en cours ne
            correspond (absent, autre proprietaire, deja termine, ou debut
            enregistre posterieur ou egal a end_time)
        """
        ...

    @abstractmethod
    def delete(self, worklog_id: str, user_id: str) -> bool:
        """Supprime un worklog de l'utilisateur. Retourne True si supprime."""
        ...

    @abstractmethod
    def query(
        self,
        user_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        status: Optional[WorklogStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> tuple[list[Worklog], int]:
        """
        Recherche paginee des worklogs d'un utilisateur.

        Args :
            user_id : Proprietaire des worklogs
            start_date : Borne basse incluse sur start_time
            end_date : Borne haute incluse sur start_time
            status : Filtre optionnel par statut
            offset : Nombre de resultats a sauter
            limit : Nombre maximum de resultats

        Retourne :
            Les worklogs tries par start_time decroissant et le nombre total
            de correspondances
        """
        ...

    @abstractmethod
    def list_completed_since(
        self, user_id: str, since: Optional[datetime] = None
    ) -> list[Worklog]:
        """Liste les worklogs termines dont la fin est posterieure a since."""
        ...


class IBalanceRepository(ABC):
    """
    Interface de stockage des snapshots de solde.

    Les snapshots sont ecrits par le processus de cumul ; les services ne
    font que les lire.
    """

    @abstractmethod
    def get_latest(self, user_id: str) -> Optional[BalanceSnapshot]:
        """Récupère le snapshot le plus récent d'un utilisateur."""
        ...

    @abstractmethod
    def list_between(
        self,
        user_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[BalanceSnapshot]:
        """Liste les snapshots de la plage (bornes incluses), par date croissante."""
        ...

    @abstractmethod
    def add(self, snapshot: BalanceSnapshot) -> BalanceSnapshot:
        """Enregistre un nouveau snapshot."""
        ...
