"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web :
configuration, engine SQL, repositories SQLModel et services metier.
"""

from dependency_injector import containers, providers
from sqlmodel import Session

from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import (
    SQLModelBalanceRepository,
    SQLModelWorklogRepository,
)
from .services.balance import BalanceService
from .services.worklog import WorklogService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        with container.session() as session:
            service = container.worklog_service(
                repository=container.worklog_repository(session=session)
            )

    Les repositories recoivent une session fraiche a chaque appel ; pour
    partager une session entre plusieurs repositories (une requete HTTP),
    la passer explicitement comme ci-dessus.
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine partage par toutes les sessions
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
    )

    # Database - Resource pour creation unique des tables
    database = providers.Resource(init_db, engine=engine)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(Session, engine)

    # Repositories - Factory pour nouvelle instance avec session fraiche
    worklog_repository = providers.Factory(
        SQLModelWorklogRepository,
        session=session,
    )
    balance_repository = providers.Factory(
        SQLModelBalanceRepository,
        session=session,
    )

    # Services - Factory car dependent de repositories (sessions fraiches)
    worklog_service = providers.Factory(
        WorklogService,
        repository=worklog_repository,
        default_page_size=config.provided.default_page_size,
        max_page_size=config.provided.max_page_size,
        max_start_skew_minutes=config.provided.max_start_skew_minutes,
    )
    balance_service = providers.Factory(
        BalanceService,
        worklog_repo=worklog_repository,
        balance_repo=balance_repository,
    )
