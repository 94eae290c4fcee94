"""
Fixtures pytest partagees pour les tests Pointeuse.

Ce module contient les fixtures communes utilisees dans les tests:
- Engine SQLite en memoire avec tables creees
- Repositories SQLModel sur une session de test
- Services avec une horloge figee
- Settings de test
"""

from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from pointeuse.config import Settings
from pointeuse.infrastructure.persistence.database import (
    create_db_engine,
    get_session,
    init_db,
)
from pointeuse.infrastructure.persistence.repositories import (
    SQLModelBalanceRepository,
    SQLModelWorklogRepository,
)
from pointeuse.services.balance import BalanceService
from pointeuse.services.worklog import WorklogService

# Instant courant fige pour les services
NOW = datetime(2024, 1, 2, 12, 0)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec base en memoire et log temporaire."""
    return Settings(
        database_url="sqlite://",
        default_page_size=20,
        max_page_size=100,
        max_start_skew_minutes=5,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire avec toutes les tables."""
    engine = init_db(create_db_engine("sqlite://"))
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    yield from get_session(engine)


@pytest.fixture
def worklog_repo(session: Session) -> SQLModelWorklogRepository:
    return SQLModelWorklogRepository(session)


@pytest.fixture
def balance_repo(session: Session) -> SQLModelBalanceRepository:
    return SQLModelBalanceRepository(session)


@pytest.fixture
def worklog_service(worklog_repo: SQLModelWorklogRepository) -> WorklogService:
    """WorklogService sur une vraie base, horloge figee a NOW."""
    return WorklogService(repository=worklog_repo, clock=lambda: NOW)


@pytest.fixture
def balance_service(
    worklog_repo: SQLModelWorklogRepository,
    balance_repo: SQLModelBalanceRepository,
) -> BalanceService:
    return BalanceService(worklog_repo=worklog_repo, balance_repo=balance_repo)
