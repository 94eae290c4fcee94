"""Tests pour SQLModelWorklogRepository sur SQLite (memoire, ou fichier pour deux sessions)."""

from datetime import datetime, timedelta

import pytest
from sqlmodel import Session

from pointeuse.core.entities.worklog import Worklog, WorkLocation, WorklogStatus
from pointeuse.core.exceptions import ConflictError, NotFoundError, ValidationError
from pointeuse.core.value_objects.requests import (
    CompleteWorkRequest,
    ModifyWorkRequest,
    StartWorkRequest,
)
from pointeuse.infrastructure.persistence.database import create_db_engine, init_db
from pointeuse.infrastructure.persistence.repositories import SQLModelWorklogRepository
from pointeuse.services.worklog import WorklogService

T0 = datetime(2024, 1, 1, 9, 0)


def _open(user_id: str = "u1", start: datetime = T0) -> Worklog:
    return Worklog(user_id=user_id, start_time=start, location=WorkLocation.OFFICE)


def _completed(user_id: str, start: datetime, hours: float = 1.0) -> Worklog:
    return Worklog(
        user_id=user_id,
        start_time=start,
        end_time=start + timedelta(hours=hours),
        location=WorkLocation.REMOTE,
        status=WorklogStatus.COMPLETED,
    )


class TestAddAndGet:
    def test_add_assigns_id_and_round_trips(self, worklog_repo):
        saved = worklog_repo.add(
            Worklog(
                user_id="u1",
                start_time=T0,
                location=WorkLocation.REMOTE,
                description="Support client",
            )
        )

        assert saved.id
        fetched = worklog_repo.get_by_id(saved.id)
        assert fetched is not None
        assert fetched.user_id == "u1"
        assert fetched.start_time == T0
        assert fetched.location == WorkLocation.REMOTE
        assert fetched.status == WorklogStatus.IN_PROGRESS
        assert fetched.description == "Support client"
        assert fetched.created_at is not None

    def test_get_unknown_id_returns_none(self, worklog_repo):
        assert worklog_repo.get_by_id("inexistant") is None


class TestOneOpenWorklogPerUser:
    def test_second_open_worklog_is_rejected(self, worklog_repo):
        worklog_repo.add(_open())

        with pytest.raises(ConflictError):
            worklog_repo.add(_open(start=T0 + timedelta(hours=1)))

    def test_session_stays_usable_after_conflict(self, worklog_repo):
        worklog_repo.add(_open())
        with pytest.raises(ConflictError):
            worklog_repo.add(_open())

        other = worklog_repo.add(_open(user_id="u2"))
        assert other.id

    def test_other_users_may_each_have_one_open_worklog(self, worklog_repo):
        first = worklog_repo.add(_open("u1"))
        second = worklog_repo.add(_open("u2"))

        assert first.id != second.id

    def test_completed_worklogs_do_not_count(self, worklog_repo):
        worklog_repo.add(_open())

        completed = worklog_repo.add(_completed("u1", T0 - timedelta(days=1)))

        assert completed.status == WorklogStatus.COMPLETED

    def test_user_can_reopen_after_completion(self, worklog_repo):
        first = worklog_repo.add(_open())
        worklog_repo.complete(first.id, "u1", T0 + timedelta(hours=2))

        second = worklog_repo.add(_open(start=T0 + timedelta(hours=3)))

        assert second.status == WorklogStatus.IN_PROGRESS


class TestComplete:
    def test_complete_sets_end_time_and_status(self, worklog_repo):
        saved = worklog_repo.add(_open())

        completed = worklog_repo.complete(saved.id, "u1", T0 + timedelta(hours=2))

        assert completed is not None
        assert completed.status == WorklogStatus.COMPLETED
        assert completed.end_time == T0 + timedelta(hours=2)
        assert completed.duration_hours == pytest.approx(2.0)

    def test_complete_twice_returns_none(self, worklog_repo):
        saved = worklog_repo.add(_open())
        worklog_repo.complete(saved.id, "u1", T0 + timedelta(hours=2))

        assert worklog_repo.complete(saved.id, "u1", T0 + timedelta(hours=3)) is None
        assert worklog_repo.get_by_id(saved.id).end_time == T0 + timedelta(hours=2)

    def test_complete_for_other_user_returns_none(self, worklog_repo):
        saved = worklog_repo.add(_open())

        assert worklog_repo.complete(saved.id, "u2", T0 + timedelta(hours=2)) is None
        assert worklog_repo.get_by_id(saved.id).is_open


class TestUpdateAndDelete:
    def test_update_changes_editable_fields(self, worklog_repo):
        saved = worklog_repo.add(_open())
        saved.start_time = T0 - timedelta(minutes=30)
        saved.location = WorkLocation.REMOTE
        saved.description = "Corrige"

        updated = worklog_repo.update(saved)

        assert updated.start_time == T0 - timedelta(minutes=30)
        assert updated.location == WorkLocation.REMOTE
        assert updated.description == "Corrige"

    def test_update_unknown_worklog_raises_not_found(self, worklog_repo):
        ghost = _open()
        ghost.id = "inexistant"

        with pytest.raises(NotFoundError):
            worklog_repo.update(ghost)

    def test_delete_is_not_idempotent(self, worklog_repo):
        saved = worklog_repo.add(_open())

        assert worklog_repo.delete(saved.id, "u1") is True
        assert worklog_repo.delete(saved.id, "u1") is False
        assert worklog_repo.get_by_id(saved.id) is None

    def test_delete_for_other_user_keeps_worklog(self, worklog_repo):
        saved = worklog_repo.add(_open())

        assert worklog_repo.delete(saved.id, "u2") is False
        assert worklog_repo.get_by_id(saved.id) is not None


class TestQuery:
    @pytest.fixture
    def populated(self, worklog_repo):
        """Cinq worklogs termines pour u1 (un par jour), un ouvert, un pour u2."""
        for day in range(5):
            worklog_repo.add(_completed("u1", T0 + timedelta(days=day)))
        worklog_repo.add(_open("u1", T0 + timedelta(days=5)))
        worklog_repo.add(_completed("u2", T0))
        return worklog_repo

    def test_orders_most_recent_start_first(self, populated):
        items, total = populated.query("u1")

        assert total == 6
        starts = [item.start_time for item in items]
        assert starts == sorted(starts, reverse=True)
        assert all(item.user_id == "u1" for item in items)

    def test_filters_by_status(self, populated):
        items, total = populated.query("u1", status=WorklogStatus.IN_PROGRESS)

        assert total == 1
        assert items[0].is_open

    def test_date_bounds_are_inclusive_on_start_time(self, populated):
        items, total = populated.query(
            "u1",
            start_date=T0 + timedelta(days=1),
            end_date=T0 + timedelta(days=3),
        )

        assert total == 3
        assert {item.start_time for item in items} == {
            T0 + timedelta(days=offset) for offset in (1, 2, 3)
        }

    def test_paginates_with_total(self, populated):
        items, total = populated.query("u1", offset=4, limit=4)

        assert total == 6
        assert len(items) == 2
        assert items[-1].start_time == T0

    def test_list_completed_since(self, populated):
        items = populated.list_completed_since("u1", since=T0 + timedelta(days=3))

        # Fins a J3+1h et J4+1h
        assert len(items) == 2
        assert all(item.status == WorklogStatus.COMPLETED for item in items)

    def test_list_completed_since_without_bound(self, populated):
        assert len(populated.list_completed_since("u1")) == 5


class TestConcurrentSessions:
    """Deux sessions sur la meme base fichier : la seconde ecrit entre la
    lecture et l'ecriture de la premiere."""

    @pytest.fixture
    def sessions(self, tmp_path):
        engine = init_db(create_db_engine(f"sqlite:///{tmp_path / 'worklogs.db'}"))
        with Session(engine) as first, Session(engine) as second:
            yield first, second
        engine.dispose()

    def test_complete_checks_start_stored_at_write_time(self, sessions):
        first = SQLModelWorklogRepository(sessions[0])
        second = SQLModelWorklogRepository(sessions[1])
        saved = first.add(_open(start=T0))
        stale = first.get_by_id(saved.id)

        moved = second.get_by_id(saved.id)
        moved.start_time = T0 + timedelta(hours=2)
        second.update(moved)

        assert stale.start_time < T0 + timedelta(hours=1)
        assert first.complete(saved.id, "u1", T0 + timedelta(hours=1)) is None

        stored = first.get_by_id(saved.id)
        assert stored.is_open
        assert stored.start_time == T0 + timedelta(hours=2)
        assert stored.end_time is None

    def test_update_checks_end_stored_at_write_time(self, sessions):
        first = SQLModelWorklogRepository(sessions[0])
        second = SQLModelWorklogRepository(sessions[1])
        saved = first.add(_open(start=T0))
        stale = first.get_by_id(saved.id)

        second.complete(saved.id, "u1", T0 + timedelta(hours=1))

        stale.start_time = T0 + timedelta(hours=2)
        with pytest.raises(ValidationError):
            first.update(stale)

        stored = first.get_by_id(saved.id)
        assert stored.start_time == T0
        assert stored.end_time == T0 + timedelta(hours=1)
        assert stored.duration_hours == pytest.approx(1.0)

    def test_service_maps_stale_completion_to_validation(self, sessions):
        first, second = (
            WorklogService(
                SQLModelWorklogRepository(session), clock=lambda: T0 + timedelta(hours=4)
            )
            for session in sessions
        )
        saved = first.start_work(
            StartWorkRequest(user_id="u1", start_time=T0, location=WorkLocation.OFFICE)
        )

        second.modify_work(
            ModifyWorkRequest(
                worklog_id=saved.id, user_id="u1", start_time=T0 + timedelta(hours=2)
            )
        )

        with pytest.raises(ValidationError):
            first.complete_work(
                CompleteWorkRequest(
                    worklog_id=saved.id, user_id="u1", end_time=T0 + timedelta(hours=1)
                )
            )
