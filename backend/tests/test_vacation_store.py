"""Tests for the SQLModel record store"""

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from vacation_backend.models.vacation import Vacation, VacationStatus
from vacation_backend.services.vacation_store import SqlVacationStore


@pytest.fixture
def store(session: Session) -> SqlVacationStore:
    return SqlVacationStore(session)


def test_create_assigns_increasing_ids(store: SqlVacationStore):
    first = store.create(Vacation(username="first"))
    second = store.create(Vacation(username="second"))

    assert first.id is not None
    assert second.id > first.id


def test_find_all_matching_uses_lowercase_substring(store: SqlVacationStore):
    for name in ("Alice", "MALICE", "bob"):
        store.create(Vacation(username=name))

    assert [v.username for v in store.find_all_matching("ALI")] == ["Alice", "MALICE"]
    assert [v.username for v in store.find_all_matching("ob")] == ["bob"]


def test_find_all_matching_treats_wildcards_literally(store: SqlVacationStore):
    store.create(Vacation(username="100%_done"))
    store.create(Vacation(username="plain"))

    assert [v.username for v in store.find_all_matching("%")] == ["100%_done"]
    assert [v.username for v in store.find_all_matching("_")] == ["100%_done"]


def test_find_all_matching_empty_returns_everything(store: SqlVacationStore):
    for name in ("c", "a", "b"):
        store.create(Vacation(username=name))

    assert [v.username for v in store.find_all_matching("")] == ["c", "a", "b"]
    assert store.find_all_matching("") == store.find_all_ordered_by_id()


def test_save_upserts_detached_record(store: SqlVacationStore, session: Session):
    created = store.create(Vacation(username="detached", hours=4))
    detached = Vacation(
        id=created.id,
        username=created.username,
        date_from=created.date_from,
        date_to=created.date_to,
        hours=created.hours,
        status=VacationStatus.DECLINED,
    )
    session.expunge(created)

    saved = store.save(detached)

    assert saved.id == created.id
    assert saved.status == VacationStatus.DECLINED
    assert len(session.exec(select(Vacation)).all()) == 1


def test_delete_all(store: SqlVacationStore):
    store.create(Vacation(username="one"))
    store.create(Vacation(username="two"))

    store.delete_all()

    assert store.find_all_ordered_by_id() == []


def test_failed_commit_rolls_back(store: SqlVacationStore, session: Session, monkeypatch):
    def broken_commit():
        raise SQLAlchemyError("database is gone")

    rolled_back = []
    monkeypatch.setattr(session, "commit", broken_commit)
    monkeypatch.setattr(session, "rollback", lambda: rolled_back.append(True))

    with pytest.raises(SQLAlchemyError):
        store.create(Vacation(username="lost"))

    assert rolled_back == [True]
