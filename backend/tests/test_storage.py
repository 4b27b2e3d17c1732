import json
from datetime import timedelta
import logging

import pytest
from sqlalchemy import text

from app.core.errors import StorageError
from app.models.booking import BookingStatus
from app.services import bookings as bookings_service
from app.storage import JsonFileRepository
from app.schemas.booking import BookingInDB


def _create(repo, client_id="c1", trainer_id="t1"):
    return bookings_service.create_booking(
        repo,
        client_id=client_id,
        client_name="Client",
        trainer_id=trainer_id,
        trainer_name="Trainer",
        date="2024-01-10",
        time="10:00",
        session_type="online",
        price=30,
    )


def test_first_access_initializes_empty_file(tmp_path):
    path = tmp_path / "bookings.json"
    repo = JsonFileRepository(path, BookingInDB)

    assert repo.load_all() == []
    assert json.loads(path.read_text()) == []


def test_records_are_written_with_camel_case_keys(store):
    booking = _create(store.bookings)

    raw = json.loads(store.bookings.path.read_text())
    assert raw[0]["id"] == booking.id
    assert raw[0]["clientId"] == "c1"
    assert raw[0]["sessionType"] == "online"
    assert raw[0]["status"] == "pending"


def test_corrupted_file_is_treated_as_empty(tmp_path, caplog):
    path = tmp_path / "bookings.json"
    path.write_text("{not json")
    repo = JsonFileRepository(path, BookingInDB)

    with caplog.at_level(logging.ERROR):
        assert repo.load_all() == []
    assert "treating as empty" in caplog.text


def test_write_failure_raises_storage_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    repo = JsonFileRepository(blocker / "bookings.json", BookingInDB)

    with pytest.raises(StorageError):
        repo.save_all([])


def test_sql_repository_keeps_insertion_order(sql_store):
    first = _create(sql_store.bookings, client_id="c1")
    second = _create(sql_store.bookings, client_id="c2")
    third = _create(sql_store.bookings, client_id="c1")

    assert [b.id for b in sql_store.bookings.load_all()] == [first.id, second.id, third.id]


def test_sql_repository_updates_existing_rows(sql_store):
    booking = _create(sql_store.bookings)

    bookings_service.update_status(sql_store.bookings, booking.id, BookingStatus.ACCEPTED)

    stored = sql_store.bookings.load_all()
    assert len(stored) == 1
    assert stored[0].status == BookingStatus.ACCEPTED


def test_first_access_with_unwritable_location_is_empty(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    repo = JsonFileRepository(blocker / "bookings.json", BookingInDB)

    with caplog.at_level(logging.ERROR):
        assert repo.load_all() == []
    assert "treating as empty" in caplog.text


def test_sql_malformed_row_is_treated_as_empty(sql_store, caplog):
    _create(sql_store.bookings)
    with sql_store.bookings.session_factory() as db:
        db.execute(text("UPDATE bookings SET status = 'bogus'"))
        db.commit()

    with caplog.at_level(logging.ERROR):
        assert sql_store.bookings.load_all() == []
    assert "treating as empty" in caplog.text


def test_sql_round_trip_keeps_utc_timestamps(sql_store):
    booking = _create(sql_store.bookings)

    stored = sql_store.bookings.load_all()[0]

    assert stored.created_at == booking.created_at
    assert stored.created_at.utcoffset() == timedelta(0)
