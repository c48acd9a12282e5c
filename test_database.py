import json
import pytest
from config.database import Database
from schemas.salon import Salon
from schemas.user import UserRecord


def test_connect_db_seeds_missing_data_file(data_store):
    assert data_store.exists()
    document = Database().read()
    assert [salon.id for salon in document.salons] == ["salon-1", "salon-2", "salon-3"]
    assert document.users[0].email == "demo@salon.com"
    assert document.bookings == []


def test_write_then_read_returns_same_document():
    db = Database()
    document = db.read()
    document.salons.append(Salon(id="salon-9", name="Nail Bar", address="1 Test Road", rating=3.5, specialties=["Nails"]))
    document.users.append(UserRecord(id="user-9", name="Ann", phone="5551234567", email="ann@example.com", password="secret1"))

    db.write(document)

    assert db.read().model_dump() == document.model_dump()


def test_file_uses_camel_case_keys(data_store):
    raw = json.loads(data_store.read_text(encoding="utf-8"))
    assert set(raw) == {"salons", "services", "staff", "schedules", "users", "bookings"}
    assert "salonId" in raw["services"][0]
    assert "isAvailable" in raw["schedules"][0]


def test_read_sees_external_edits(data_store):
    db = Database()
    db.read()

    raw = json.loads(data_store.read_text(encoding="utf-8"))
    raw["salons"][0]["name"] = "Renamed Salon"
    data_store.write_text(json.dumps(raw), encoding="utf-8")

    assert db.read().salons[0].name == "Renamed Salon"


def test_missing_bookings_key_reads_as_empty(data_store):
    raw = json.loads(data_store.read_text(encoding="utf-8"))
    del raw["bookings"]
    data_store.write_text(json.dumps(raw), encoding="utf-8")

    assert Database().read().bookings == []


def test_write_leaves_no_temporary_files(data_store):
    db = Database()
    db.write(db.read())
    assert [p.name for p in data_store.parent.iterdir()] == [data_store.name]


def test_reset_restores_seed_document():
    db = Database()
    document = db.read()
    document.users.append(UserRecord(id="user-9", name="Ann", phone="5551234567", email="ann@example.com", password="secret1"))
    db.write(document)

    Database.reset()

    assert [user.id for user in db.read().users] == ["user-1"]


def test_database_requires_connection():
    Database.close_db()
    with pytest.raises(Exception, match="Database not initialized"):
        Database()


def test_reset_script_restores_seed_into_given_file(data_store):
    from scripts.reset_data import reset_data

    db = Database()
    document = db.read()
    document.users.append(UserRecord(id="user-9", name="Ann", phone="5551234567", email="ann@example.com", password="secret1"))
    db.write(document)

    reset_data(str(data_store))

    raw = json.loads(data_store.read_text(encoding="utf-8"))
    assert [user["id"] for user in raw["users"]] == ["user-1"]
    assert Database.data_file is None
