import pytest
from config.database import Database
from crud import salon_crud, service_crud, staff_crud, schedule_crud, user_crud, booking_crud
from crud.exceptions import NotFoundError
from schemas.booking import BookingInput
from schemas.user import RegisterInput, LoginInput


def booking_input(**overrides) -> BookingInput:
    data = {
        "user_id": "user-1",
        "salon_id": "salon-1",
        "service_ids": ["service-1", "service-2"],
        "staff_id": "staff-1",
        "time": "09:00 AM",
    }
    data.update(overrides)
    return BookingInput(**data)


def register_input(name="Jane Doe", phone="5551234567", email="jane@example.com", password="secret1"):
    return RegisterInput(name=name, phone=phone, email=email, password=password)


# Queries

@pytest.mark.asyncio
async def test_get_salons_returns_every_salon():
    salons = await salon_crud.get_salons()
    assert [salon.name for salon in salons] == ["Glamour Studio", "Serenity Spa & Salon", "Urban Cuts"]


@pytest.mark.asyncio
@pytest.mark.parametrize("salon_id", ["salon-1", "salon-2", "salon-3"])
async def test_get_services_is_exact_subset_in_stored_order(salon_id):
    services = await service_crud.get_salon_services(salon_id)
    expected = [s for s in Database().read().services if s.salon_id == salon_id]
    assert services == expected
    assert services


@pytest.mark.asyncio
async def test_get_services_for_unknown_salon_is_empty():
    assert await service_crud.get_salon_services("salon-404") == []


@pytest.mark.asyncio
async def test_get_staff_filters_by_salon():
    staff = await staff_crud.get_salon_staff("salon-1")
    assert [member.id for member in staff] == ["staff-1", "staff-2"]
    assert await staff_crud.get_salon_staff("salon-404") == []


@pytest.mark.asyncio
async def test_get_staff_schedules_returns_own_and_shared_slots():
    schedules = await schedule_crud.get_staff_schedules("staff-1")
    assert [s.id for s in schedules] == ["schedule-1", "schedule-2", "schedule-3", "schedule-9"]


@pytest.mark.asyncio
async def test_schedules_without_owner_are_returned_for_everyone():
    db = Database()
    document = db.read()
    for schedule in document.schedules:
        schedule.staff_id = None
    db.write(document)

    schedules = await schedule_crud.get_staff_schedules("staff-5")
    assert len(schedules) == len(document.schedules)


# createBooking

@pytest.mark.asyncio
async def test_create_booking_embeds_snapshots_and_persists():
    booking = await booking_crud.create_booking(booking_input())

    assert booking.user_id == "user-1"
    assert booking.salon.name == "Glamour Studio"
    assert [s.id for s in booking.services] == ["service-1", "service-2"]
    assert booking.staff.name == "Emma Wilson"
    assert booking.time == "09:00 AM"
    assert booking.total_price == 65

    stored = await booking_crud.get_user_bookings("user-1")
    assert stored == [booking]


@pytest.mark.asyncio
async def test_booking_snapshot_survives_later_salon_changes():
    booking = await booking_crud.create_booking(booking_input())

    db = Database()
    document = db.read()
    document.salons[0].name = "Renamed Salon"
    db.write(document)

    stored = await booking_crud.get_user_bookings("user-1")
    assert stored[0].id == booking.id
    assert stored[0].salon.name == "Glamour Studio"


@pytest.mark.asyncio
async def test_booking_ids_are_unique():
    first = await booking_crud.create_booking(booking_input())
    second = await booking_crud.create_booking(booking_input(time="11:00 AM"))

    assert first.id != second.id
    assert [b.id for b in Database().read().bookings] == [first.id, second.id]


@pytest.mark.asyncio
async def test_unknown_service_ids_are_ignored_when_others_match():
    booking = await booking_crud.create_booking(booking_input(service_ids=["service-2", "service-404"]))
    assert [s.id for s in booking.services] == ["service-2"]


@pytest.mark.asyncio
@pytest.mark.parametrize("overrides", [
    {"salon_id": "salon-404"},
    {"staff_id": "staff-404"},
    {"service_ids": ["service-404"]},
    {"service_ids": []},
    {"user_id": "user-404"},
])
async def test_create_booking_with_unresolvable_reference_persists_nothing(overrides):
    with pytest.raises(NotFoundError):
        await booking_crud.create_booking(booking_input(**overrides))
    assert Database().read().bookings == []


@pytest.mark.asyncio
async def test_get_bookings_only_returns_the_users_own():
    await booking_crud.create_booking(booking_input())
    result = await user_crud.register_user(register_input())
    await booking_crud.create_booking(booking_input(user_id=result.user.id))

    own = await booking_crud.get_user_bookings(result.user.id)
    assert [b.user_id for b in own] == [result.user.id]


# register

@pytest.mark.asyncio
async def test_register_creates_user_without_exposing_password():
    result = await user_crud.register_user(register_input())

    assert result.success is True
    assert result.message == "Registration successful! Please login to continue."
    assert "password" not in result.user.model_dump()

    stored = Database().read().users[-1]
    assert stored.id == result.user.id
    assert stored.password == "secret1"


@pytest.mark.asyncio
async def test_register_same_email_twice_only_succeeds_once():
    first = await user_crud.register_user(register_input())
    users_after_first = len(Database().read().users)

    second = await user_crud.register_user(register_input(name="Other Jane"))

    assert first.success is True
    assert second.success is False
    assert second.message == "Email already registered. Please login instead."
    assert second.user is None
    assert len(Database().read().users) == users_after_first


@pytest.mark.asyncio
async def test_register_blank_fields_checked_before_format_rules():
    result = await user_crud.register_user(register_input(name="", phone="123", email="bad", password="ab"))
    assert result.success is False
    assert result.message == "All fields are required"


@pytest.mark.asyncio
@pytest.mark.parametrize("fields, message", [
    ({"email": "demo@salon.com", "name": "", "password": ""}, "Email already registered. Please login instead."),
    ({"phone": ""}, "All fields are required"),
    ({"password": None}, "All fields are required"),
    ({"phone": "12345", "email": "bad"}, "Phone number must be at least 10 digits"),
    ({"email": "jane.example.com", "password": "ab"}, "Invalid email address"),
    ({"password": "abc"}, "Password must be at least 6 characters"),
])
async def test_register_reports_first_failing_rule(fields, message):
    result = await user_crud.register_user(register_input(**fields))
    assert result.success is False
    assert result.message == message
    assert len(Database().read().users) == 1


# login

@pytest.mark.asyncio
async def test_login_with_seeded_demo_user():
    result = await user_crud.login_user(LoginInput(email="demo@salon.com", password="demo123"))

    assert result.success is True
    assert result.message == "Login successful!"
    assert result.user.id == "user-1"
    assert "password" not in result.user.model_dump()


@pytest.mark.asyncio
@pytest.mark.parametrize("email, password", [
    ("demo@salon.com", "wrong"),
    ("DEMO@salon.com", "demo123"),
    ("nobody@salon.com", "demo123"),
])
async def test_login_failure_is_generic(email, password):
    result = await user_crud.login_user(LoginInput(email=email, password=password))
    assert result.success is False
    assert result.message == "Invalid email or password"
    assert result.user is None


@pytest.mark.asyncio
async def test_registered_user_can_login():
    await user_crud.register_user(register_input())
    result = await user_crud.login_user(LoginInput(email="jane@example.com", password="secret1"))
    assert result.success is True
    assert result.user.name == "Jane Doe"
