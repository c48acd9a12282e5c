from typing import List
from schemas.booking import Booking, BookingInput, generate_booking_id
from config.database import Database
from crud.exceptions import NotFoundError
from crud.latency import query_delay, mutation_delay
import logging

logger = logging.getLogger(__name__)


async def get_user_bookings(user_id: str) -> List[Booking]:
    logger.info(f"Query: getBookings user_id={user_id}")
    await query_delay()
    db = Database()
    return [booking for booking in db.read().bookings if booking.user_id == user_id]


async def create_booking(booking: BookingInput) -> Booking:
    """Create a booking and persist it.

    Every reference is resolved before anything is written: an unknown user,
    salon or staff member, or a service list that matches nothing, raises
    NotFoundError and leaves the store untouched.
    """
    logger.info(
        f"Mutation: createBooking user_id={booking.user_id} salon_id={booking.salon_id} "
        f"service_ids={booking.service_ids} staff_id={booking.staff_id} time={booking.time}"
    )
    await mutation_delay()

    db = Database()
    document = db.read()

    if not any(user.id == booking.user_id for user in document.users):
        raise NotFoundError(f"User with ID {booking.user_id} not found")

    salon = next((s for s in document.salons if s.id == booking.salon_id), None)
    if not salon:
        raise NotFoundError(f"Salon with ID {booking.salon_id} not found")

    staff = next((s for s in document.staff if s.id == booking.staff_id), None)
    if not staff:
        raise NotFoundError(f"Staff with ID {booking.staff_id} not found")

    services = [s for s in document.services if s.id in booking.service_ids]
    if not services:
        raise NotFoundError(f"No services found for IDs {booking.service_ids}")

    created = Booking(
        id=generate_booking_id(b.id for b in document.bookings),
        user_id=booking.user_id,
        salon=salon.model_copy(deep=True),
        services=[s.model_copy(deep=True) for s in services],
        staff=staff.model_copy(deep=True),
        time=booking.time
    )
    document.bookings.append(created)
    db.write(document)

    logger.info(f"Booking created: {created.id} for user: {created.user_id}")
    return created
