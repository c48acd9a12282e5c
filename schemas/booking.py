from pydantic import BaseModel, ConfigDict, Field
from typing import List, Iterable
from schemas.salon import Salon
from schemas.service import Service
from schemas.staff import Staff
from schemas.user import generate_entity_id


class BookingInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    salon_id: str = Field(alias="salonId")
    service_ids: List[str] = Field(alias="serviceIds")
    staff_id: str = Field(alias="staffId")
    time: str


class Booking(BaseModel):
    """A confirmed booking.

    Salon, services and staff are snapshots copied at creation time, so later
    edits to the seed data never change historical bookings.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = Field(alias="userId")
    salon: Salon
    services: List[Service]
    staff: Staff
    time: str

    @property
    def total_price(self) -> float:
        return sum(service.price for service in self.services)


def generate_booking_id(existing_ids: Iterable[str] = ()) -> str:
    return generate_entity_id("booking", existing_ids)
