from pydantic import BaseModel, ConfigDict
from typing import List
from schemas.salon import Salon
from schemas.service import Service
from schemas.staff import Staff
from schemas.schedule import Schedule
from schemas.user import UserRecord
from schemas.booking import Booking


class DataDocument(BaseModel):
    """The whole persisted store: one JSON document, six collections."""
    model_config = ConfigDict(populate_by_name=True)

    salons: List[Salon] = []
    services: List[Service] = []
    staff: List[Staff] = []
    schedules: List[Schedule] = []
    users: List[UserRecord] = []
    bookings: List[Booking] = []
