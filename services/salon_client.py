from typing import List, Optional
from pydantic import ValidationError
from schemas.salon import Salon
from schemas.service import Service
from schemas.staff import Staff
from schemas.schedule import Schedule
from schemas.booking import Booking
from schemas.user import AuthResult
from services.transport import InProcessTransport, HttpTransport, TransportError


class SalonClient:
    """Typed facade over one transport; one method per operation."""

    def __init__(self, transport=None):
        self.transport = transport or InProcessTransport()

    @classmethod
    def over_http(cls, base_url: Optional[str] = None, timeout: Optional[float] = None) -> 'SalonClient':
        return cls(HttpTransport(base_url=base_url, timeout=timeout))

    async def _call(self, operation: str, **variables):
        return await self.transport.execute(operation, variables)

    async def get_salons(self) -> List[Salon]:
        data = await self._call("getSalons")
        return [self._parse(Salon, item) for item in self._as_list(data)]

    async def get_services(self, salon_id: str) -> List[Service]:
        data = await self._call("getServices", salonId=salon_id)
        return [self._parse(Service, item) for item in self._as_list(data)]

    async def get_staff(self, salon_id: str) -> List[Staff]:
        data = await self._call("getStaff", salonId=salon_id)
        return [self._parse(Staff, item) for item in self._as_list(data)]

    async def get_staff_schedules(self, staff_id: str) -> List[Schedule]:
        data = await self._call("getStaffSchedules", staffId=staff_id)
        return [self._parse(Schedule, item) for item in self._as_list(data)]

    async def get_bookings(self, user_id: str) -> List[Booking]:
        data = await self._call("getBookings", userId=user_id)
        return [self._parse(Booking, item) for item in self._as_list(data)]

    async def create_booking(self, user_id: str, salon_id: str, service_ids: List[str],
                             staff_id: str, time: str) -> Booking:
        data = await self._call("createBooking", input={
            "userId": user_id,
            "salonId": salon_id,
            "serviceIds": list(service_ids),
            "staffId": staff_id,
            "time": time,
        })
        return self._parse(Booking, data)

    async def register(self, name: str, phone: str, email: str, password: str) -> AuthResult:
        data = await self._call("register", input={
            "name": name, "phone": phone, "email": email, "password": password
        })
        return self._parse(AuthResult, data)

    async def login(self, email: str, password: str) -> AuthResult:
        data = await self._call("login", input={"email": email, "password": password})
        return self._parse(AuthResult, data)

    async def close(self) -> None:
        await self.transport.close()

    @staticmethod
    def _as_list(data) -> list:
        if not isinstance(data, list):
            raise TransportError(f"Expected a list, got {type(data).__name__}")
        return data

    @staticmethod
    def _parse(model, item):
        try:
            return model.model_validate(item)
        except ValidationError as e:
            raise TransportError(f"Unexpected {model.__name__} payload: {e.error_count()} error(s)") from e
