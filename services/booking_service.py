from collections import deque
from typing import Deque, Optional
from services.booking_flow import (
    FlowState, reduce,
    Login, Register, FetchSalons, FetchServices, FetchStaff, FetchSchedules,
    FetchBookings, CreateBooking,
    LoginCompleted, SignupCompleted, SalonsLoaded, ServicesLoaded, StaffLoaded,
    SchedulesLoaded, BookingsLoaded, BookingCreated, RequestFailed
)
from services.salon_client import SalonClient
from services.transport import ClientError
import logging

logger = logging.getLogger(__name__)


class BookingSession:
    """Drives one user's booking flow.

    Events go through the reducer; the commands it returns are run one at a
    time against the client and their outcomes are fed back as events. A
    failed call becomes a RequestFailed event and is never retried.
    """

    def __init__(self, client: Optional[SalonClient] = None, state: Optional[FlowState] = None):
        self.client = client or SalonClient()
        self.state = state or FlowState()

    async def dispatch(self, event) -> FlowState:
        pending: Deque = deque()
        self._apply(event, pending)
        while pending:
            command = pending.popleft()
            self._apply(await self._execute(command), pending)
        return self.state

    def _apply(self, event, pending: Deque) -> None:
        transition = reduce(self.state, event)
        if transition.state.step != self.state.step:
            logger.info(f"Booking flow: {self.state.step.value} -> {transition.state.step.value}")
        self.state = transition.state
        pending.extend(transition.commands)

    async def _execute(self, command):
        try:
            return await self._run(command)
        except ClientError as e:
            logger.error(f"{type(command).__name__} failed: {e.message}")
            return RequestFailed(command, e.message)

    async def _run(self, command):
        if isinstance(command, Login):
            return LoginCompleted(await self.client.login(command.email, command.password))
        if isinstance(command, Register):
            result = await self.client.register(command.name, command.phone, command.email, command.password)
            return SignupCompleted(result)
        if isinstance(command, FetchSalons):
            return SalonsLoaded(tuple(await self.client.get_salons()))
        if isinstance(command, FetchServices):
            services = await self.client.get_services(command.salon_id)
            return ServicesLoaded(command.salon_id, tuple(services))
        if isinstance(command, FetchStaff):
            staff = await self.client.get_staff(command.salon_id)
            return StaffLoaded(command.salon_id, tuple(staff))
        if isinstance(command, FetchSchedules):
            schedules = await self.client.get_staff_schedules(command.staff_id)
            return SchedulesLoaded(command.staff_id, tuple(schedules))
        if isinstance(command, FetchBookings):
            bookings = await self.client.get_bookings(command.user_id)
            return BookingsLoaded(command.user_id, tuple(bookings))
        if isinstance(command, CreateBooking):
            booking = await self.client.create_booking(
                user_id=command.user_id,
                salon_id=command.salon_id,
                service_ids=list(command.service_ids),
                staff_id=command.staff_id,
                time=command.time
            )
            return BookingCreated(booking)
        raise TypeError(f"Unsupported booking flow command: {type(command).__name__}")

    async def close(self) -> None:
        await self.client.close()
