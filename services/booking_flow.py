"""Booking wizard state machine.

``reduce(state, event)`` is a pure function returning the next state plus the
commands (service calls) the caller should run. Results of those commands come
back in as events (``SalonsLoaded``, ``LoginCompleted``...), so every
transition can be exercised without a data store.

Steps: login -> salon -> services -> staff -> schedule -> confirmation -> success,
with signup as a side branch of login.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, NamedTuple, Optional, Tuple
from schemas.salon import Salon
from schemas.service import Service
from schemas.staff import Staff
from schemas.schedule import Schedule
from schemas.booking import Booking
from schemas.user import User, AuthResult


class Step(str, Enum):
    LOGIN = "login"
    SIGNUP = "signup"
    SALON_SELECT = "salon"
    SERVICE_SELECT = "services"
    STAFF_SELECT = "staff"
    SCHEDULE_SELECT = "schedule"
    CONFIRMATION = "confirmation"
    SUCCESS = "success"


class Tab(str, Enum):
    HOME = "home"
    BOOKINGS = "bookings"
    PROFILE = "profile"


LOGIN_ERROR = "An error occurred during login. Please try again."
REGISTRATION_ERROR = "An error occurred during registration. Please try again."
BOOKING_ERROR = "Failed to create booking. Please try again."
LOAD_ERROR = "Unable to load data. Please try again."
NO_SERVICE_SELECTED = "Please select at least one service"
PASSWORD_MISMATCH = "Passwords do not match"


@dataclass(frozen=True)
class Alert:
    title: str
    message: str


@dataclass(frozen=True)
class FlowState:
    step: Step = Step.LOGIN
    active_tab: Tab = Tab.HOME
    current_user: Optional[User] = None
    login_email: str = ""
    loading: bool = False
    alert: Optional[Alert] = None

    # Lists fetched from the service
    salons: Tuple[Salon, ...] = ()
    services: Tuple[Service, ...] = ()
    staff: Tuple[Staff, ...] = ()
    schedules: Tuple[Schedule, ...] = ()
    my_bookings: Tuple[Booking, ...] = ()

    # Current selections
    selected_salon: Optional[Salon] = None
    selected_services: Tuple[Service, ...] = ()
    selected_staff: Optional[Staff] = None
    selected_schedule: Optional[Schedule] = None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    @property
    def total_price(self) -> float:
        return sum(service.price for service in self.selected_services)

    @property
    def selected_service_ids(self) -> Tuple[str, ...]:
        return tuple(service.id for service in self.selected_services)

    @property
    def can_go_back(self) -> bool:
        return self.step not in (Step.LOGIN, Step.SIGNUP, Step.SALON_SELECT, Step.SUCCESS)


# Commands: service calls requested by a transition

@dataclass(frozen=True)
class Login:
    email: str
    password: str


@dataclass(frozen=True)
class Register:
    name: str
    phone: str
    email: str
    password: str


@dataclass(frozen=True)
class FetchSalons:
    pass


@dataclass(frozen=True)
class FetchServices:
    salon_id: str


@dataclass(frozen=True)
class FetchStaff:
    salon_id: str


@dataclass(frozen=True)
class FetchSchedules:
    staff_id: str


@dataclass(frozen=True)
class FetchBookings:
    user_id: str


@dataclass(frozen=True)
class CreateBooking:
    user_id: str
    salon_id: str
    service_ids: Tuple[str, ...]
    staff_id: str
    time: str


# User events

@dataclass(frozen=True)
class SubmitLogin:
    email: str
    password: str


@dataclass(frozen=True)
class ShowSignup:
    pass


@dataclass(frozen=True)
class ShowLogin:
    pass


@dataclass(frozen=True)
class SubmitSignup:
    name: str
    phone: str
    email: str
    password: str
    confirm_password: str


@dataclass(frozen=True)
class SelectSalon:
    salon: Salon


@dataclass(frozen=True)
class ToggleService:
    service: Service


@dataclass(frozen=True)
class ContinueToStaff:
    pass


@dataclass(frozen=True)
class SelectStaff:
    staff: Staff


@dataclass(frozen=True)
class SelectSchedule:
    schedule: Schedule


@dataclass(frozen=True)
class ConfirmBooking:
    pass


@dataclass(frozen=True)
class BookAnother:
    pass


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class Logout:
    pass


@dataclass(frozen=True)
class SwitchTab:
    tab: Tab


@dataclass(frozen=True)
class DismissAlert:
    pass


# Result events: outcomes of commands

@dataclass(frozen=True)
class LoginCompleted:
    result: AuthResult


@dataclass(frozen=True)
class SignupCompleted:
    result: AuthResult


@dataclass(frozen=True)
class SalonsLoaded:
    salons: Tuple[Salon, ...]


@dataclass(frozen=True)
class ServicesLoaded:
    salon_id: str
    services: Tuple[Service, ...]


@dataclass(frozen=True)
class StaffLoaded:
    salon_id: str
    staff: Tuple[Staff, ...]


@dataclass(frozen=True)
class SchedulesLoaded:
    staff_id: str
    schedules: Tuple[Schedule, ...]


@dataclass(frozen=True)
class BookingsLoaded:
    user_id: str
    bookings: Tuple[Booking, ...]


@dataclass(frozen=True)
class BookingCreated:
    booking: Booking


@dataclass(frozen=True)
class RequestFailed:
    command: object
    message: str = ""


class Transition(NamedTuple):
    state: FlowState
    commands: Tuple[object, ...] = ()


def _stay(state: FlowState) -> Transition:
    return Transition(state)


def _clear_selections(state: FlowState, **changes) -> FlowState:
    return replace(
        state,
        selected_salon=None,
        selected_services=(),
        selected_staff=None,
        selected_schedule=None,
        **changes
    )


def _restart_flow(state: FlowState) -> Transition:
    """Back to salon selection with nothing selected, reloading the salons."""
    return Transition(
        _clear_selections(state, step=Step.SALON_SELECT, loading=True, alert=None),
        (FetchSalons(),)
    )


# Authentication

def _submit_login(state: FlowState, event: SubmitLogin) -> Transition:
    if state.step != Step.LOGIN or state.loading:
        return _stay(state)
    return Transition(
        replace(state, loading=True, alert=None, login_email=event.email),
        (Login(event.email, event.password),)
    )


def _login_completed(state: FlowState, event: LoginCompleted) -> Transition:
    if state.step != Step.LOGIN:
        return _stay(state)
    result = event.result
    if not (result.success and result.user):
        return _stay(replace(
            state,
            loading=False,
            alert=Alert("Login Failed", result.message or "Invalid email or password")
        ))
    user = result.user
    next_state = _clear_selections(
        state,
        step=Step.SALON_SELECT,
        current_user=user,
        login_email="",
        loading=True,
        alert=None,
        my_bookings=()
    )
    return Transition(next_state, (FetchSalons(), FetchBookings(user.id)))


def _show_signup(state: FlowState, event: ShowSignup) -> Transition:
    if state.step != Step.LOGIN or state.loading:
        return _stay(state)
    return _stay(replace(state, step=Step.SIGNUP, alert=None))


def _show_login(state: FlowState, event: ShowLogin) -> Transition:
    if state.step != Step.SIGNUP or state.loading:
        return _stay(state)
    return _stay(replace(state, step=Step.LOGIN, alert=None))


def _submit_signup(state: FlowState, event: SubmitSignup) -> Transition:
    if state.step != Step.SIGNUP or state.loading:
        return _stay(state)
    if event.password != event.confirm_password:
        return _stay(replace(state, alert=Alert("Error", PASSWORD_MISMATCH)))
    return Transition(
        replace(state, loading=True, alert=None),
        (Register(event.name, event.phone, event.email, event.password),)
    )


def _signup_completed(state: FlowState, event: SignupCompleted) -> Transition:
    if state.step != Step.SIGNUP:
        return _stay(state)
    result = event.result
    if not result.success:
        return _stay(replace(state, loading=False, alert=Alert("Registration Failed", result.message)))
    name = result.user.name if result.user else ""
    return _stay(replace(
        state,
        step=Step.LOGIN,
        loading=False,
        login_email=result.user.email if result.user else "",
        alert=Alert("Account Created!", f"Welcome {name}! Please login with your credentials.")
    ))


def _logout(state: FlowState, event: Logout) -> Transition:
    return _stay(FlowState())


# Booking steps

def _salons_loaded(state: FlowState, event: SalonsLoaded) -> Transition:
    if not state.is_authenticated:
        return _stay(state)
    return _stay(replace(state, salons=tuple(event.salons), loading=False))


def _select_salon(state: FlowState, event: SelectSalon) -> Transition:
    if state.step != Step.SALON_SELECT or state.loading:
        return _stay(state)
    return Transition(
        replace(state, selected_salon=event.salon, services=(), loading=True, alert=None),
        (FetchServices(event.salon.id),)
    )


def _services_loaded(state: FlowState, event: ServicesLoaded) -> Transition:
    # Ignore results for a salon that is no longer selected
    if (state.step != Step.SALON_SELECT or state.selected_salon is None
            or state.selected_salon.id != event.salon_id):
        return _stay(state)
    return _stay(replace(
        state,
        step=Step.SERVICE_SELECT,
        services=tuple(event.services),
        selected_services=(),
        loading=False
    ))


def _toggle_service(state: FlowState, event: ToggleService) -> Transition:
    if state.step != Step.SERVICE_SELECT:
        return _stay(state)
    service_id = event.service.id
    if service_id in state.selected_service_ids:
        selected = tuple(s for s in state.selected_services if s.id != service_id)
    else:
        selected = state.selected_services + (event.service,)
    return _stay(replace(state, selected_services=selected))


def _continue_to_staff(state: FlowState, event: ContinueToStaff) -> Transition:
    if state.step != Step.SERVICE_SELECT or state.loading or state.selected_salon is None:
        return _stay(state)
    if not state.selected_services:
        return _stay(replace(state, alert=Alert("Error", NO_SERVICE_SELECTED)))
    return Transition(
        replace(state, loading=True, alert=None),
        (FetchStaff(state.selected_salon.id),)
    )


def _staff_loaded(state: FlowState, event: StaffLoaded) -> Transition:
    if (state.step != Step.SERVICE_SELECT or state.selected_salon is None
            or state.selected_salon.id != event.salon_id):
        return _stay(state)
    return _stay(replace(state, step=Step.STAFF_SELECT, staff=tuple(event.staff), loading=False))


def _select_staff(state: FlowState, event: SelectStaff) -> Transition:
    if state.step != Step.STAFF_SELECT or state.loading:
        return _stay(state)
    return Transition(
        replace(state, selected_staff=event.staff, schedules=(), loading=True, alert=None),
        (FetchSchedules(event.staff.id),)
    )


def _schedules_loaded(state: FlowState, event: SchedulesLoaded) -> Transition:
    if (state.step != Step.STAFF_SELECT or state.selected_staff is None
            or state.selected_staff.id != event.staff_id):
        return _stay(state)
    return _stay(replace(
        state,
        step=Step.SCHEDULE_SELECT,
        schedules=tuple(event.schedules),
        loading=False
    ))


def _select_schedule(state: FlowState, event: SelectSchedule) -> Transition:
    if state.step != Step.SCHEDULE_SELECT or not event.schedule.is_available:
        return _stay(state)
    return _stay(replace(state, selected_schedule=event.schedule, step=Step.CONFIRMATION))


def _confirm_booking(state: FlowState, event: ConfirmBooking) -> Transition:
    if state.step != Step.CONFIRMATION or state.loading:
        return _stay(state)
    if not (state.current_user and state.selected_salon and state.selected_staff
            and state.selected_schedule and state.selected_services):
        return _stay(state)
    command = CreateBooking(
        user_id=state.current_user.id,
        salon_id=state.selected_salon.id,
        service_ids=state.selected_service_ids,
        staff_id=state.selected_staff.id,
        time=state.selected_schedule.time
    )
    return Transition(replace(state, loading=True, alert=None), (command,))


def _booking_created(state: FlowState, event: BookingCreated) -> Transition:
    if state.step != Step.CONFIRMATION:
        return _stay(state)
    return _stay(replace(
        state,
        step=Step.SUCCESS,
        my_bookings=state.my_bookings + (event.booking,),
        loading=False
    ))


def _book_another(state: FlowState, event: BookAnother) -> Transition:
    if state.step != Step.SUCCESS:
        return _stay(state)
    return _restart_flow(state)


def _bookings_loaded(state: FlowState, event: BookingsLoaded) -> Transition:
    if state.current_user is None or state.current_user.id != event.user_id:
        return _stay(state)
    return _stay(replace(state, my_bookings=tuple(event.bookings)))


# Navigation

def _back(state: FlowState, event: Back) -> Transition:
    # Each step goes back one and drops what was picked on the way in
    if state.step == Step.SERVICE_SELECT:
        return _stay(replace(state, step=Step.SALON_SELECT, selected_services=(), loading=False))
    if state.step == Step.STAFF_SELECT:
        return _stay(replace(state, step=Step.SERVICE_SELECT, selected_staff=None, loading=False))
    if state.step == Step.SCHEDULE_SELECT:
        return _stay(replace(state, step=Step.STAFF_SELECT, selected_schedule=None, loading=False))
    if state.step == Step.CONFIRMATION:
        return _stay(replace(state, step=Step.SCHEDULE_SELECT, loading=False))
    if state.step == Step.SUCCESS:
        return _restart_flow(state)
    return _stay(state)


def _switch_tab(state: FlowState, event: SwitchTab) -> Transition:
    next_state = replace(state, active_tab=event.tab)
    if not state.is_authenticated:
        return _stay(next_state)
    if event.tab == Tab.HOME and state.step not in (Step.LOGIN, Step.SIGNUP, Step.SALON_SELECT):
        # Leaving mid-flow must not resume with stale selections
        return _stay(_clear_selections(next_state, step=Step.SALON_SELECT, loading=False))
    if event.tab == Tab.BOOKINGS:
        return Transition(next_state, (FetchBookings(state.current_user.id),))
    return _stay(next_state)


def _dismiss_alert(state: FlowState, event: DismissAlert) -> Transition:
    return _stay(replace(state, alert=None))


def _request_failed(state: FlowState, event: RequestFailed) -> Transition:
    command = event.command
    if isinstance(command, FetchBookings):
        # Background refresh; the list on screen stays as it was
        return _stay(state)
    if isinstance(command, Login):
        return _stay(replace(state, loading=False, alert=Alert("Error", LOGIN_ERROR)))
    if isinstance(command, Register):
        return _stay(replace(state, loading=False, alert=Alert("Error", REGISTRATION_ERROR)))
    if isinstance(command, CreateBooking):
        return _stay(replace(state, loading=False, alert=Alert("Error", BOOKING_ERROR)))

    next_state = replace(state, loading=False, alert=Alert("Error", LOAD_ERROR))
    if isinstance(command, FetchServices) and state.step == Step.SALON_SELECT:
        next_state = replace(next_state, selected_salon=None)
    elif isinstance(command, FetchSchedules) and state.step == Step.STAFF_SELECT:
        next_state = replace(next_state, selected_staff=None)
    return _stay(next_state)


_HANDLERS: Dict[type, Callable[[FlowState, object], Transition]] = {
    SubmitLogin: _submit_login,
    LoginCompleted: _login_completed,
    ShowSignup: _show_signup,
    ShowLogin: _show_login,
    SubmitSignup: _submit_signup,
    SignupCompleted: _signup_completed,
    Logout: _logout,
    SalonsLoaded: _salons_loaded,
    SelectSalon: _select_salon,
    ServicesLoaded: _services_loaded,
    ToggleService: _toggle_service,
    ContinueToStaff: _continue_to_staff,
    StaffLoaded: _staff_loaded,
    SelectStaff: _select_staff,
    SchedulesLoaded: _schedules_loaded,
    SelectSchedule: _select_schedule,
    ConfirmBooking: _confirm_booking,
    BookingCreated: _booking_created,
    BookAnother: _book_another,
    BookingsLoaded: _bookings_loaded,
    Back: _back,
    SwitchTab: _switch_tab,
    DismissAlert: _dismiss_alert,
    RequestFailed: _request_failed,
}


def reduce(state: FlowState, event: object) -> Transition:
    """Apply one event. Events that do not apply to the current step leave the state as is."""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unsupported booking flow event: {type(event).__name__}")
    return handler(state, event)
