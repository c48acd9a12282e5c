"""Operation table shared by every transport.

Maps the wire operation names (``getSalons``, ``createBooking``...) onto the
resolvers, validating the raw variables and returning JSON-ready data with the
camelCase keys used in the data file.
"""
from typing import Any, Awaitable, Callable, Dict, List
from pydantic import BaseModel, ValidationError
from schemas.booking import BookingInput
from schemas.user import RegisterInput, LoginInput
from crud import salon_crud, service_crud, staff_crud, schedule_crud, user_crud, booking_crud
from crud.exceptions import UnknownOperationError, InvalidArgumentsError
import logging

logger = logging.getLogger(__name__)

Handler = Callable[[Dict[str, Any]], Awaitable[Any]]


def _unwrap_input(variables: Dict[str, Any]) -> Dict[str, Any]:
    """Mutations accept their arguments flat or wrapped in ``input``."""
    wrapped = variables.get("input")
    if isinstance(wrapped, dict):
        return wrapped
    return variables


def _require(variables: Dict[str, Any], name: str) -> str:
    value = variables.get(name)
    if value is None:
        raise InvalidArgumentsError(f"Missing required argument: {name}")
    if not isinstance(value, str):
        raise InvalidArgumentsError(f"Argument {name} must be a string")
    return value


def _parse(model, variables: Dict[str, Any]):
    try:
        return model.model_validate(_unwrap_input(variables))
    except ValidationError as e:
        raise InvalidArgumentsError(f"Invalid arguments: {e.errors(include_url=False)}")


def _dump(result: Any) -> Any:
    if isinstance(result, list):
        return [_dump(item) for item in result]
    if isinstance(result, BaseModel):
        return result.model_dump(by_alias=True)
    return result


async def _get_salons(variables: Dict[str, Any]):
    return await salon_crud.get_salons()


async def _get_services(variables: Dict[str, Any]):
    return await service_crud.get_salon_services(_require(variables, "salonId"))


async def _get_staff(variables: Dict[str, Any]):
    return await staff_crud.get_salon_staff(_require(variables, "salonId"))


async def _get_staff_schedules(variables: Dict[str, Any]):
    return await schedule_crud.get_staff_schedules(_require(variables, "staffId"))


async def _get_bookings(variables: Dict[str, Any]):
    return await booking_crud.get_user_bookings(_require(variables, "userId"))


async def _create_booking(variables: Dict[str, Any]):
    return await booking_crud.create_booking(_parse(BookingInput, variables))


async def _register(variables: Dict[str, Any]):
    return await user_crud.register_user(_parse(RegisterInput, variables))


async def _login(variables: Dict[str, Any]):
    return await user_crud.login_user(_parse(LoginInput, variables))


QUERIES: Dict[str, Handler] = {
    "getSalons": _get_salons,
    "getServices": _get_services,
    "getStaff": _get_staff,
    "getStaffSchedules": _get_staff_schedules,
    "getBookings": _get_bookings,
}

MUTATIONS: Dict[str, Handler] = {
    "createBooking": _create_booking,
    "register": _register,
    "login": _login,
}

OPERATIONS: Dict[str, Handler] = {**QUERIES, **MUTATIONS}


def operation_names() -> List[str]:
    return list(OPERATIONS)


async def execute(operation_name: str, variables: Dict[str, Any] = None) -> Any:
    """Run one operation and return its JSON-ready result.

    Raises a ResolverError subclass for unknown operations, bad arguments and
    unresolvable booking references.
    """
    handler = OPERATIONS.get(operation_name)
    if handler is None:
        raise UnknownOperationError(f"Unknown operation: {operation_name}")
    result = await handler(variables or {})
    return _dump(result)
