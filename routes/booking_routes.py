from fastapi import APIRouter, HTTPException, Depends
from schemas.booking import Booking, BookingInput
from crud import booking_crud
from crud.exceptions import NotFoundError
from config.database import get_db, Database

router = APIRouter(
    prefix="/bookings",
    tags=["bookings"]
)


@router.post("", response_model=Booking)
async def create_booking(booking: BookingInput, db: Database = Depends(get_db)):
    try:
        return await booking_crud.create_booking(booking)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
