from fastapi import APIRouter, Depends
from typing import List
from schemas.user import RegisterInput, LoginInput, AuthResult
from schemas.booking import Booking
from crud import user_crud, booking_crud
from config.database import get_db, Database

router = APIRouter(
    prefix="/users",
    tags=["users"]
)


@router.post("/register", response_model=AuthResult)
async def register_user(data: RegisterInput, db: Database = Depends(get_db)):
    # Soft failures are still 200 responses with success=False
    return await user_crud.register_user(data)


@router.post("/login", response_model=AuthResult)
async def login_user(data: LoginInput, db: Database = Depends(get_db)):
    return await user_crud.login_user(data)


@router.get("/{user_id}/bookings", response_model=List[Booking])
async def get_user_bookings(user_id: str, db: Database = Depends(get_db)):
    return await booking_crud.get_user_bookings(user_id)
