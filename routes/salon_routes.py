from fastapi import APIRouter, Depends
from typing import List
from schemas.salon import Salon
from schemas.service import Service
from schemas.staff import Staff
from crud import salon_crud, service_crud, staff_crud
from config.database import get_db, Database

router = APIRouter(
    prefix="/salons",
    tags=["salons"]
)


@router.get("", response_model=List[Salon])
async def get_salons(db: Database = Depends(get_db)):
    return await salon_crud.get_salons()


@router.get("/{salon_id}/services", response_model=List[Service])
async def get_salon_services(salon_id: str, db: Database = Depends(get_db)):
    return await service_crud.get_salon_services(salon_id)


@router.get("/{salon_id}/staff", response_model=List[Staff])
async def get_salon_staff(salon_id: str, db: Database = Depends(get_db)):
    return await staff_crud.get_salon_staff(salon_id)
