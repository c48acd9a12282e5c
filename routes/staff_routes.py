from fastapi import APIRouter, Depends
from typing import List
from schemas.schedule import Schedule
from crud import schedule_crud
from config.database import get_db, Database

router = APIRouter(
    prefix="/staff",
    tags=["staff"]
)


@router.get("/{staff_id}/schedules", response_model=List[Schedule])
async def get_staff_schedules(staff_id: str, db: Database = Depends(get_db)):
    return await schedule_crud.get_staff_schedules(staff_id)
