from typing import List
from schemas.staff import Staff
from config.database import Database
from crud.latency import query_delay
import logging

logger = logging.getLogger(__name__)


async def get_salon_staff(salon_id: str) -> List[Staff]:
    """Get the staff members working at a salon"""
    logger.info(f"Query: getStaff salon_id={salon_id}")
    await query_delay()
    db = Database()
    return [member for member in db.read().staff if member.salon_id == salon_id]
