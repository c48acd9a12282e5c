from typing import List
from schemas.schedule import Schedule
from config.database import Database
from crud.latency import query_delay
import logging

logger = logging.getLogger(__name__)


async def get_staff_schedules(staff_id: str) -> List[Schedule]:
    """Get the time slots bookable with a staff member.

    Slots assigned to the staff member come back together with shared slots
    (those with no staff_id), in stored order.
    """
    logger.info(f"Query: getStaffSchedules staff_id={staff_id}")
    await query_delay()
    db = Database()
    return [
        schedule for schedule in db.read().schedules
        if schedule.staff_id is None or schedule.staff_id == staff_id
    ]
