from typing import List
from schemas.service import Service
from config.database import Database
from crud.latency import query_delay
import logging

logger = logging.getLogger(__name__)


async def get_salon_services(salon_id: str) -> List[Service]:
    """Get the services offered by a salon, in stored order"""
    logger.info(f"Query: getServices salon_id={salon_id}")
    await query_delay()
    db = Database()
    return [service for service in db.read().services if service.salon_id == salon_id]
