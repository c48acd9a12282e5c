from typing import List
from schemas.salon import Salon
from config.database import Database
from crud.latency import query_delay
import logging

logger = logging.getLogger(__name__)


async def get_salons() -> List[Salon]:
    """Get all salons"""
    logger.info("Query: getSalons")
    await query_delay()
    db = Database()
    return db.read().salons

