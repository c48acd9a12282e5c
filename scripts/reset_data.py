from config.database import Database
import logging
import sys

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def reset_data(data_file: str = None) -> None:
    """Throw away registered users and bookings by restoring the seed document."""
    Database.connect_db(data_file)
    try:
        document = Database.reset()
        logger.info(
            f"Restored {len(document.salons)} salons, {len(document.services)} services, "
            f"{len(document.staff)} staff, {len(document.schedules)} schedules "
            f"and {len(document.users)} users into {Database.data_file}"
        )
    finally:
        Database.close_db()


if __name__ == "__main__":
    try:
        reset_data(sys.argv[1] if len(sys.argv) > 1 else None)
    except Exception as e:
        logger.error(f"Reset failed: {str(e)}")
        sys.exit(1)
