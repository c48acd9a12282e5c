from pathlib import Path
from typing import Optional, Union, AsyncGenerator
import logging
import os
import shutil
import tempfile
from config.settings import settings, resolve_path
from schemas.document import DataDocument

logger = logging.getLogger('database')


class Database:
    """File-backed store holding the whole data document as JSON.

    Every ``read`` parses the file again and every ``write`` replaces it, so
    there is no in-memory cache and the last writer wins. File access is
    blocking, including when called from the async resolvers.
    """
    data_file: Optional[Path] = None
    seed_file: Optional[Path] = None

    @classmethod
    def connect_db(cls, data_file: Union[str, Path, None] = None,
                   seed_file: Union[str, Path, None] = None) -> None:
        """Point the store at a data file, seeding it if it does not exist yet."""
        cls.data_file = resolve_path(str(data_file or settings.data_file))
        cls.seed_file = resolve_path(str(seed_file or settings.seed_file))

        if not cls.data_file.exists():
            cls.data_file.parent.mkdir(parents=True, exist_ok=True)
            if cls.seed_file.exists():
                shutil.copyfile(cls.seed_file, cls.data_file)
                logger.info(f"Created data file {cls.data_file} from seed {cls.seed_file}")
            else:
                cls._write_file(cls.data_file, DataDocument())
                logger.warning(f"Seed file {cls.seed_file} not found, created empty data file {cls.data_file}")

        logger.info(f"Using data file: {cls.data_file}")

    @classmethod
    def close_db(cls) -> None:
        if cls.data_file is not None:
            logger.info(f"Released data file {cls.data_file}")
        cls.data_file = None
        cls.seed_file = None

    @classmethod
    def reset(cls) -> DataDocument:
        """Restore the data file from the seed document."""
        if cls.data_file is None:
            raise Exception("Database not initialized. Call connect_db() first.")
        if cls.seed_file is None or not cls.seed_file.exists():
            raise FileNotFoundError(f"Seed file not found: {cls.seed_file}")
        seed = DataDocument.model_validate_json(cls.seed_file.read_text(encoding="utf-8"))
        cls._write_file(cls.data_file, seed)
        logger.info(f"Reset {cls.data_file} from seed {cls.seed_file}")
        return seed

    @staticmethod
    def _write_file(path: Path, document: DataDocument) -> None:
        payload = document.model_dump_json(by_alias=True, indent=2)
        # Write beside the target then swap, so a reader never sees half a file
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_path, path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def __init__(self):
        if self.data_file is None:
            raise Exception("Database not initialized. Call connect_db() first.")
        self.path = self.data_file

    def read(self) -> DataDocument:
        """Parse the full document from disk."""
        return DataDocument.model_validate_json(self.path.read_text(encoding="utf-8"))

    def write(self, document: DataDocument) -> None:
        """Serialise the full document, overwriting the data file."""
        self._write_file(self.path, document)

    @classmethod
    def get_db(cls) -> 'Database':
        return cls()


async def get_db() -> AsyncGenerator[Database, None]:
    """FastAPI dependency for getting database instance."""
    if Database.data_file is None:
        Database.connect_db()
    yield Database()
