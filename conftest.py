import os

# Keep test runs from writing a log file into the working directory
os.environ.setdefault("LOG_FILE", "")

from pathlib import Path
import pytest
from config.database import Database
from config.settings import settings

SEED_FILE = Path(__file__).resolve().parent / "data" / "seed_data.json"


@pytest.fixture(autouse=True)
def data_store(tmp_path, monkeypatch):
    """Fresh copy of the seed document per test, with simulated latency off."""
    monkeypatch.setattr(settings, "query_delay_ms", 0)
    monkeypatch.setattr(settings, "mutation_delay_ms", 0)
    data_file = tmp_path / "sample_data.json"
    Database.connect_db(data_file, SEED_FILE)
    yield data_file
    Database.close_db()
