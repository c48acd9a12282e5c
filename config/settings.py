from dotenv import load_dotenv
from dataclasses import dataclass, field
from pathlib import Path
import os

# Load environment variables
load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def resolve_path(value: str) -> Path:
    """Resolve a configured path relative to the project root"""
    path = Path(value)
    if path.is_absolute():
        return path
    return (PROJECT_ROOT / path).resolve()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Salon Booking API")
    data_file: str = os.getenv("DATA_FILE", "data/sample_data.json")
    seed_file: str = os.getenv("SEED_FILE", "data/seed_data.json")

    # Simulated latency so that loading states are observable
    query_delay_ms: int = int(os.getenv("QUERY_DELAY_MS", "300"))
    mutation_delay_ms: int = int(os.getenv("MUTATION_DELAY_MS", "500"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "salon_booking.log")

    api_url: str = os.getenv("API_URL", "http://localhost:4000")
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "10"))
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))

    cors_origins: list = field(default_factory=lambda: ["*"])


settings = Settings()
