import sys
from pathlib import Path

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"

DEFAULT_SEED_DIR = str(Path(__file__).resolve().parent.parent / "data")


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    SEED_DATA_DIR: str = DEFAULT_SEED_DIR

    SIMULATE_LATENCY: bool = False
    LATENCY_LIST_MS: int = 300
    LATENCY_DEPARTMENT_LIST_MS: int = 250
    LATENCY_GET_MS: int = 200
    LATENCY_QUERY_MS: int = 250
    LATENCY_CREATE_MS: int = 400
    LATENCY_UPDATE_MS: int = 400
    LATENCY_DELETE_MS: int = 300

    NOTIFICATION_SEED: int | None = None
    NOTIFICATION_LIMIT: int = 20

    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
