from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Seat Selection Service'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Seat adjacency thresholds (plan units calibrated to a typical seat pitch)
    SEAT_ADJACENCY_MAX_DISTANCE: float = 60.0
    SEAT_ADJACENCY_MAX_ROW_GAP: int = 1  # Never jump over a row
    SEAT_ADJACENCY_MAX_COLUMN_GAP: int = 1

    # Seat selection limits
    SEAT_SELECTION_MAX_SIZE: int = 10
    SEAT_RESERVED_BLOCKS_SELECTION: bool = False  # Reserved seats are selectable by default

    # ASGI server (granian)
    SERVER_HOST: str = '0.0.0.0'
    SERVER_PORT: int = 8100
    SERVER_WORKERS: int = 1

    @field_validator('SEAT_ADJACENCY_MAX_ROW_GAP', 'SEAT_SELECTION_MAX_SIZE', 'SERVER_WORKERS')
    @classmethod
    def ensure_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError('must be at least 1')
        return v


settings = Settings()  # type: ignore
