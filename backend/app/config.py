from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import Any


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # App
    APP_ENV: str = "development"
    APP_DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Flat-file storage
    DATA_FILE: str = "data.json"
    SEED_DEFAULT_DATA: bool = True

    # Admin (empty disables every admin route)
    ADMIN_TOKEN: str = ""

    @property
    def admin_enabled(self) -> bool:
        return bool(self.ADMIN_TOKEN)

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:9544"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> list[str]:
        if isinstance(v, str):
            import json
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [origin.strip() for origin in v.split(",")]
        return v

    # Cache TTLs (seconds)
    STATIONS_CACHE_TTL: int = 3600
    PROGRAMS_CACHE_TTL: int = 1800
    CURRENT_PROGRAM_CACHE_TTL: int = 60
    IMAGES_CACHE_TTL: int = 86400
    FILE_CACHE_TTL: int = 300

    # Periodic sweep of expired cache entries (0 disables)
    CACHE_SWEEP_INTERVAL_SECONDS: int = 600
    CACHE_WARM_UP: bool = True

    @property
    def cache_ttls(self) -> dict[str, int]:
        return {
            "stations": self.STATIONS_CACHE_TTL,
            "programs": self.PROGRAMS_CACHE_TTL,
            "current_program": self.CURRENT_PROGRAM_CACHE_TTL,
            "images": self.IMAGES_CACHE_TTL,
        }


settings = Settings()
