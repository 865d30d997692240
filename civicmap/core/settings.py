from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    # DATABASE_URL wins when set; otherwise the PG_* parts are assembled.
    # No password is baked in: supply it through the environment or .env.
    DATABASE_URL: Optional[str] = None
    PG_HOST: str = "localhost"
    PG_PORT: int = 5432
    PG_DB: str = "vijayawada_map"
    PG_USER: str = "postgres"
    PG_PASSWORD: str = ""

    CORS_ORIGINS: List[str] = ["*"]

    UPLOADS_DIR: Path = Path("uploads")
    SEED_IMAGES_DIR: Path = Path("dataset_yolov8/train/images")
    SEED_YEAR: int = 2025
    SEED_MONTH: int = 4
    SEED_DAYS: int = 30
    SEED_PHOTOS_PER_DAY: int = 5
    CITY_SLUG: str = "vijayawada"

    MAX_UPLOAD_FILES: int = 5
    MAX_UPLOAD_SIZE_BYTES: int = 5 * 1024 * 1024

    ENABLE_OTEL: bool = False
    OTEL_EXPORTER_OTLP_ENDPOINT: str = "http://localhost:4317"
    OTEL_SERVICE_NAME: str = "civicmap-api"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg://{self.PG_USER}:{self.PG_PASSWORD}"
            f"@{self.PG_HOST}:{self.PG_PORT}/{self.PG_DB}"
        )

@lru_cache
def get_settings() -> Settings:
    return Settings()
