from typing import Annotated, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    environment: Annotated[str, Field(strict=True, alias="ENVIRONMENT")] = "development"
    host: Annotated[str, Field(strict=True, alias="HOST")] = "0.0.0.0"
    port: Annotated[int, Field(strict=False, alias="PORT")] = 8000
    database_url: Annotated[str, Field(strict=True, alias="DATABASE_URL")] = "sqlite+aiosqlite:///./skipsave.db"
    jwt_secret: Annotated[str, Field(strict=True, alias="JWT_SECRET")] = "change-me-in-production"
    session_cookie_name: Annotated[str, Field(strict=True, alias="SESSION_COOKIE_NAME")] = "skipsave_session"
    session_expire_days: Annotated[int, Field(strict=False, alias="SESSION_EXPIRE_DAYS")] = 30
    rate_limit_window_seconds: Annotated[float, Field(strict=False, alias="RATE_LIMIT_WINDOW_SECONDS")] = 60
    rate_limit_max: Annotated[int, Field(strict=False, alias="RATE_LIMIT_MAX")] = 60
    sandbox_completion_delay: Annotated[float, Field(strict=False, alias="SANDBOX_COMPLETION_DELAY")] = 5
    seed_demo_data: Annotated[bool, Field(strict=False, alias="SEED_DEMO_DATA")] = False
    log_level: Annotated[str, Field(strict=True, alias="LOG_LEVEL")] = "INFO"
    log_file: Annotated[Optional[str], Field(alias="LOG_FILE")] = None
    db_connection_settings: dict = {
        "pool_size": 20,
        "max_overflow": 30,
        "pool_timeout": 30,  # Seconds to wait for a connection from pool
        "pool_pre_ping": True,  # Check connection validity before using
        "pool_recycle": 1800,  # Recycle connections after 30 minutes
        "echo": False,  # Set to True for debugging only
    }
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")
