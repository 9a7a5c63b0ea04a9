from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator
from typing import Annotated, Any, ClassVar, Literal
import json
from pathlib import Path
import os


class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "InkMatch API"

    # JWT verification for artist-side calls. Tokens are issued elsewhere;
    # this service only decodes them.
    SECRET_KEY: str = "fallback_secret_for_dev_only"
    ALGORITHM: str = "HS256"

    # Document store backend: "memory", "sql" or "redis"
    DOCUMENT_STORE: Literal["memory", "sql", "redis"] = "memory"

    # Use an absolute path so running the app from different directories
    # always resolves the same DB file.
    BASE_DIR: ClassVar[Path] = Path(__file__).resolve().parents[2]
    SQLALCHEMY_DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'inkmatch.db'}"

    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_KEY_PREFIX: str = "inkmatch"

    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["http://localhost:3000"]

    # Top artists ranking
    TOP_ARTISTS_LIMIT: int = 5
    TOP_ARTISTS_MAX_LIMIT: int = 50

    # Anonymous viewer identity cookie
    VIEWER_COOKIE_NAME: str = "viewer_id"
    VIEWER_COOKIE_MAX_AGE: int = 10 * 365 * 24 * 3600
    VIEWER_COOKIE_SECURE: bool = False

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(extra="ignore", case_sensitive=True)

    @field_validator("CORS_ORIGINS", mode="before")
    def split_origins(cls, v: Any) -> list[str]:
        """Parse comma-separated or JSON list of origins from environment."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return parsed
            except json.JSONDecodeError:
                pass
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("SECRET_KEY", "REDIS_URL", mode="before")
    def strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("TOP_ARTISTS_LIMIT", "TOP_ARTISTS_MAX_LIMIT")
    def positive_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError("limit must be at least 1")
        return v


def load_settings() -> "Settings":
    return Settings(_env_file=os.getenv("ENV_FILE", str(Path(__file__).resolve().parents[3] / ".env")))


settings = load_settings()
