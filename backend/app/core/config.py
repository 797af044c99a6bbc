from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, model_validator
from typing import Any, ClassVar
import json
from pathlib import Path
import os


class Settings(BaseSettings):
    API_PREFIX: str = "/api"

    # Use an absolute path so running the app from different directories
    # (e.g., repo root or backend/) always resolves the same DB file.
    BASE_DIR: ClassVar[Path] = Path(__file__).resolve().parents[2]
    SQLALCHEMY_DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'travel.db'}"

    # "production" hides exception text in 500 responses
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # CORS origins
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    CORS_ALLOW_ALL: bool = False

    # SMTP email settings
    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 25
    SMTP_USERNAME: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_FROM: str = "no-reply@localhost"

    # Send the "booking received" email after a custom package booking.
    BOOKING_EMAIL_ENABLED: bool = True
    AGENCY_NAME: str = "Dream Destiny Travels"

    # OpenTelemetry console tracing; off by default to keep local runs quiet
    ENABLE_TRACING: bool = False

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

    @field_validator("ENVIRONMENT", "LOG_LEVEL", mode="before")
    def strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def allow_all_if_requested(self) -> "Settings":
        if self.CORS_ALLOW_ALL:
            self.CORS_ORIGINS = ["*"]
        return self

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


def load_settings() -> "Settings":
    return Settings(_env_file=os.getenv("ENV_FILE", str(Path(__file__).resolve().parents[3] / ".env")))


settings = load_settings()


def _dedupe(seq: list[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for item in seq:
        key = item.strip().rstrip("/")
        if not key or key in seen:
            continue
        seen.add(key)
        ordered.append(key)
    return ordered


FRONTEND_ORIGINS = _dedupe(settings.CORS_ORIGINS)
