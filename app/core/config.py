# Fichier: app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from pydantic import ValidationError, field_validator
import sys


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str

    # --- Gemini (générateur externe) ---
    GOOGLE_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.0-flash"
    GEMINI_API_BASE: str = "https://generativelanguage.googleapis.com/v1beta/models"
    GEMINI_TIMEOUT_S: float = 60.0

    # --- Tirage des lots de questions ---
    GRAMMAR_SAMPLE_SIZE: int = 5
    KANJI_SAMPLE_SIZE: int = 10

    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # Performance instrumentation
    SQLALCHEMY_SLOW_QUERY_THRESHOLD_MS: int = 300

    ENVIRONMENT: str = "development"

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def _normalize_database_url(cls, value: str) -> str:
        """Map legacy or driver-less URLs onto a synchronous SQLAlchemy driver.

        Managed providers hand out ``postgres://`` URLs, which SQLAlchemy no
        longer accepts, and SQL Server connection strings usually come without
        a driver. Both are rewritten so ``create_engine`` picks a real DBAPI,
        while SQLite and explicit ``dialect+driver`` URLs are left untouched.
        """

        if not isinstance(value, str):
            return value

        replacements = {
            "postgres://": "postgresql://",
            "mssql://": "mssql+pyodbc://",
        }

        for prefix, target in replacements.items():
            if value.startswith(prefix):
                return target + value[len(prefix) :]

        return value

    @field_validator("GRAMMAR_SAMPLE_SIZE", "KANJI_SAMPLE_SIZE")
    @classmethod
    def _positive_sample_size(cls, value: int) -> int:
        if value < 1:
            raise ValueError("sample size must be at least 1")
        return value


def _log_settings_validation_error(exc: ValidationError) -> None:
    """Pretty-print missing or invalid environment variables.

    The settings are built while ``app.core.config`` is imported, so a missing
    variable surfaces as a bare traceback during startup. The structured error
    payload is printed first so the offending variable is easy to spot.
    """

    header = "Configuration error while loading environment variables:"
    print(header, file=sys.stderr)

    details = exc.errors()
    if details:
        for error in details:
            location = ".".join(str(part) for part in error.get("loc", ()))
            message = error.get("msg", "Unknown validation error")
            type_name = error.get("type")
            hint_parts = [message]
            if type_name:
                hint_parts.append(f"(type={type_name})")
            hint = " ".join(hint_parts)
            print(f"  - {location}: {hint}", file=sys.stderr)
    else:
        print(exc, file=sys.stderr)


try:
    settings = Settings()
except ValidationError as exc:  # pragma: no cover - exercised at runtime
    _log_settings_validation_error(exc)
    raise
