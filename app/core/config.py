"""Application configuration loaded from environment variables."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Single-file SQLite database; the URL may point at a file or at :memory:.
VALID_DATABASE_URL_PREFIXES = ("sqlite://", "sqlite+pysqlite://")

# Used only outside prod when JWT_SECRET is not configured.
DEV_JWT_SECRET = "bnbinsights-dev-only-secret"


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = "/api"

    DATABASE_URL: str = "sqlite:///./data/bnbinsights.db"

    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # Production builds of the SPA are served from STATIC_DIR when enabled
    SERVE_STATIC: bool = False
    STATIC_DIR: str = "dist"

    # JWT authentication; required in prod
    JWT_SECRET: SecretStr | None = None
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 60 * 24 * 7

    BCRYPT_ROUNDS: int = 10
    PASSWORD_MIN_LEN: int = 6
    RESET_TOKEN_EXPIRE_MINUTES: int = 60

    # Seed data is inserted if absent on every startup
    SEED_ON_STARTUP: bool = True
    SEED_ADMIN_EMAIL: str = "admin@bnbinsights.com"
    SEED_ADMIN_PASSWORD: SecretStr = SecretStr("admin123")

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError("DATABASE_URL must be a SQLite URL (e.g. sqlite:///./data/app.db)")
        return v.strip()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        s = v.strip().rstrip("/")
        if not s.startswith("/"):
            raise ValueError("API_PREFIX must start with '/' (e.g. /api)")
        return s

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_ALGORITHM must be set and non-empty")
        return v.strip()

    @field_validator("JWT_EXPIRE_MINUTES")
    @classmethod
    def validate_jwt_expire_minutes(cls, v: int) -> int:
        if v < 1 or v > 43200:
            raise ValueError(
                "JWT_EXPIRE_MINUTES must be between 1 and 43200 (1 min to 30 days)"
            )
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < 4 or v > 16:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 16")
        return v

    @field_validator("PASSWORD_MIN_LEN")
    @classmethod
    def validate_password_min_len(cls, v: int) -> int:
        if v < 1 or v > 72:
            raise ValueError("PASSWORD_MIN_LEN must be between 1 and 72")
        return v

    @field_validator("RESET_TOKEN_EXPIRE_MINUTES")
    @classmethod
    def validate_reset_token_expire_minutes(cls, v: int) -> int:
        if v < 1 or v > 1440:
            raise ValueError("RESET_TOKEN_EXPIRE_MINUTES must be between 1 and 1440")
        return v

    @model_validator(mode="after")
    def resolve_jwt_secret(self) -> "Settings":
        secret = self.JWT_SECRET.get_secret_value().strip() if self.JWT_SECRET else ""
        if secret:
            return self
        if self.APP_ENV == "prod":
            raise ValueError("JWT_SECRET must be set when APP_ENV=prod")
        logger.warning("JWT_SECRET is not set; using the development secret.")
        self.JWT_SECRET = SecretStr(DEV_JWT_SECRET)
        return self

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "prod"


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()
