import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional


class ConfigurationError(ValueError):
    """Raised when a required setting is missing at startup."""


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Application settings, read once from the environment."""

    # Database
    DATABASE_URL: str = "sqlite:///./workforce.db"
    AUTO_CREATE_TABLES: bool = True

    # JWT
    SECRET_KEY: str = ""
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Passwords
    BCRYPT_ROUNDS: int = 10

    # Business rules
    TIMEZONE: str = "UTC"
    DEFAULT_LEAVE_BALANCE: int = 20

    # Application
    DEBUG: bool = False
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = field(default_factory=list)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        origins = env.get("CORS_ORIGINS", "")
        return cls(
            DATABASE_URL=env.get("DATABASE_URL", cls.DATABASE_URL),
            AUTO_CREATE_TABLES=_as_bool(env.get("AUTO_CREATE_TABLES", "true")),
            SECRET_KEY=env.get("SECRET_KEY", ""),
            ALGORITHM=env.get("ALGORITHM", cls.ALGORITHM),
            ACCESS_TOKEN_EXPIRE_MINUTES=int(env.get("ACCESS_TOKEN_EXPIRE_MINUTES", str(cls.ACCESS_TOKEN_EXPIRE_MINUTES))),
            BCRYPT_ROUNDS=int(env.get("BCRYPT_ROUNDS", str(cls.BCRYPT_ROUNDS))),
            TIMEZONE=env.get("TIMEZONE", cls.TIMEZONE),
            DEFAULT_LEAVE_BALANCE=int(env.get("DEFAULT_LEAVE_BALANCE", str(cls.DEFAULT_LEAVE_BALANCE))),
            DEBUG=_as_bool(env.get("DEBUG", "false")),
            API_PREFIX=env.get("API_PREFIX", cls.API_PREFIX),
            CORS_ORIGINS=[origin.strip() for origin in origins.split(",") if origin.strip()],
            LOG_LEVEL=env.get("LOG_LEVEL", cls.LOG_LEVEL),
            LOG_FORMAT=env.get("LOG_FORMAT", cls.LOG_FORMAT),
        )

    @property
    def database_url(self) -> str:
        """Database URL, accepting the legacy ``postgres://`` scheme."""
        url = self.DATABASE_URL
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        return url

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def access_token_expire_seconds(self) -> int:
        return self.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    def validate_required_settings(self) -> list:
        """Return the names of required settings that are missing."""
        missing = []

        if not self.SECRET_KEY:
            missing.append("SECRET_KEY")

        if not self.DATABASE_URL:
            missing.append("DATABASE_URL")

        return missing

    def get_logging_config(self) -> dict:
        """Logging configuration for ``logging.config.dictConfig``."""
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": self.LOG_FORMAT,
                },
            },
            "handlers": {
                "default": {
                    "formatter": "default",
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": self.LOG_LEVEL,
                "handlers": ["default"],
            },
        }


settings = Settings.from_env()


def validate_settings(app_settings: Optional[Settings] = None) -> None:
    """Fail fast when a required setting is missing."""
    missing = (app_settings or settings).validate_required_settings()

    if missing:
        raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")
