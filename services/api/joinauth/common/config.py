import os
import typing as t
import pydantic as p

from joinauth.common.exceptions import ConfigurationError


def _require(key: str) -> str:
    value = os.getenv(key)
    if not value:
        raise ConfigurationError(f"Missing required environment variable: {key}")
    return value

def _int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"Environment variable {key} must be an integer") from e


class AppConfig(p.BaseModel):
    """Process-wide settings. Built once at startup, never mutated afterwards."""
    model_config = p.ConfigDict(frozen=True)

    #Basic app settings
    APP_NAME: str = 'joinauth'
    UVICORN_PORT: int = 8000
    UVICORN_HOST: str = '0.0.0.0'
    GIT_COMMIT: str = "[commit hash unknown]"
    MODE: str = "Local build"

    #Security settings
    JWT_SECRET: str
    ADMIN_ID: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    BCRYPT_ROUNDS: int = 10
    JOIN_CODE_LENGTH: int = 6

    #Default admin, created at startup when a password is given
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_EMAIL: str = "admin@localhost"
    DEFAULT_ADMIN_PASSWORD: str | None = None

    #Database (any SQLAlchemy async URL, e.g. mysql+aiomysql://user:pass@db:3306/name)
    DB_URL: str = "sqlite+aiosqlite:///./joinauth.db"
    DB_WAIT_INTERVAL_SECONDS: int = 10
    DB_WAIT_MAX_RETRIES: int = 10
    DB_KWARGS: dict[str, t.Any] = p.Field(default_factory=lambda: {'echo': False})

    #Outbound mail (Outlook SMTP by default)
    EMAIL_HOST: str = 'smtp.office365.com'
    EMAIL_PORT: int = 587
    EMAIL_USERNAME: str | None = None
    EMAIL_PASSWORD: str | None = None
    EMAIL_VERIFY_CERTS: bool = False

    #Logging/telemetry
    JSON_LOGS: int = 0
    OTEL_ENABLED: int = 0
    OTEL_SERVICE_NAME: str = 'joinauth'
    OTEL_GRPC_ENDPOINT: str = 'http://otel-collector:4317'

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls(
            GIT_COMMIT=os.getenv("GIT_COMMIT", "[commit hash unknown]"),
            MODE=os.getenv("MODE", "Local build"),
            JWT_SECRET=_require("JWT_SECRET"),
            ADMIN_ID=_require("ADMIN_ID"),
            ACCESS_TOKEN_EXPIRE_MINUTES=_int("ACCESS_TOKEN_EXPIRE_MINUTES", 60),
            BCRYPT_ROUNDS=_int("BCRYPT_ROUNDS", 10),
            JOIN_CODE_LENGTH=_int("JOIN_CODE_LENGTH", 6),
            DEFAULT_ADMIN_EMAIL=os.getenv("DEFAULT_ADMIN_EMAIL", "admin@localhost"),
            DEFAULT_ADMIN_PASSWORD=os.getenv("DEFAULT_ADMIN_PASSWORD") or None,
            DB_URL=os.getenv("DB_URL", "sqlite+aiosqlite:///./joinauth.db"),
            DB_WAIT_INTERVAL_SECONDS=_int("DB_WAIT_INTERVAL_SECONDS", 10),
            DB_WAIT_MAX_RETRIES=_int("DB_WAIT_MAX_RETRIES", 10),
            EMAIL_HOST=os.getenv("EMAIL_HOST", 'smtp.office365.com'),
            EMAIL_PORT=_int("EMAIL_PORT", 587),
            EMAIL_USERNAME=os.getenv("EMAIL_USERNAME"),
            EMAIL_PASSWORD=os.getenv("EMAIL_PASSWORD"),
            EMAIL_VERIFY_CERTS=os.getenv("EMAIL_VERIFY_CERTS", "0") == "1",
            JSON_LOGS=_int("JSON_LOGS", 0),
            OTEL_ENABLED=_int("OTEL_ENABLED", 0),
            OTEL_GRPC_ENDPOINT=os.getenv("OTEL_GRPC_ENDPOINT", 'http://otel-collector:4317'),
        )
