import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _default_database_url() -> str:
    user = os.getenv("POSTGRES_USER", "postgres")
    password = os.getenv("POSTGRES_PASSWORD", "postgres")
    host = os.getenv("POSTGRES_HOST", "localhost")  # In Docker, this will be 'postgres'
    port = os.getenv("POSTGRES_PORT", "5433")
    name = os.getenv("POSTGRES_DB", "ecommerce")
    return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{name}"


@dataclass(frozen=True)
class Settings:
    """Process configuration. Built once at startup and handed to create_app()."""

    jwt_secret_key: str
    database_url: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    jwt_cookie_name: str = "jwt"
    database_echo: bool = False
    otlp_endpoint: Optional[str] = None
    metrics_enabled: bool = True
    rate_limit_enabled: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        secret = os.getenv("JWT_SECRET_KEY")
        if not secret:
            raise ValueError("FATAL ERROR: JWT_SECRET_KEY is not set in the environment!")

        return cls(
            jwt_secret_key=secret,
            database_url=os.getenv("DATABASE_URL") or _default_database_url(),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            access_token_expire_minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")),
            jwt_cookie_name=os.getenv("JWT_COOKIE_NAME", "jwt"),
            database_echo=_env_bool("DATABASE_ECHO", False),
            otlp_endpoint=os.getenv("OTLP_ENDPOINT") or None,
            metrics_enabled=_env_bool("METRICS_ENABLED", True),
            rate_limit_enabled=_env_bool("RATE_LIMIT_ENABLED", True),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
