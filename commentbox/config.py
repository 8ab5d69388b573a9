"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from sqlalchemy.engine import URL


def _flag(name: str) -> bool:
    return os.getenv(name, "0").strip() == "1"


def resolve_database_url() -> str:
    """Resolve DB connection string.

    Priority:
      1) DATABASE_URL (explicit)
      2) DATABASE_PATH (SQLite file)
      3) Build from PG* env vars (common Postgres convention)
      4) Fallback to local sqlite
    """

    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit

    path = os.getenv("DATABASE_PATH")
    if path:
        return f"sqlite:///{path}"

    host = os.getenv("PGHOST")
    user = os.getenv("PGUSER")
    database = os.getenv("PGDATABASE")
    port_raw = os.getenv("PGPORT")

    if host and user and database:
        password = os.getenv("PGPASSWORD")
        sslmode = os.getenv("PGSSLMODE", "require")

        try:
            port = int(port_raw) if port_raw else 5432
        except ValueError:
            port = 5432

        query = {"sslmode": sslmode} if sslmode else {}
        url = URL.create(
            drivername="postgresql+psycopg2",
            username=user,
            password=password,
            host=host,
            port=port,
            database=database,
            query=query,
        )
        return url.render_as_string(hide_password=False)

    return "sqlite:///./comments.db"


def parse_listen_address(value: str) -> tuple[str, int]:
    """Split "host:port" into its parts."""

    host, sep, port = value.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"Invalid listen address: {value!r}")
    return host or "0.0.0.0", int(port)


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    LISTEN_ADDRESS: str = os.getenv("LISTEN_ADDRESS", "0.0.0.0:8080")
    DB_BACKEND: str = os.getenv("DB_BACKEND", "sql").lower().strip()  # "sql" | "memory"

    DATABASE_URL: str = resolve_database_url()
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    DB_POOL_TIMEOUT: float = float(os.getenv("DB_POOL_TIMEOUT", "30"))

    FRONTEND_PATH: str | None = os.getenv("FRONTEND_PATH") or None
    TRUST_X_FORWARDED_FOR: bool = _flag("TRUST_X_FORWARDED_FOR")
    CORS_ALLOW_NULL_ORIGIN: bool = _flag("CORS_ALLOW_NULL_ORIGIN")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig
