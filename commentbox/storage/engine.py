"""SQLAlchemy engine construction for the SQL comment stores.

Every engine gets a bounded `QueuePool` with no overflow, so pool occupancy
reflects exactly the connections writers are holding.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.pool import QueuePool

DEFAULT_POOL_SIZE = 10
DEFAULT_POOL_TIMEOUT = 30.0


def _pool_options(pool_size: int, pool_timeout: float) -> dict[str, Any]:
    return {
        "poolclass": QueuePool,
        "pool_size": int(pool_size),
        "max_overflow": 0,
        "pool_timeout": float(pool_timeout),
        "pool_pre_ping": True,
    }


def _assume_role_with_vercel_oidc(region: str) -> dict[str, str] | None:
    """Assume AWS_ROLE_ARN using VERCEL_OIDC_TOKEN if available."""

    token = os.getenv("VERCEL_OIDC_TOKEN")
    role_arn = os.getenv("AWS_ROLE_ARN")
    if not token or not role_arn:
        return None

    import boto3

    sts = boto3.client("sts", region_name=region)
    resp = sts.assume_role_with_web_identity(
        RoleArn=role_arn,
        RoleSessionName="commentbox-rds",
        WebIdentityToken=token,
    )
    creds = resp["Credentials"]
    return {
        "aws_access_key_id": creds["AccessKeyId"],
        "aws_secret_access_key": creds["SecretAccessKey"],
        "aws_session_token": creds["SessionToken"],
    }


def _generate_rds_iam_token(*, host: str, port: int, user: str, region: str) -> str:
    """Generate an RDS IAM auth token to use as the Postgres password."""

    import boto3

    creds = _assume_role_with_vercel_oidc(region)
    if creds:
        rds = boto3.client("rds", region_name=region, **creds)
    else:
        # Whatever AWS credentials are configured locally.
        rds = boto3.client("rds", region_name=region)

    return rds.generate_db_auth_token(
        DBHostname=host,
        Port=port,
        DBUsername=user,
        Region=region,
    )


def rds_iam_connector(
    *, host: str, port: int, user: str, database: str, region: str, sslmode: str
) -> Callable[[], object]:
    """Connection factory that logs in with a fresh RDS IAM token each time."""

    import psycopg2

    def _connect() -> object:
        token = _generate_rds_iam_token(host=host, port=port, user=user, region=region)
        return psycopg2.connect(
            host=host,
            port=port,
            user=user,
            password=token,
            dbname=database,
            sslmode=sslmode,
        )

    return _connect


def create_postgres_engine(
    database_url: str,
    *,
    pool_size: int = DEFAULT_POOL_SIZE,
    pool_timeout: float = DEFAULT_POOL_TIMEOUT,
) -> Engine:
    """Engine for a networked PostgreSQL server.

    Without a static password and with AWS_REGION set, each new pooled
    connection authenticates with a fresh RDS IAM token.
    """

    url = make_url(database_url)
    options = _pool_options(pool_size, pool_timeout)

    region = os.getenv("AWS_REGION")
    if not url.password and region and url.host and url.username and url.database:
        connect = rds_iam_connector(
            host=url.host,
            port=int(url.port or 5432),
            user=url.username,
            database=url.database,
            region=region,
            sslmode=(url.query or {}).get("sslmode") or os.getenv("PGSSLMODE") or "require",
        )
        return create_engine("postgresql+psycopg2://", creator=connect, **options)

    return create_engine(url, **options)


def create_sqlite_engine(
    path: str | Path,
    *,
    pool_size: int = DEFAULT_POOL_SIZE,
    pool_timeout: float = DEFAULT_POOL_TIMEOUT,
) -> Engine:
    """Engine for an embedded SQLite file, journaling in WAL mode."""

    engine = create_engine(
        URL.create("sqlite", database=str(Path(path))),
        connect_args={"check_same_thread": False},
        **_pool_options(pool_size, pool_timeout),
    )

    @event.listens_for(engine, "connect")
    def _enable_wal(dbapi_connection, connection_record):  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA journal_mode=WAL")
        finally:
            cursor.close()

    return engine
