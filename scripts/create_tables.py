"""Create the comment table in the configured database.

Reads DATABASE_URL (or DATABASE_PATH / PG* vars) from .env / environment and
ensures the `comment` table exists. Safe to run against a database that
already holds comments.

Usage:
  python scripts/create_tables.py
  python scripts/create_tables.py --database-url sqlite:///./comments.db
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from commentbox.config import resolve_database_url
from commentbox.db import create_store
from commentbox.storage import StorageError

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Ensure the comment table in the target database."""

    parser = argparse.ArgumentParser(description="Create the comment table")
    parser.add_argument("--database-url", dest="database_url", type=str, default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    load_dotenv()
    env_local = PROJECT_ROOT / ".env.local"
    if env_local.exists():
        load_dotenv(dotenv_path=env_local, override=True)

    database_url = args.database_url or resolve_database_url()
    try:
        store = create_store({"DB_BACKEND": "sql", "DATABASE_URL": database_url})
    except StorageError:
        logger.exception("Could not create comment table")
        return 1

    store.dispose()
    logger.info("Comment table created (or already exists).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
