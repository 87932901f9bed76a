"""CLI entry point for ad-hoc parameterized queries.

Usage:
    python -m scripts.query --db-url sqlite:///data.db --sql "SELECT * FROM t WHERE id = ?" --param 1
"""

import argparse
import json
import logging
import os
import sys

from dbhelper import DatabaseHelper, create_provider

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a query and print rows as JSON lines")
    parser.add_argument(
        "--db-url",
        default=os.environ.get("DATABASE_URL"),
        help="Database URL, defaults to $DATABASE_URL",
    )
    parser.add_argument("--sql", required=True, help="Query with positional placeholders")
    parser.add_argument(
        "--param", action="append", default=None, help="Positional parameter (repeatable)"
    )
    args = parser.parse_args(argv)

    if not args.db_url:
        logger.error("No database URL. Pass --db-url or set DATABASE_URL.")
        sys.exit(1)

    provider = create_provider(args.db_url, pool_size=1)
    provider.connect()
    try:
        rows = DatabaseHelper(provider).execute_query(args.sql, args.param)
    except provider.Error as e:
        logger.error("Query failed: %s", e)
        sys.exit(1)
    finally:
        provider.close()

    for row in rows:
        print(json.dumps(row, default=str))
    logger.info("%d rows", len(rows))


if __name__ == "__main__":
    main()
