"""CLI entry point for running a SQL file as one transactional batch.

Usage:
    python -m scripts.run_batch --db-url sqlite:///data.db --file statements.sql [--batch-size 100]
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dbhelper import DEFAULT_BATCH_SIZE, DatabaseHelper, create_provider

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def split_statements(text: str) -> list[str]:
    """Split a SQL script on ';' into non-empty statements."""
    return [s.strip() for s in text.split(";") if s.strip()]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run SQL statements as one batch")
    parser.add_argument(
        "--db-url",
        default=os.environ.get("DATABASE_URL"),
        help="Database URL (sqlite:/// or postgresql://), defaults to $DATABASE_URL",
    )
    parser.add_argument("--file", required=True, help="Path to a ';'-separated SQL file")
    parser.add_argument(
        "--batch-size", type=int, default=DEFAULT_BATCH_SIZE, help="Statements per flush"
    )
    args = parser.parse_args(argv)

    if not args.db_url:
        logger.error("No database URL. Pass --db-url or set DATABASE_URL.")
        sys.exit(1)

    statements = split_statements(Path(args.file).read_text(encoding="utf-8"))
    if not statements:
        logger.error("No statements found in %s", args.file)
        sys.exit(1)

    provider = create_provider(args.db_url)
    provider.connect()
    try:
        ok = DatabaseHelper(provider).execute_batch(statements, args.batch_size)
    finally:
        provider.close()

    if not ok:
        logger.error("Batch failed; no statements from %s were applied.", args.file)
        sys.exit(1)
    logger.info("Done. %d statements applied.", len(statements))


if __name__ == "__main__":
    main()
