"""DatabaseHelper: parameterized queries, updates and transactional batches."""

import logging
from contextlib import closing
from typing import Any

from dbhelper.provider import ConnectionProvider
from dbhelper.types import Params, Row, Statements

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 100


class DatabaseHelper:
    """Thin facade over a pooled ConnectionProvider.

    Every call acquires its own connection and returns it before exiting.
    get_string, exists, execute_update and execute_batch log database errors
    and return a sentinel (None / False / 0); execute_query lets them
    propagate.
    """

    def __init__(self, provider: ConnectionProvider):
        self._provider = provider

    @staticmethod
    def _bind_parameters(cursor: Any, query: str, params: Params | None) -> None:
        # Positional: params[i] binds placeholder i + 1.
        if params is None:
            cursor.execute(query)
        else:
            cursor.execute(query, tuple(params))

    def get_string(self, query: str, params: Params | None = None) -> str | None:
        """Return the first column of the first row as a string, or None."""
        try:
            with self._provider.connection() as conn, closing(conn.cursor()) as cur:
                self._bind_parameters(cur, query, params)
                row = cur.fetchone()
        except self._provider.Error as e:
            logger.error("Error fetching string from query: %s (%s)", query, e)
            return None

        if row is None or row[0] is None:
            return None
        return str(row[0])

    def exists(self, query: str, params: Params | None = None) -> bool:
        """Return True if the query yields at least one row."""
        try:
            with self._provider.connection() as conn, closing(conn.cursor()) as cur:
                self._bind_parameters(cur, query, params)
                return cur.fetchone() is not None
        except self._provider.Error as e:
            logger.error("Error checking existence with query: %s (%s)", query, e)
            return False

    def execute_query(self, query: str, params: Params | None = None) -> list[Row]:
        """Execute a query and return each row as a dict keyed by column label.

        Database errors are raised to the caller.
        """
        with self._provider.connection() as conn, closing(conn.cursor()) as cur:
            self._bind_parameters(cur, query, params)
            if cur.description is None:
                return []
            labels = [desc[0] for desc in cur.description]
            return [dict(zip(labels, row)) for row in cur.fetchall()]

    def execute_update(self, query: str, params: Params | None = None) -> int:
        """Execute an INSERT, UPDATE, DELETE or DDL statement.

        Returns the number of affected rows; 0 when the driver reports none
        or the statement failed.
        """
        try:
            with self._provider.connection() as conn, closing(conn.cursor()) as cur:
                self._bind_parameters(cur, query, params)
                return max(cur.rowcount, 0)
        except self._provider.Error as e:
            logger.error("Error executing update query: %s (%s)", query, e)
            return 0

    def execute_batch(self, statements: Statements, batch_size: int = DEFAULT_BATCH_SIZE) -> int:
        """Run statements in one transaction, flushing every batch_size statements.

        Returns 1 if the batch committed after at least one successful flush,
        0 otherwise. Any database error rolls the whole batch back.
        """
        if not statements:
            raise ValueError("execute_batch(): None or empty statements")
        if batch_size < 1:
            raise ValueError(f"execute_batch(): batch_size must be positive, got {batch_size}")

        result = 0
        flushes = 0
        pending: list[str] = []
        try:
            with self._provider.connection() as conn, closing(conn.cursor()) as cur:
                for sql in statements:
                    pending.append(sql)
                    if len(pending) == batch_size:
                        if self._provider.flush_batch(cur, pending) is not None:
                            result = 1
                        flushes += 1
                        pending = []

                if pending:
                    if self._provider.flush_batch(cur, pending) is not None:
                        result = 1
                    flushes += 1
        except self._provider.Error as e:
            # Nothing pending: acquire or commit failed, so name the whole batch.
            logger.error(
                "Error executing batch of %d statements at: %s (%s)",
                len(statements),
                "; ".join(pending or statements),
                e,
            )
            return 0

        logger.info("Executed batch: %d statements in %d flushes", len(statements), flushes)
        return result
