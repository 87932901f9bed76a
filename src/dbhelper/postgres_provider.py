"""PostgreSQL implementation of ConnectionProvider."""

import logging
from typing import Any

import psycopg2

from dbhelper.provider import ConnectionProvider

logger = logging.getLogger(__name__)


class PostgresConnectionProvider(ConnectionProvider):
    """PostgreSQL backend using psycopg2.

    Connections run with autocommit off; a connection found closed when it
    comes back to the pool is replaced with a fresh one.
    """

    Error = psycopg2.Error

    def __init__(self, dsn: str, pool_size: int = 4, acquire_timeout: float = 30.0):
        super().__init__(pool_size, acquire_timeout)
        self._dsn = dsn

    def _open(self):
        conn = psycopg2.connect(self._dsn)
        conn.autocommit = False
        return conn

    def _release(self, conn) -> None:
        if conn.closed:
            try:
                conn = self._open()
            except psycopg2.Error as e:
                logger.warning("Dropping broken pooled connection, reconnect failed: %s", e)
                return
        super()._release(conn)

    def flush_batch(self, cursor: Any, statements: list[str]) -> list[int]:
        # One round trip for the whole batch.
        cursor.execute(";\n".join(statements))
        return [cursor.rowcount]
