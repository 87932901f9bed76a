"""SQLite implementation of ConnectionProvider."""

import sqlite3
from typing import Any

from dbhelper.provider import ConnectionProvider


class SQLiteConnectionProvider(ConnectionProvider):
    """SQLite backend using stdlib sqlite3."""

    Error = sqlite3.Error

    def __init__(self, db_path: str, pool_size: int = 4, acquire_timeout: float = 30.0):
        # Each :memory: connection is its own database.
        if db_path == ":memory:":
            pool_size = 1
        super().__init__(pool_size, acquire_timeout)
        self._db_path = db_path

    def _open(self) -> sqlite3.Connection:
        # Transactions are issued explicitly by _begin so DDL is covered too.
        conn = sqlite3.connect(self._db_path, check_same_thread=False, isolation_level=None)
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA foreign_keys=ON")
        return conn

    def _begin(self, conn: sqlite3.Connection) -> None:
        conn.execute("BEGIN")

    def flush_batch(self, cursor: Any, statements: list[str]) -> list[int]:
        counts = []
        for sql in statements:
            cursor.execute(sql)
            counts.append(cursor.rowcount)
        return counts
