"""Abstract pooled connection provider."""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from queue import Empty, Queue
from typing import Any, ClassVar, Iterator


class ConnectionProvider(ABC):
    """Hands out pooled DB-API connections, one per `with connection():` block.

    Thread-safe via a connection pool (Queue). The block commits on success,
    rolls back on error and always returns the connection to the pool.
    """

    #: Base exception class of the backend driver; every backend must set it.
    Error: ClassVar[type[Exception]]

    def __init__(self, pool_size: int = 4, acquire_timeout: float = 30.0):
        if not isinstance(getattr(type(self), "Error", None), type):
            raise TypeError(f"{type(self).__name__} must define its driver Error class")
        self._pool_size = pool_size
        self._acquire_timeout = acquire_timeout
        self._pool: Queue = Queue(maxsize=pool_size)

    @abstractmethod
    def _open(self) -> Any:
        """Open a new driver connection."""

    @abstractmethod
    def flush_batch(self, cursor: Any, statements: list[str]) -> Any:
        """Send queued statements to the database; returns a non-None result on success."""

    def connect(self) -> None:
        """Initialize the connection pool."""
        for _ in range(self._pool_size):
            self._pool.put(self._open())

    def close(self) -> None:
        """Close all pooled connections."""
        while not self._pool.empty():
            try:
                conn = self._pool.get_nowait()
                conn.close()
            except Empty:
                break

    def _acquire(self) -> Any:
        try:
            return self._pool.get(timeout=self._acquire_timeout)
        except Empty:
            raise self.Error(
                f"No pooled connection available after {self._acquire_timeout}s"
            ) from None

    def _release(self, conn: Any) -> None:
        self._pool.put(conn)

    def _begin(self, conn: Any) -> None:
        """Start a transaction; drivers that open one implicitly need nothing here."""

    @contextmanager
    def connection(self) -> Iterator[Any]:
        conn = self._acquire()
        try:
            self._begin(conn)
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            self._release(conn)
