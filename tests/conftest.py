"""Shared test fixtures."""

import pytest

from dbhelper import DatabaseHelper, SQLiteConnectionProvider, create_provider


class RecordingProvider(SQLiteConnectionProvider):
    """SQLite provider that records acquisitions and flushed batches."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.acquired = 0
        self.flushes: list[list[str]] = []

    def _acquire(self):
        self.acquired += 1
        return super()._acquire()

    def flush_batch(self, cursor, statements):
        self.flushes.append(list(statements))
        return super().flush_batch(cursor, statements)


@pytest.fixture
def provider(tmp_path):
    """Provide a fresh SQLite ConnectionProvider for each test."""
    db_path = tmp_path / "test.db"
    provider = create_provider(f"sqlite:///{db_path}")
    provider.connect()
    yield provider
    provider.close()


@pytest.fixture
def helper(provider):
    return DatabaseHelper(provider)


@pytest.fixture
def recording_provider(tmp_path):
    provider = RecordingProvider(str(tmp_path / "recorded.db"), pool_size=2)
    provider.connect()
    yield provider
    provider.close()


@pytest.fixture
def payments(helper):
    """A small payment_files table with three rows."""
    helper.execute_update(
        "CREATE TABLE payment_files (id INTEGER PRIMARY KEY, file_name TEXT, "
        "amount REAL, status TEXT, sent_on DATE)"
    )
    helper.execute_batch(
        [
            "INSERT INTO payment_files VALUES (1, 'pay_001.txt', 1500.5, 'PENDING', '2024-03-01')",
            "INSERT INTO payment_files VALUES (2, 'pay_002.txt', 200, 'SENT', '2024-03-02')",
            "INSERT INTO payment_files VALUES (3, 'pay_003.txt', 75.25, 'PENDING', NULL)",
        ],
        batch_size=10,
    )
    return helper
