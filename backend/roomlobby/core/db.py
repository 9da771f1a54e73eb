"""SQLite connection helpers for lobby persistence."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager

DEFAULT_BUSY_TIMEOUT_SECONDS = 5.0


class StorageError(Exception):
    """Raised when the database fails in a way no room rule accounts for."""


def create_sqlite_connection(
    path: str,
    timeout: float = DEFAULT_BUSY_TIMEOUT_SECONDS,
) -> sqlite3.Connection:
    """Create a SQLite connection with foreign key enforcement enabled.

    The connection runs in autocommit mode; writers open transactions
    explicitly through ``Database.transaction``.
    """
    conn = sqlite3.connect(path, timeout=timeout, isolation_level=None, check_same_thread=False)
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


class Database:
    """Storage client handed to every room operation.

    Holds no open connection itself: each ``connect``/``transaction`` scope
    opens one connection and always closes it on exit.
    """

    def __init__(self, path: str, busy_timeout_seconds: float = DEFAULT_BUSY_TIMEOUT_SECONDS) -> None:
        self.path = path
        self.busy_timeout_seconds = busy_timeout_seconds

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Yield a plain autocommit connection for read-only work.

        Any sqlite3 error escaping the block, constraint failures included,
        surfaces as StorageError; expected constraint hits are translated to
        domain errors before they get here.
        """
        try:
            conn = create_sqlite_connection(self.path, timeout=self.busy_timeout_seconds)
        except sqlite3.Error as exc:
            raise StorageError(f"cannot open database {self.path!r}") from exc
        try:
            yield conn
        except sqlite3.Error as exc:
            raise StorageError(str(exc)) from exc
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection holding the database write lock.

        ``BEGIN IMMEDIATE`` takes the write lock before the first read, so
        check-then-write sequences inside the block cannot interleave with
        another writer. Commits on success and rolls back on any exception.
        """
        with self.connect() as conn:
            conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn
                conn.commit()
            except BaseException:
                conn.rollback()
                raise
