from __future__ import annotations

import logging
import sqlite3
import threading
import time
from contextlib import contextmanager
from queue import Empty, Full, Queue
from typing import TYPE_CHECKING

from geocode_cache.exceptions import CacheStoreError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

logger = logging.getLogger(__name__)


class SqliteConnectionPool:
    """Thread-safe connection pool for SQLite."""

    def __init__(self, db_path: Path, max_connections: int = 5) -> None:
        self._db_path = db_path
        self._pool: Queue[sqlite3.Connection] = Queue(maxsize=max_connections)
        self._schema_lock = threading.Lock()
        self._schema_initialized = False

    def _ensure_initialized(self, conn: sqlite3.Connection) -> None:
        if self._schema_initialized:
            return
        with self._schema_lock:
            if self._schema_initialized:
                return
            conn.execute(
                "CREATE TABLE IF NOT EXISTS geocode_cache ("
                "  key TEXT PRIMARY KEY,"
                "  value TEXT NOT NULL,"
                "  expires_at REAL NOT NULL"
                ")"
            )
            conn.commit()
            self._schema_initialized = True

    def _create_connection(self) -> sqlite3.Connection:
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
        conn.execute("PRAGMA busy_timeout=5000")
        conn.execute("PRAGMA journal_mode=WAL")
        self._ensure_initialized(conn)
        return conn

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Acquire a connection from the pool, returning it when done."""
        try:
            conn = self._pool.get_nowait()
        except Empty:
            conn = self._create_connection()

        try:
            yield conn
        finally:
            try:
                self._pool.put_nowait(conn)
            except Full:
                conn.close()


class SqliteCacheStore:
    """Durable ``CacheStore`` backed by a single SQLite table.

    Expiry is lazy: an entry past its ``expires_at`` is deleted the next time
    it is read and reported as absent.
    """

    def __init__(self, db_path: Path, clock: Callable[[], float] = time.time) -> None:
        self._db_path = db_path
        self._clock = clock
        self._pool = SqliteConnectionPool(db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def get(self, key: str) -> str | None:
        try:
            with self._pool.connection() as conn:
                row = conn.execute(
                    "SELECT value, expires_at FROM geocode_cache WHERE key = ?",
                    (key,),
                ).fetchone()
                if row is None:
                    return None
                value, expires_at = row
                if self._clock() >= expires_at:
                    logger.debug("Cache entry %r expired", key)
                    conn.execute("DELETE FROM geocode_cache WHERE key = ?", (key,))
                    conn.commit()
                    return None
                return value
        except sqlite3.Error as e:
            raise CacheStoreError(f"Failed to read cache entry {key!r}: {e}") from e

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            with self._pool.connection() as conn:
                expires_at = self._clock() + ttl_seconds
                conn.execute(
                    "INSERT OR REPLACE INTO geocode_cache (key, value, expires_at) VALUES (?, ?, ?)",
                    (key, value, expires_at),
                )
                conn.commit()
        except sqlite3.Error as e:
            raise CacheStoreError(f"Failed to write cache entry {key!r}: {e}") from e

    def expires_at(self, key: str) -> float | None:
        """Return the stored expiry timestamp for *key*, or None if absent."""
        try:
            with self._pool.connection() as conn:
                row = conn.execute("SELECT expires_at FROM geocode_cache WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            raise CacheStoreError(f"Failed to read expiry for {key!r}: {e}") from e
        return None if row is None else row[0]
