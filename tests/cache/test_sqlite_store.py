from __future__ import annotations

import sqlite3
import threading
from typing import TYPE_CHECKING

import pytest

from geocode_cache.cache.sqlite_store import SqliteCacheStore
from geocode_cache.exceptions import CacheStoreError

if TYPE_CHECKING:
    from pathlib import Path


class TestSqliteCacheStore:
    def test_get_returns_none_on_miss(self, tmp_path: Path) -> None:
        store = SqliteCacheStore(tmp_path / "cache.db")
        assert store.get("geocode:missing") is None

    def test_put_and_get_round_trip(self, tmp_path: Path) -> None:
        store = SqliteCacheStore(tmp_path / "cache.db")
        store.put("geocode:Tokyo", '{"address": "Tokyo, Japan"}', ttl_seconds=300)
        assert store.get("geocode:Tokyo") == '{"address": "Tokyo, Japan"}'

    def test_expired_entry_returns_none(self, tmp_path: Path) -> None:
        clock_time = 1000.0

        def fake_clock() -> float:
            return clock_time

        store = SqliteCacheStore(tmp_path / "cache.db", clock=fake_clock)
        store.put("k", "val", ttl_seconds=60)

        # Still valid at t=1059
        clock_time = 1059.0
        assert store.get("k") == "val"

        # Expired at t=1060
        clock_time = 1060.0
        assert store.get("k") is None
        assert store.expires_at("k") is None

    def test_put_overwrites_and_resets_expiry(self, tmp_path: Path) -> None:
        clock_time = 1000.0
        store = SqliteCacheStore(tmp_path / "cache.db", clock=lambda: clock_time)
        store.put("k", "old", ttl_seconds=300)
        clock_time = 2000.0
        store.put("k", "new", ttl_seconds=300)
        assert store.get("k") == "new"
        assert store.expires_at("k") == 2300.0

    def test_keys_are_case_and_whitespace_sensitive(self, tmp_path: Path) -> None:
        store = SqliteCacheStore(tmp_path / "cache.db")
        store.put("geocode:Tokyo", "a", ttl_seconds=300)
        assert store.get("geocode:tokyo") is None
        assert store.get("geocode:Tokyo ") is None

    def test_entries_survive_new_store_instance(self, tmp_path: Path) -> None:
        db_path = tmp_path / "cache.db"
        SqliteCacheStore(db_path).put("k", "durable", ttl_seconds=300)
        assert SqliteCacheStore(db_path).get("k") == "durable"

    def test_auto_creates_parent_dirs(self, tmp_path: Path) -> None:
        db_path = tmp_path / "deep" / "nested" / "cache.db"
        store = SqliteCacheStore(db_path)
        store.put("k", "v", ttl_seconds=60)
        assert store.get("k") == "v"
        assert store.db_path == db_path

    def test_wal_mode_enabled(self, tmp_path: Path) -> None:
        store = SqliteCacheStore(tmp_path / "cache.db")
        store.put("k", "v", ttl_seconds=60)
        conn = sqlite3.connect(str(tmp_path / "cache.db"))
        try:
            assert conn.execute("PRAGMA journal_mode").fetchone()[0] == "wal"
        finally:
            conn.close()

    def test_concurrent_writes_to_same_key(self, tmp_path: Path) -> None:
        store = SqliteCacheStore(tmp_path / "cache.db")
        store.put("k", "warmup", ttl_seconds=300)
        errors: list[Exception] = []

        def write(i: int) -> None:
            try:
                store.put("k", f"v{i}", ttl_seconds=300)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=write, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert store.get("k") in {f"v{i}" for i in range(8)}

    def test_sqlite_error_is_wrapped(self, tmp_path: Path) -> None:
        store = SqliteCacheStore(tmp_path / "cache.db")
        store.put("k", "v", ttl_seconds=60)
        conn = sqlite3.connect(str(tmp_path / "cache.db"))
        conn.execute("DROP TABLE geocode_cache")
        conn.commit()
        conn.close()
        with pytest.raises(CacheStoreError, match="Failed to read cache entry"):
            store.get("k")

    def test_expires_at_error_is_wrapped(self, tmp_path: Path) -> None:
        store = SqliteCacheStore(tmp_path / "cache.db")
        store.put("k", "v", ttl_seconds=60)
        conn = sqlite3.connect(str(tmp_path / "cache.db"))
        conn.execute("DROP TABLE geocode_cache")
        conn.commit()
        conn.close()
        with pytest.raises(CacheStoreError, match="Failed to read expiry"):
            store.expires_at("k")
