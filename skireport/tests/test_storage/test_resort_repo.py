"""Tests for resort usage counters."""

import sqlite3
from pathlib import Path

import pytest

from skireport.storage import resort_repo
from skireport.storage.database import open_db


@pytest.fixture
def db(tmp_path: Path) -> sqlite3.Connection:
    conn = open_db(tmp_path / "test.db")
    yield conn
    conn.close()


class TestResortCounter:
    def test_increment_by_id(self, db: sqlite3.Connection):
        assert resort_repo.increment_resort_counter(db, "Alta", "alta ski area") == 1
        assert resort_repo.increment_resort_counter(db, "Alta", "alta") == 2
        assert resort_repo.get_resort_count(db, "Alta") == 2

    def test_unresolved_keyed_by_synonym(self, db: sqlite3.Connection):
        resort_repo.increment_resort_counter(db, None, "whistler")
        assert resort_repo.get_resort_count(db, "whistler") == 1

    def test_nothing_to_key_on(self, db: sqlite3.Connection):
        assert resort_repo.increment_resort_counter(db, None, None) is None
        assert resort_repo.get_resort_counts(db) == []

    def test_unknown_count_is_zero(self, db: sqlite3.Connection):
        assert resort_repo.get_resort_count(db, "Snowbird") == 0

    def test_counts_ordered(self, db: sqlite3.Connection):
        for resort in ["Alta", "Snowbird", "Snowbird", "Brighton", "Snowbird", "Alta"]:
            resort_repo.increment_resort_counter(db, resort, None)

        counts = resort_repo.get_resort_counts(db)
        assert [(r["resort"], r["resort_counter"]) for r in counts] == [
            ("Snowbird", 3),
            ("Alta", 2),
            ("Brighton", 1),
        ]

    def test_counts_limit(self, db: sqlite3.Connection):
        for resort in ["Alta", "Snowbird", "Brighton"]:
            resort_repo.increment_resort_counter(db, resort, None)
        assert len(resort_repo.get_resort_counts(db, limit=2)) == 2
