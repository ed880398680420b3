"""Initial schema: resort usage tracking."""

import sqlite3

DDL = [
    # One row per resort id, or per spoken value when unresolved
    """
    CREATE TABLE IF NOT EXISTS resort_tracking (
        resort TEXT PRIMARY KEY,
        resort_counter INTEGER NOT NULL DEFAULT 0,
        first_seen_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
        last_seen_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
    (
        "CREATE INDEX IF NOT EXISTS idx_resort_tracking_counter "
        "ON resort_tracking(resort_counter)"
    ),
]


def up(conn: sqlite3.Connection) -> None:
    for stmt in DDL:
        conn.execute(stmt)
    conn.commit()
