"""Repository for per-resort usage counters."""

import sqlite3


def increment_resort_counter(
    conn: sqlite3.Connection, resort_id: str | None, synonym_value: str | None
) -> int | None:
    """Add one to the counter for a resort. Returns the new count.

    Keyed by the resolved id when there is one, else by the spoken value.
    Returns None when there is nothing to key on.
    """
    resort = resort_id or synonym_value
    if not resort:
        return None
    conn.execute(
        "INSERT INTO resort_tracking (resort, resort_counter) VALUES (?, 1) "
        "ON CONFLICT(resort) DO UPDATE SET "
        "resort_counter = resort_counter + 1, last_seen_at = CURRENT_TIMESTAMP",
        (resort,),
    )
    conn.commit()
    return get_resort_count(conn, resort)


def get_resort_count(conn: sqlite3.Connection, resort: str) -> int:
    row = conn.execute(
        "SELECT resort_counter FROM resort_tracking WHERE resort = ?", (resort,)
    ).fetchone()
    if row is None:
        return 0
    return row[0]


def get_resort_counts(conn: sqlite3.Connection, limit: int = 50) -> list[dict]:
    """Most requested resorts first."""
    rows = conn.execute(
        "SELECT resort, resort_counter, last_seen_at FROM resort_tracking "
        "ORDER BY resort_counter DESC, resort ASC LIMIT ?",
        (limit,),
    ).fetchall()
    return [dict(r) for r in rows]
