"""Schema bootstrap for room tables."""

from __future__ import annotations

from roomlobby.core.db import Database


CREATE_ROOMS_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS rooms (
    id INTEGER PRIMARY KEY,
    join_code TEXT NOT NULL UNIQUE,
    mode INTEGER NOT NULL CHECK (mode BETWEEN 2 AND 16),
    status TEXT NOT NULL DEFAULT 'waiting'
        CHECK (status IN ('waiting', 'playing', 'finished')),
    host_user_id TEXT NOT NULL,
    created_at TEXT NOT NULL,
    started_at TEXT NULL
);

CREATE TABLE IF NOT EXISTS players (
    id INTEGER PRIMARY KEY,
    room_id INTEGER NOT NULL,
    user_id TEXT NOT NULL,
    username TEXT NOT NULL,
    is_host INTEGER NOT NULL DEFAULT 0,
    ready INTEGER NOT NULL DEFAULT 0,
    team TEXT NULL,
    bet INTEGER NULL,
    joined_at TEXT NOT NULL,
    UNIQUE (room_id, user_id),
    FOREIGN KEY (room_id) REFERENCES rooms(id) ON DELETE CASCADE
);

CREATE UNIQUE INDEX IF NOT EXISTS idx_players_one_host_per_room
    ON players(room_id) WHERE is_host = 1;

CREATE TABLE IF NOT EXISTS game_states (
    id INTEGER PRIMARY KEY,
    room_id INTEGER NOT NULL,
    generation INTEGER NOT NULL,
    state_data TEXT NOT NULL,
    winner TEXT NULL,
    created_at TEXT NOT NULL,
    UNIQUE (room_id, generation),
    FOREIGN KEY (room_id) REFERENCES rooms(id) ON DELETE CASCADE
);
"""


def init_rooms_schema(database: Database) -> None:
    """Ensure room tables/indexes exist and switch the file to WAL journaling."""
    with database.connect() as conn:
        conn.execute("PRAGMA journal_mode=WAL")
        conn.executescript(CREATE_ROOMS_SCHEMA_SQL)
