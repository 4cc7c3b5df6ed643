"""
history/logic/history_repository.py
===================================

SQLite storage for history events.

One connection per repository, shared across threads behind a lock
(the orders search posts its history entry from the UI thread, but the
repository does not rely on that).
"""
from __future__ import annotations

import json
import logging
import sqlite3
import threading
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from core.helpers import date_time_helper as dt
from history.models.history_event import HistoryEvent

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS history (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    type TEXT NOT NULL,
    message TEXT NOT NULL,
    at TEXT NOT NULL,
    user TEXT,
    meta TEXT
)
"""


class HistoryRepository:
    def __init__(self, db_path: Path | str) -> None:
        self.db_path = db_path if db_path == ":memory:" else Path(db_path)
        self._lock = threading.Lock()
        self._conn: sqlite3.Connection | None = None
        self._ensure_db()

    # ------------------------------------------------------------------ #
    #  Connection management                                             #
    # ------------------------------------------------------------------ #
    def _get_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            if isinstance(self.db_path, Path):
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def _ensure_db(self) -> None:
        with self._lock:
            conn = self._get_connection()
            conn.execute(_SCHEMA)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_history_at ON history(at)")
            conn.commit()

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    # ------------------------------------------------------------------ #
    #  Öffentliche API                                                   #
    # ------------------------------------------------------------------ #
    def insert(self, event: HistoryEvent) -> HistoryEvent:
        with self._lock:
            conn = self._get_connection()
            cur = conn.execute(
                "INSERT INTO history (type, message, at, user, meta) VALUES (?, ?, ?, ?, ?)",
                (
                    event.type,
                    event.message,
                    dt.to_utc(event.at).isoformat(),
                    event.user,
                    json.dumps(event.meta, ensure_ascii=False, default=str) if event.meta else None,
                ),
            )
            conn.commit()
            event.id = cur.lastrowid
        return event

    def query(
        self,
        *,
        event_type: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[HistoryEvent]:
        """Newest first; all filters optional."""
        query = "SELECT * FROM history WHERE 1=1"
        params: list[object] = []
        if event_type:
            query += " AND type = ?"
            params.append(event_type)
        if start is not None:
            query += " AND at >= ?"
            params.append(dt.to_utc(start).isoformat())
        if end is not None:
            query += " AND at <= ?"
            params.append(dt.to_utc(end).isoformat())
        query += " ORDER BY at DESC, id DESC"
        if limit is not None:
            query += " LIMIT ?"
            params.append(int(limit))

        with self._lock:
            rows = self._get_connection().execute(query, params).fetchall()
        return [HistoryEvent.from_row(row) for row in rows]

    def distinct_types(self) -> List[str]:
        with self._lock:
            rows = self._get_connection().execute(
                "SELECT DISTINCT type FROM history ORDER BY type"
            ).fetchall()
        return [r[0] for r in rows]

    def count(self) -> int:
        with self._lock:
            return int(self._get_connection().execute("SELECT COUNT(*) FROM history").fetchone()[0])

    def clear(self) -> None:
        with self._lock:
            conn = self._get_connection()
            conn.execute("DELETE FROM history")
            conn.commit()

    def trim(self, max_events: int) -> int:
        """Keep only the newest *max_events*; returns number of deleted rows."""
        with self._lock:
            conn = self._get_connection()
            cur = conn.execute(
                """
                DELETE FROM history WHERE id NOT IN (
                    SELECT id FROM history ORDER BY at DESC, id DESC LIMIT ?
                )
                """,
                (max(0, int(max_events)),),
            )
            conn.commit()
            deleted = cur.rowcount
        if deleted:
            logger.debug("Trimmed %d history events", deleted)
        return deleted
