"""
SQLite store for the five campus record collections.

Creates data/campus.db (relative to project root) unless another path is given.
Tables: schedules, facilities, dining, library, admin. Rows are looked up by
case-insensitive substring over a fixed set of columns per table.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Any

from campus_assistant.core.errors import StoreUnavailableError
from campus_assistant.core.seed import SEED_ROWS

logger = logging.getLogger(__name__)

# Collection name -> columns (besides id), in table order
COLUMNS: dict[str, tuple[str, ...]] = {
    "schedules": ("title", "location", "start", "end", "details"),
    "facilities": ("name", "type", "location", "hours", "details"),
    "dining": ("name", "cuisine", "hours", "location", "details"),
    "library": ("title", "author", "call_number", "status"),
    "admin": ("office", "contact", "hours", "details"),
}

# Columns matched by find(); a row hits if any of them contains the pattern
SEARCH_FIELDS: dict[str, tuple[str, ...]] = {
    "schedules": ("title", "details", "location"),
    "facilities": ("name", "type", "details"),
    "dining": ("name", "cuisine", "details"),
    "library": ("title", "author", "call_number"),
    "admin": ("office", "contact", "details"),
}

COLLECTIONS: tuple[str, ...] = tuple(COLUMNS)


def _check_collection(collection: str) -> None:
    if collection not in COLUMNS:
        raise ValueError(f"Unknown collection: {collection!r}")


def _is_wildcard(pattern: str) -> bool:
    """Empty pattern, or one made only of '%', matches every row."""
    return not pattern.replace("%", "")


class CampusStore:
    """Campus record tables in one SQLite file. Holds only the path; each call opens its own connection."""

    def __init__(self, db_path: Path | str) -> None:
        self.db_path = Path(db_path)

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def init(self, seed: bool = True) -> None:
        """
        Create the tables if they do not exist and, when seed is set and every
        table is empty, load the sample rows. Raises StoreUnavailableError if
        the database cannot be opened or written.
        """
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = self._get_conn()
            try:
                for collection, columns in COLUMNS.items():
                    column_defs = ", ".join(f'"{col}" TEXT' for col in columns)
                    conn.execute(
                        f"CREATE TABLE IF NOT EXISTS {collection} (id INTEGER PRIMARY KEY, {column_defs})"
                    )
                conn.commit()
            finally:
                conn.close()
            if seed and self.is_empty():
                self.load_seed()
        except (sqlite3.Error, OSError) as e:
            logger.error("[campus_db:init] cannot open store at %s: %s", self.db_path, e)
            raise StoreUnavailableError(f"Campus store unavailable at {self.db_path}: {e}") from e
        logger.info("[campus_db:init] store ready path=%s", self.db_path)

    def find(self, collection: str, pattern: str) -> list[dict[str, Any]]:
        """
        Return rows of one collection whose search fields contain pattern
        (case-insensitive LIKE), ordered by id.
        """
        _check_collection(collection)
        pattern = pattern or ""
        sql = f"SELECT * FROM {collection}"
        params: tuple[str, ...] = ()
        if not _is_wildcard(pattern):
            fields = SEARCH_FIELDS[collection]
            sql += " WHERE " + " OR ".join(f'"{f}" LIKE ?' for f in fields)
            params = (f"%{pattern}%",) * len(fields)
        sql += " ORDER BY id ASC"
        conn = self._get_conn()
        try:
            rows = [dict(row) for row in conn.execute(sql, params).fetchall()]
        finally:
            conn.close()
        logger.debug("[campus_db:find] collection=%s pattern=%r rows=%d", collection, pattern, len(rows))
        return rows

    def insert(self, collection: str, values: dict[str, Any]) -> int:
        """Insert one row and return its generated id. Keys outside the table's columns are ignored."""
        _check_collection(collection)
        columns = COLUMNS[collection]
        column_list = ", ".join(f'"{col}"' for col in columns)
        placeholders = ", ".join("?" for _ in columns)
        conn = self._get_conn()
        try:
            cur = conn.execute(
                f"INSERT INTO {collection} ({column_list}) VALUES ({placeholders})",
                tuple(values.get(col) for col in columns),
            )
            conn.commit()
            new_id = int(cur.lastrowid)
        finally:
            conn.close()
        logger.info("[campus_db] inserted collection=%s id=%d", collection, new_id)
        return new_id

    def insert_facility(
        self,
        name: str,
        type: str | None = None,
        location: str | None = None,
        hours: str | None = None,
        details: str | None = None,
    ) -> int:
        """Admin write path: add one facility, return its id."""
        return self.insert(
            "facilities",
            {"name": name, "type": type, "location": location, "hours": hours, "details": details},
        )

    def count(self, collection: str) -> int:
        _check_collection(collection)
        conn = self._get_conn()
        try:
            return int(conn.execute(f"SELECT COUNT(*) FROM {collection}").fetchone()[0])
        finally:
            conn.close()

    def is_empty(self) -> bool:
        return all(self.count(c) == 0 for c in COLLECTIONS)

    def load_seed(self) -> int:
        """Insert the sample rows. Returns the number of rows added."""
        added = 0
        for collection, rows in SEED_ROWS.items():
            for row in rows:
                self.insert(collection, row)
                added += 1
        logger.info("[campus_db] seeded %d rows", added)
        return added

    def clear_all(self) -> None:
        """Delete all rows from every collection."""
        conn = self._get_conn()
        try:
            for collection in COLLECTIONS:
                conn.execute(f"DELETE FROM {collection}")
            conn.commit()
        finally:
            conn.close()
        logger.info("[campus_db] cleared all collections")

    def ping(self) -> bool:
        """True if the database answers a trivial query."""
        try:
            conn = self._get_conn()
            try:
                conn.execute("SELECT 1").fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.warning("[campus_db:ping] failed: %s", e)
            return False
        return True
