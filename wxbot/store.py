from __future__ import annotations

import logging
import sqlite3
import threading
from pathlib import Path

from wxbot.location import Coordinates, Location


LOGGER = logging.getLogger(__name__)


class UserLocationStore:
    """Default location per (server, user), kept in a single SQLite table."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        if str(path) != ":memory:":
            self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._conn: sqlite3.Connection | None = sqlite3.connect(str(path), check_same_thread=False)
        self._init_db()

    def _init_db(self) -> None:
        self._connection().execute(
            """
            CREATE TABLE IF NOT EXISTS user_locations (
                domain       TEXT NOT NULL,
                user         TEXT NOT NULL,
                place_name   TEXT,
                country      TEXT,
                feature_code TEXT,
                longitude    REAL NOT NULL,
                latitude     REAL NOT NULL,
                PRIMARY KEY (domain COLLATE NOCASE, user COLLATE NOCASE) ON CONFLICT REPLACE,
                CHECK ((place_name IS NULL) = (feature_code IS NULL))
            )
            """
        )
        self._connection().commit()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise sqlite3.ProgrammingError("location store is closed")
        return self._conn

    def get(self, domain: int, user: int) -> Location | None:
        with self._lock:
            row = self._connection().execute(
                """
                SELECT place_name, latitude, longitude, country, feature_code
                FROM user_locations
                WHERE domain = ? AND user = ?
                """,
                (str(domain), str(user)),
            ).fetchone()
        if row is None:
            return None
        name, latitude, longitude, country, feature_code = row
        return Location(Coordinates(float(latitude), float(longitude)), name, country, feature_code)

    def set(self, domain: int, user: int, location: Location) -> None:
        with self._lock:
            conn = self._connection()
            conn.execute(
                """
                INSERT INTO user_locations (domain, user, place_name, latitude, longitude, country, feature_code)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    str(domain),
                    str(user),
                    location.name,
                    location.coordinates.latitude,
                    location.coordinates.longitude,
                    location.country,
                    location.feature_code,
                ),
            )
            conn.commit()
        LOGGER.info("stored location %s for user %s in %s", location.display_name, user, domain)

    def unset(self, domain: int, user: int) -> bool:
        with self._lock:
            conn = self._connection()
            cursor = conn.execute(
                "DELETE FROM user_locations WHERE domain = ? AND user = ?",
                (str(domain), str(user)),
            )
            conn.commit()
        return cursor.rowcount > 0

    def close(self) -> None:
        with self._lock:
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None
