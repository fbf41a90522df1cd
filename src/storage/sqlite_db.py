"""
SQLite Database Storage for skating result entry.

Provides local storage of skaters, events, point values and results with:
- Atomic transactions for data safety
- Store-assigned integer ids (AUTOINCREMENT)
- Table and column names checked against the known schema
- Blocking sqlite3 calls moved off the event loop with asyncio.to_thread

This is the SQLite implementation of the DatabaseInterface.
"""

import asyncio
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Iterator, List, Any, Tuple

from .base import DatabaseInterface, TABLES, Row, Filters, parse_columns
from .exceptions import ConnectionError, QueryError, SchemaError


SCHEMA = '''
    CREATE TABLE IF NOT EXISTS "Skater" (
        "SkaterID" INTEGER PRIMARY KEY AUTOINCREMENT,
        "FirstName" TEXT NOT NULL,
        "LastName" TEXT NOT NULL
    );

    CREATE TABLE IF NOT EXISTS "Event" (
        "EventID" INTEGER PRIMARY KEY AUTOINCREMENT,
        "EventName" TEXT NOT NULL,
        "IsChamp" BOOLEAN NOT NULL DEFAULT 0,
        "CompID" INTEGER NOT NULL
    );

    CREATE TABLE IF NOT EXISTS "PointValues" (
        "GroupSize" INTEGER NOT NULL,
        "Placement" INTEGER NOT NULL,
        "Points" INTEGER NOT NULL,
        PRIMARY KEY ("GroupSize", "Placement")
    );

    -- EventID and SkaterID are nullable: a result may reference
    -- a skater the lookup could not resolve
    CREATE TABLE IF NOT EXISTS "Result" (
        "ResultID" INTEGER PRIMARY KEY AUTOINCREMENT,
        "EventID" INTEGER REFERENCES "Event"("EventID"),
        "SkaterID" INTEGER REFERENCES "Skater"("SkaterID"),
        "Points" INTEGER NOT NULL DEFAULT 0,
        "Group" TEXT
    );

    CREATE INDEX IF NOT EXISTS idx_event_name_comp ON "Event"("EventName", "CompID");
    CREATE INDEX IF NOT EXISTS idx_skater_name ON "Skater"("FirstName", "LastName");
    CREATE INDEX IF NOT EXISTS idx_result_event ON "Result"("EventID");
'''


def _quote(identifier: str) -> str:
    return f'"{identifier}"'


class SQLiteDatabase(DatabaseInterface):
    """
    SQLite database for result-entry storage.

    One shared connection guarded by a lock; every data operation runs
    in a worker thread so the event loop is never blocked.

    Implements the DatabaseInterface abstract base class.
    """

    SCHEMA_VERSION = 1

    def __init__(self, db_path: str = "data/results.db"):
        """
        Create SQLite database instance.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = Path(db_path)
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()
        self._initialized = False

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def initialize(self) -> None:
        """Initialize the database connection and schema."""
        if self._initialized:
            return

        # Ensure parent directory exists
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with self.transaction() as conn:
                conn.executescript(SCHEMA)
                conn.execute(f'PRAGMA user_version = {self.SCHEMA_VERSION}')
        except sqlite3.Error as e:
            raise SchemaError(f"Failed to initialize schema: {e}")

        self._initialized = True

    def close(self) -> None:
        """Close database connections and clean up resources."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    async def health_check(self) -> bool:
        """Check if the database connection is healthy."""
        def _ping() -> bool:
            with self._lock:
                self._get_connection().execute("SELECT 1")
            return True

        try:
            return await asyncio.to_thread(_ping)
        except Exception:
            return False

    # =========================================================================
    # CONNECTION MANAGEMENT
    # =========================================================================

    def _get_connection(self) -> sqlite3.Connection:
        """Get the shared database connection."""
        if self._conn is None:
            try:
                self._conn = sqlite3.connect(
                    str(self.db_path),
                    check_same_thread=False,
                    timeout=30.0
                )
            except sqlite3.Error as e:
                raise ConnectionError(f"Failed to open {self.db_path}: {e}")
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA journal_mode=WAL")
            self._conn.execute("PRAGMA foreign_keys=ON")
        return self._conn

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Context manager for database transactions."""
        conn = self._get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    # =========================================================================
    # QUERY BUILDING
    # =========================================================================

    @staticmethod
    def _check_columns(table: str, columns: List[str]) -> None:
        """Reject tables or columns outside the known schema."""
        if table not in TABLES:
            raise SchemaError(f"Unknown table: {table}")
        unknown = [c for c in columns if c not in TABLES[table]]
        if unknown:
            raise SchemaError(f"Unknown column(s) for {table}: {', '.join(unknown)}")

    def _build_select(
        self,
        table: str,
        columns: str,
        filters: Filters
    ) -> Tuple[str, List[Any]]:
        names = parse_columns(columns)
        filters = filters or {}
        self._check_columns(table, names + list(filters))

        column_sql = ', '.join(_quote(c) for c in names) if names else '*'
        query = f'SELECT {column_sql} FROM {_quote(table)} WHERE 1=1'
        params: List[Any] = []

        for column, value in filters.items():
            if value is None:
                query += f' AND {_quote(column)} IS NULL'
            else:
                query += f' AND {_quote(column)} = ?'
                params.append(value)

        return query, params

    # =========================================================================
    # DATA OPERATIONS
    # =========================================================================

    def _select_sync(self, table: str, columns: str, filters: Filters) -> List[Row]:
        query, params = self._build_select(table, columns, filters)
        try:
            with self._lock:
                rows = self._get_connection().execute(query, params).fetchall()
        except sqlite3.Error as e:
            raise QueryError(f"Select from {table} failed: {e}")
        return [dict(row) for row in rows]

    def _insert_sync(self, table: str, rows: List[Row]) -> List[Row]:
        inserted = []
        try:
            with self._lock, self.transaction() as conn:
                for row in rows:
                    self._check_columns(table, list(row))
                    names = list(row)
                    query = 'INSERT INTO {} ({}) VALUES ({})'.format(
                        _quote(table),
                        ', '.join(_quote(c) for c in names),
                        ', '.join('?' for _ in names)
                    )
                    cursor = conn.execute(query, [row[c] for c in names])
                    stored = conn.execute(
                        f'SELECT * FROM {_quote(table)} WHERE rowid = ?',
                        (cursor.lastrowid,)
                    ).fetchone()
                    inserted.append(dict(stored))
        except sqlite3.Error as e:
            raise QueryError(f"Insert into {table} failed: {e}")
        return inserted

    async def select(
        self,
        table: str,
        columns: str = '*',
        filters: Filters = None
    ) -> List[Row]:
        """Select rows matching all equality filters."""
        return await asyncio.to_thread(self._select_sync, table, columns, filters)

    async def insert(self, table: str, rows: List[Row]) -> List[Row]:
        """Insert rows in one transaction and return them as stored."""
        if not rows:
            return []
        return await asyncio.to_thread(self._insert_sync, table, rows)
