"""
Supabase Database Storage for skating result entry.

Provides PostgreSQL-based cloud storage using Supabase's REST API.
Key differences from SQLite:
- Uses the supabase-py async client (REST API)
- eq() / is_() builder calls instead of a WHERE clause
- insert() returns the stored representation, ids included
- initialize() only checks configuration; the client is created lazily
  on the first data operation

Requires: pip install supabase
Schema must be created first via scripts/supabase_schema.sql
"""

import os
from typing import Optional, List

from .base import DatabaseInterface, Row, Filters
from .exceptions import ConfigurationError, ConnectionError, QueryError


class SupabaseDatabase(DatabaseInterface):
    """
    Supabase cloud database implementation.

    Uses PostgreSQL via Supabase's REST API.
    Implements the DatabaseInterface abstract base class.
    """

    def __init__(self, url: Optional[str] = None, key: Optional[str] = None):
        """
        Create Supabase database instance.

        Falls back to environment variables:
        - SUPABASE_URL: Project URL (e.g., https://your-project.supabase.co)
        - SUPABASE_KEY: Anon or service key
        """
        self._url = url or os.environ.get('SUPABASE_URL')
        self._key = key or os.environ.get('SUPABASE_KEY')
        self._client = None
        self._initialized = False

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def initialize(self) -> None:
        """Check that the connection settings are present."""
        if self._initialized:
            return

        if not self._url:
            raise ConfigurationError(
                "SUPABASE_URL environment variable is required for Supabase backend"
            )
        if not self._key:
            raise ConfigurationError(
                "SUPABASE_KEY environment variable is required for Supabase backend"
            )

        self._initialized = True

    async def _get_client(self):
        """Get or create the async Supabase client."""
        if self._client is None:
            try:
                from supabase import acreate_client
            except ImportError:
                raise ConfigurationError(
                    "supabase package not installed. "
                    "Install with: pip install supabase"
                )

            try:
                self._client = await acreate_client(self._url, self._key)
            except Exception as e:
                raise ConnectionError(f"Failed to create Supabase client: {e}")

        return self._client

    def close(self) -> None:
        """Close database connection (no-op for Supabase REST API)."""
        # REST API doesn't maintain persistent connections
        self._client = None

    async def health_check(self) -> bool:
        """Check if the database connection is healthy."""
        try:
            client = await self._get_client()
            await client.table('Event').select('EventID').limit(1).execute()
            return True
        except Exception:
            return False

    # =========================================================================
    # DATA OPERATIONS
    # =========================================================================

    async def select(
        self,
        table: str,
        columns: str = '*',
        filters: Filters = None
    ) -> List[Row]:
        """Select rows matching all equality filters."""
        client = await self._get_client()

        query = client.table(table).select(columns or '*')
        for column, value in (filters or {}).items():
            if value is None:
                query = query.is_(column, 'null')
            else:
                query = query.eq(column, value)

        try:
            response = await query.execute()
        except Exception as e:
            raise QueryError(f"Select from {table} failed: {e}")
        return list(response.data or [])

    async def insert(self, table: str, rows: List[Row]) -> List[Row]:
        """Insert rows and return them as stored."""
        if not rows:
            return []

        client = await self._get_client()
        try:
            response = await client.table(table).insert(rows).execute()
        except Exception as e:
            raise QueryError(f"Insert into {table} failed: {e}")
        return list(response.data or [])
