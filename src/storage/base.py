"""
Abstract base class defining the database interface.

All database implementations must inherit from this class and implement
all abstract methods. This ensures consistent behavior across backends.

The interface is a generic tabular data service: rows are plain dicts keyed
by the stored column names, filters are exact-equality matches.
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any, Tuple

from .exceptions import NotFoundError, QueryError


# Known tables and their columns, in storage order.
# The first column of each table is its store-assigned id (if any).
TABLES: Dict[str, Tuple[str, ...]] = {
    'Skater': ('SkaterID', 'FirstName', 'LastName'),
    'Event': ('EventID', 'EventName', 'IsChamp', 'CompID'),
    'PointValues': ('GroupSize', 'Placement', 'Points'),
    'Result': ('ResultID', 'EventID', 'SkaterID', 'Points', 'Group'),
}

Row = Dict[str, Any]
Filters = Optional[Dict[str, Any]]


def parse_columns(columns: str) -> List[str]:
    """
    Split a select column list ("SkaterID, FirstName") into names.

    '*' (or an empty string) means every column.
    """
    columns = (columns or '*').strip()
    if columns == '*':
        return []
    return [c.strip() for c in columns.split(',') if c.strip()]


class DatabaseInterface(ABC):
    """
    Abstract interface for result-entry storage.

    Lifecycle methods are synchronous. Data operations are coroutines;
    each one is a single round trip to the backing store.
    """

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    @abstractmethod
    def initialize(self) -> None:
        """
        Initialize the database connection and schema.

        Called once when the database is first created.
        Should be idempotent (safe to call multiple times).
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """
        Close database connections and clean up resources.

        Should be called when the application shuts down.
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the database connection is healthy.

        Returns:
            True if database is accessible, False otherwise
        """
        pass

    # =========================================================================
    # DATA OPERATIONS
    # =========================================================================

    @abstractmethod
    async def select(
        self,
        table: str,
        columns: str = '*',
        filters: Filters = None
    ) -> List[Row]:
        """
        Select rows from a table.

        Args:
            table: Table name (e.g. 'Skater')
            columns: Comma-separated column list, or '*'
            filters: Column -> value equality filters; None matches NULL

        Returns:
            Matching rows (possibly empty)

        Raises:
            QueryError: If the query fails
        """
        pass

    async def select_single(
        self,
        table: str,
        columns: str = '*',
        filters: Filters = None
    ) -> Row:
        """
        Select exactly one row.

        Raises:
            NotFoundError: If no row matches
            QueryError: If more than one row matches, or the query fails
        """
        rows = await self.select(table, columns, filters)
        if not rows:
            raise NotFoundError(table, filters)
        if len(rows) > 1:
            raise QueryError(
                f"Expected a single row in {table} matching {filters}, got {len(rows)}"
            )
        return rows[0]

    @abstractmethod
    async def insert(self, table: str, rows: List[Row]) -> List[Row]:
        """
        Insert rows into a table.

        Args:
            table: Table name
            rows: Rows to insert; store-assigned id columns may be omitted

        Returns:
            The inserted rows as stored, including assigned ids

        Raises:
            QueryError: If the insert fails
        """
        pass
