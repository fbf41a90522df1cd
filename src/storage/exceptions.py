"""
Custom exceptions for the storage layer.

These exceptions provide clear error categories for database operations:
- DatabaseError: Base exception for all database errors
- ConnectionError: Connection failures
- ConfigurationError: Missing or invalid configuration
- SchemaError: Schema initialization or unknown table/column
- QueryError: Query execution failures
- NotFoundError: A single-row lookup matched nothing
"""


class DatabaseError(Exception):
    """Base exception for all database errors."""
    pass


class ConnectionError(DatabaseError):
    """Failed to connect to database."""
    pass


class ConfigurationError(DatabaseError):
    """Missing or invalid database configuration."""
    pass


class SchemaError(DatabaseError):
    """Error initializing schema, or a table/column outside of it."""
    pass


class QueryError(DatabaseError):
    """Error executing a query."""
    pass


class NotFoundError(QueryError):
    """A single-row lookup matched no rows."""

    def __init__(self, table: str, filters=None):
        self.table = table
        self.filters = dict(filters or {})
        super().__init__(f"No row in {table} matching {self.filters}")
