"""
Storage module for skating result entry.

Provides a unified interface for multiple database backends:
- SQLite (local development, self-hosted)
- Supabase (PostgreSQL, free tier)

Usage:
    from src.storage import get_database

    db = get_database()  # Uses DB_TYPE env var
    skaters = await db.select('Skater', 'SkaterID, FirstName, LastName')
"""

from .base import DatabaseInterface, TABLES
from .factory import get_database, reset_database
from .exceptions import (
    DatabaseError,
    ConnectionError,
    ConfigurationError,
    SchemaError,
    QueryError,
    NotFoundError
)

__all__ = [
    'DatabaseInterface',
    'TABLES',
    'get_database',
    'reset_database',
    'DatabaseError',
    'ConnectionError',
    'ConfigurationError',
    'SchemaError',
    'QueryError',
    'NotFoundError'
]
