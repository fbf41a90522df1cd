"""
Application configuration.

Loads settings from environment variables with sensible defaults.
"""

import os


def _get_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    return value.lower() in ('true', '1', 'yes')


def _get_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def get_data_dir() -> str:
    """Directory for the local SQLite file: DATA_DIR > /app/data (container) > data."""
    return (
        os.environ.get('DATA_DIR') or
        ('/app/data' if os.path.exists('/app') else 'data')
    )


# =============================================================================
# SERVER SETTINGS
# =============================================================================
PORT = _get_int('PORT', 8000)
HOST = _get_str('HOST', '0.0.0.0')
CORS_ALLOW_ALL = _get_bool('CORS_ALLOW_ALL', True)

# =============================================================================
# STORAGE SETTINGS
# =============================================================================
# DB_TYPE (sqlite | supabase), DATA_DIR, SUPABASE_URL and SUPABASE_KEY are
# read by src.storage.get_database() when the backend is created

# =============================================================================
# RESULT ENTRY
# =============================================================================
# Competition every Event is scoped to
COMPETITION_ID = _get_int('COMPETITION_ID', 1)

# How long skater/event option lists are reused (in seconds)
REFERENCE_TTL_SECONDS = _get_int('REFERENCE_TTL_SECONDS', 300)

# =============================================================================
# LOGGING
# =============================================================================
LOG_LEVEL = _get_str('LOG_LEVEL', 'INFO')
