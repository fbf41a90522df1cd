"""
Shared test fixtures and configuration.

Provides reusable fixtures for all test files including database instances,
seeded reference rows and workflow objects.
"""

import os
import shutil
import tempfile
from typing import Dict, Any, List
from unittest.mock import patch

import pytest

from src.storage import get_database, reset_database
from src.services.reference_data import ReferenceDataLoader
from src.services.result_workflow import ResultWorkflow


COMPETITION_ID = 1


# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest.fixture
def test_data_dir():
    """Provide a temporary directory for test data."""
    temp_dir = tempfile.mkdtemp(prefix="skating_results_test_")
    yield temp_dir

    # Cleanup
    if os.path.exists(temp_dir):
        try:
            shutil.rmtree(temp_dir)
        except PermissionError:
            pass  # Windows file locking, ignore


@pytest.fixture
def db_fixture(test_data_dir):
    """Provide a clean test database instance."""
    with patch.dict(os.environ, {'DB_TYPE': 'sqlite', 'DATA_DIR': test_data_dir}, clear=False):
        reset_database()
        db = get_database()
        yield db
        reset_database()  # Close connection before cleanup


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_skaters() -> List[Dict[str, Any]]:
    """Provide sample skater rows."""
    return [
        {'FirstName': 'Ada', 'LastName': 'Lovelace'},
        {'FirstName': 'Jean', 'LastName': 'Claude Smith'},
        {'FirstName': 'Jean', 'LastName': 'Claude'},
        {'FirstName': 'Sonja', 'LastName': 'Henie'},
    ]


@pytest.fixture
def sample_events() -> List[Dict[str, Any]]:
    """Provide sample event rows."""
    return [
        {'EventName': 'Relay', 'IsChamp': False, 'CompID': COMPETITION_ID},
        {'EventName': '500m', 'IsChamp': True, 'CompID': COMPETITION_ID},
        {'EventName': 'Relay', 'IsChamp': False, 'CompID': 2},
    ]


@pytest.fixture
def sample_point_values() -> List[Dict[str, Any]]:
    """Provide sample point value rows."""
    return [
        {'GroupSize': 8, 'Placement': 1, 'Points': 10},
        {'GroupSize': 8, 'Placement': 2, 'Points': 7},
        {'GroupSize': 8, 'Placement': 3, 'Points': 5},
        {'GroupSize': 4, 'Placement': 1, 'Points': 4},
    ]


@pytest.fixture
def seeded_db(db_fixture, sample_skaters, sample_events, sample_point_values):
    """Database holding the sample skaters, events and point values."""
    # Seed through the blocking path; no event loop is running in fixtures
    db_fixture._insert_sync('Skater', sample_skaters)
    db_fixture._insert_sync('Event', sample_events)
    db_fixture._insert_sync('PointValues', sample_point_values)
    return db_fixture


@pytest.fixture
def workflow(seeded_db) -> ResultWorkflow:
    """Result workflow over the seeded database."""
    return ResultWorkflow(seeded_db, competition_id=COMPETITION_ID)


@pytest.fixture
def loader(seeded_db) -> ReferenceDataLoader:
    """Reference data loader over the seeded database."""
    return ReferenceDataLoader(seeded_db, ttl_seconds=300)
