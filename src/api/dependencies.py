"""FastAPI dependencies for dependency injection."""

from functools import lru_cache

from src import config
from src.services.reference_data import ReferenceDataLoader
from src.services.result_workflow import ResultWorkflow
from src.storage import DatabaseInterface, get_database


def get_db() -> DatabaseInterface:
    """Get database dependency."""
    return get_database()


@lru_cache
def _reference_loader() -> ReferenceDataLoader:
    return ReferenceDataLoader(get_database())


def get_reference_data() -> ReferenceDataLoader:
    """Get the shared skater/event loader dependency."""
    return _reference_loader()


def get_workflow() -> ResultWorkflow:
    """Get result workflow dependency, scoped to the configured competition."""
    return ResultWorkflow(get_database(), competition_id=config.COMPETITION_ID)
