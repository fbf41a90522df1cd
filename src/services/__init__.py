"""Services for the skating result entry application."""

from src.services.validator import validate
from src.services.reference_data import ReferenceDataLoader
from src.services.result_workflow import ResultWorkflow, SubmissionOutcome, split_display_name
from src.services.form_session import FormSession

__all__ = [
    "validate",
    "ReferenceDataLoader",
    "ResultWorkflow",
    "SubmissionOutcome",
    "split_display_name",
    "FormSession",
]
