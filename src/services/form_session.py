"""State of the result entry form between submissions."""

import logging
from typing import Any, Dict, Optional

from src.models import ResultForm
from src.services.reference_data import ReferenceDataLoader
from src.services.result_workflow import ResultWorkflow, SubmissionOutcome
from src.services.validator import validate

logger = logging.getLogger(__name__)


def field_name(field: str) -> str:
    """Attribute name of a form field given its form name ('groupSize') or attribute name."""
    if field in ResultForm.model_fields:
        return field
    for attr, info in ResultForm.model_fields.items():
        if info.alias == field:
            return attr
    raise KeyError(f"Unknown form field: {field}")


class FormSession:
    """Holds the current form values and field errors.

    A submission is blocked while any field fails validation. A successful
    submission clears the form; a failed one leaves the entered values in
    place for a retry.
    """

    def __init__(
        self,
        workflow: ResultWorkflow,
        reference_data: Optional[ReferenceDataLoader] = None,
    ) -> None:
        self.workflow = workflow
        self.reference_data = reference_data
        self.form = ResultForm.empty()
        self.errors: Dict[str, str] = {}

    def get(self, field: str) -> Any:
        """Current value of a field, by form name or attribute name."""
        return getattr(self.form, field_name(field))

    def update(self, field: str, value: Any) -> None:
        """Set one field by form name (e.g. 'groupSize') or attribute name.

        Setting the skater name drops any skater id picked earlier; set
        'skaterId' after the name to keep a picked id.
        """
        name = field_name(field)
        setattr(self.form, name, value)
        if name == 'skater_name':
            self.form.skater_id = None

    def reset(self) -> None:
        """Clear all values and errors."""
        self.form = ResultForm.empty()
        self.errors = {}

    async def submit(self) -> Optional[SubmissionOutcome]:
        """Validate and, if valid, record the result.

        Returns:
            The submission outcome, or None when validation blocked it
            (see self.errors)
        """
        self.errors = validate(self.form)
        if self.errors:
            logger.debug(f"Submission blocked: {self.errors}")
            return None

        outcome = await self.workflow.submit(self.form)
        if outcome.success:
            self.reset()
            if self.reference_data is not None:
                self.reference_data.invalidate()
        return outcome
