"""Result entry form validation."""

import math
import re
from typing import Any, Dict, Optional

from src.models.form import ResultForm

MIN_RANK = 1
MAX_RANK = 24

GROUP_PATTERN = re.compile(r'[A-Z]')

SKATER_REQUIRED = "Skater is required."
EVENT_REQUIRED = "Event name is required."
PLACEMENT_RANGE = "Placement must be 1-24."
GROUP_SIZE_RANGE = "Group size must be 1-24."
GROUP_FORMAT = "Group must be a single capital letter."


def to_int(value: Any) -> Optional[int]:
    """Coerce a form value to an integer, or None if it is not integral.

    Accepts ints, ASCII integer strings ("3", " 3 ") and integral floats ("3.0").
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text or not text.isascii():
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


def _in_range(value: Any) -> bool:
    number = to_int(value)
    return number is not None and MIN_RANK <= number <= MAX_RANK


def validate(form: ResultForm) -> Dict[str, str]:
    """Check every field of the form.

    All rules are evaluated; the returned mapping holds one message per
    failing field, keyed by form field name. An empty mapping means the
    form can be submitted.
    """
    errors: Dict[str, str] = {}

    if not form.skater_name:
        errors['skaterName'] = SKATER_REQUIRED
    if not form.event_name:
        errors['eventName'] = EVENT_REQUIRED
    if not _in_range(form.placement):
        errors['placement'] = PLACEMENT_RANGE
    if not _in_range(form.group_size):
        errors['groupSize'] = GROUP_SIZE_RANGE
    if form.group and not GROUP_PATTERN.fullmatch(form.group):
        errors['group'] = GROUP_FORMAT

    return errors
