"""Result submission: resolve event, points and skater, then record the result."""

import logging
from typing import Optional, Tuple

from pydantic import BaseModel

from src.models import Result, ResultForm
from src.services.validator import to_int
from src.storage import DatabaseInterface, DatabaseError, NotFoundError

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Result added!"
FAILURE_MESSAGE = "Error adding result."


class SubmissionOutcome(BaseModel):
    """What the operator is told after a submit."""

    success: bool
    message: str
    result: Optional[Result] = None


def split_display_name(display_name: str) -> Tuple[str, str]:
    """Split "First Last" on the first space only.

    "Jean Claude Smith" -> ("Jean", "Claude Smith"). A name without a space
    has an empty last name.
    """
    first, _, last = display_name.partition(' ')
    return first, last


class ResultWorkflow:
    """Records one result per call against the backing store.

    Steps run strictly in order, each awaited before the next starts:
    event, points, skater, result insert. Any store failure other than a
    lookup miss ends the submission with FAILURE_MESSAGE; earlier writes
    (a newly created event) are not rolled back.
    """

    def __init__(self, db: DatabaseInterface, competition_id: int) -> None:
        self.db = db
        self.competition_id = competition_id

    async def resolve_event(self, event_name: str) -> Optional[int]:
        """Id of the event with this name in the competition, creating it if absent."""
        try:
            row = await self.db.select_single(
                'Event',
                'EventID',
                {'EventName': event_name, 'CompID': self.competition_id}
            )
            return row['EventID']
        except NotFoundError:
            pass

        logger.info(f"Creating event '{event_name}' in competition {self.competition_id}")
        created = await self.db.insert('Event', [{
            'EventName': event_name,
            'IsChamp': False,
            'CompID': self.competition_id,
        }])
        if not created:
            logger.warning(f"Event insert for '{event_name}' returned no row")
            return None
        return created[0].get('EventID')

    async def resolve_points(self, group_size: int, placement: int) -> int:
        """Points for a placement in a group of this size; 0 when the table has no entry."""
        try:
            row = await self.db.select_single(
                'PointValues',
                'Points',
                {'GroupSize': group_size, 'Placement': placement}
            )
        except NotFoundError:
            return 0
        return row['Points'] if row.get('Points') is not None else 0

    async def resolve_skater(self, first_name: str, last_name: str) -> Optional[int]:
        """Id of the skater with exactly this first and last name, or None."""
        try:
            row = await self.db.select_single(
                'Skater',
                'SkaterID',
                {'FirstName': first_name, 'LastName': last_name}
            )
        except NotFoundError:
            logger.warning(f"No skater named '{first_name} {last_name}'")
            return None
        return row['SkaterID']

    async def submit(self, form: ResultForm) -> SubmissionOutcome:
        """Record a result for an already validated form."""
        try:
            event_id = await self.resolve_event(form.event_name)
            points = await self.resolve_points(
                to_int(form.group_size), to_int(form.placement)
            )

            if form.skater_id is not None:
                skater_id = form.skater_id
            else:
                first_name, last_name = split_display_name(form.skater_name)
                skater_id = await self.resolve_skater(first_name, last_name)

            result = Result(
                event_id=event_id,
                skater_id=skater_id,
                points=points,
                group=form.group or None,
            )
            inserted = await self.db.insert('Result', [result.to_row()])
        except DatabaseError as e:
            logger.error(f"Error adding result: {e}")
            return SubmissionOutcome(success=False, message=FAILURE_MESSAGE)

        if inserted:
            result = Result.model_validate(inserted[0])
        logger.info(
            f"Recorded result: event={result.event_id} skater={result.skater_id} "
            f"points={result.points} group={result.group}"
        )
        return SubmissionOutcome(success=True, message=SUCCESS_MESSAGE, result=result)
