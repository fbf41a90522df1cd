"""
Terminal result entry form.

Usage:
    python -m src.cli            # keep entering results until Ctrl-D or ':q'
    python -m src.cli --once     # submit a single result
"""

import argparse
import asyncio
import logging
import sys
from typing import Callable, Optional

from src import config
from src.services.form_session import FormSession
from src.services.reference_data import ReferenceDataLoader
from src.services.result_workflow import ResultWorkflow
from src.storage import DatabaseInterface, get_database, reset_database

# (form field, label)
FIELDS = [
    ('skaterName', 'Skater'),
    ('eventName', 'Event Name'),
    ('placement', 'Placement (1-24)'),
    ('groupSize', 'Group Size (1-24)'),
    ('group', 'Group (A-Z, optional)'),
]

QUIT = ':q'


class TerminalForm:
    """Prompts for each form field and submits through a FormSession."""

    def __init__(
        self,
        session: FormSession,
        prompt: Callable[[str], str] = input,
        out: Callable[[str], None] = print,
    ) -> None:
        self.session = session
        self.prompt = prompt
        self.out = out

    async def show_options(self) -> None:
        loader = self.session.reference_data
        if loader is None:
            return
        skaters = await loader.load_skaters()
        events = await loader.event_options()

        self.out("Skaters:")
        for index, skater in enumerate(skaters, 1):
            self.out(f"  {index}. {skater.display_name}")
        self.out("Events:")
        for name in events:
            self.out(f"  - {name}")

    async def _pick_skater(self, answer: str) -> None:
        """A number picks from the skater list; anything else is a name."""
        loader = self.session.reference_data
        if loader is not None and answer.isdigit():
            skaters = await loader.load_skaters()
            index = int(answer) - 1
            if 0 <= index < len(skaters):
                self.session.update('skaterName', skaters[index].display_name)
                self.session.update('skaterId', skaters[index].id)
                return
        self.session.update('skaterName', answer)

    async def fill(self) -> bool:
        """Ask for every field, offering current values as defaults.

        Returns:
            False if the operator asked to quit
        """
        for field, label in FIELDS:
            current = self.session.get(field)
            suffix = f" [{current}]" if current else ""
            answer = self.prompt(f"{label}{suffix}: ").strip()
            if answer.lower() == QUIT:
                return False
            if not answer:
                continue
            if field == 'skaterName':
                await self._pick_skater(answer)
            else:
                self.session.update(field, answer)
        return True

    async def run_once(self) -> Optional[bool]:
        """Fill and submit one form.

        Returns:
            True on success, False on failure or blocked validation,
            None if the operator quit
        """
        if not await self.fill():
            return None

        outcome = await self.session.submit()
        if outcome is None:
            for field, message in self.session.errors.items():
                self.out(f"  {field}: {message}")
            return False

        self.out(outcome.message)
        return outcome.success

    async def run(self, once: bool = False) -> int:
        await self.show_options()
        while True:
            try:
                status = await self.run_once()
            except EOFError:
                return 0
            if status is None:
                return 0
            if once:
                return 0 if status else 1


def build_session(db: DatabaseInterface) -> FormSession:
    workflow = ResultWorkflow(db, competition_id=config.COMPETITION_ID)
    return FormSession(workflow, ReferenceDataLoader(db))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Enter skating results')
    parser.add_argument('--once', action='store_true',
                        help='Submit a single result and exit')
    parser.add_argument('--log-level', default=config.LOG_LEVEL,
                        help='Logging level (default: LOG_LEVEL or INFO)')
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    print("=" * 50)
    print("Skating Results - Add Result")
    print("=" * 50)

    db = get_database()
    try:
        form = TerminalForm(build_session(db))
        return asyncio.run(form.run(once=args.once))
    finally:
        reset_database()


if __name__ == '__main__':
    sys.exit(main())
