"""Tests for the result entry form session."""

from unittest.mock import patch, AsyncMock

import pytest

from src.models import ResultForm
from src.services.form_session import FormSession, field_name
from src.storage import QueryError


@pytest.fixture
def session(workflow, loader) -> FormSession:
    return FormSession(workflow, loader)


def fill(session: FormSession, **values) -> None:
    defaults = {
        'skaterName': 'Sonja Henie',
        'eventName': '500m',
        'placement': '1',
        'groupSize': '8',
        'group': '',
    }
    defaults.update(values)
    for field, value in defaults.items():
        session.update(field, value)


class TestFieldUpdates:
    """Tests for field access."""

    def test_update_by_form_name(self, session):
        session.update('groupSize', '8')
        assert session.form.group_size == '8'

    def test_update_by_attribute_name(self, session):
        session.update('group_size', '6')
        assert session.get('groupSize') == '6'

    def test_group_uppercased_on_update(self, session):
        session.update('group', 'c')
        assert session.form.group == 'C'

    def test_unknown_field(self, session):
        with pytest.raises(KeyError):
            session.update('nickname', 'x')

    def test_renaming_skater_drops_picked_id(self, session):
        """A new skater name clears the id picked for the old one."""
        session.update('skaterName', 'Ada Lovelace')
        session.update('skaterId', 1)

        session.update('skaterName', 'Sonja Henie')

        assert session.get('skaterId') is None

    def test_picked_id_set_after_name_is_kept(self, session):
        session.update('skaterName', 'Jean Claude')
        session.update('skaterId', 3)

        assert session.get('skaterId') == 3

    def test_field_name_lookup(self):
        assert field_name('skaterName') == 'skater_name'
        assert field_name('skaterId') == 'skater_id'
        assert field_name('placement') == 'placement'


class TestSubmit:
    """Tests for submitting the form."""

    @pytest.mark.asyncio
    async def test_invalid_form_blocked(self, session, seeded_db):
        """Validation errors stop the submission before the store is touched."""
        fill(session, placement='30', group='AB')

        with patch.object(session.workflow, 'submit', AsyncMock()) as submit:
            outcome = await session.submit()

        assert outcome is None
        submit.assert_not_called()
        assert session.errors == {
            'placement': 'Placement must be 1-24.',
            'group': 'Group must be a single capital letter.',
        }
        assert session.form.placement == '30'

    @pytest.mark.asyncio
    async def test_success_resets_form(self, session, seeded_db):
        """A stored result clears every field to an empty string."""
        fill(session, group='a')

        outcome = await session.submit()

        assert outcome.success is True
        assert outcome.message == 'Result added!'
        assert session.form == ResultForm.empty()
        assert session.form.skater_name == ''
        assert session.errors == {}

        rows = await seeded_db.select('Result')
        assert rows[0]['Points'] == 10
        assert rows[0]['Group'] == 'A'

    @pytest.mark.asyncio
    async def test_failure_keeps_values(self, session, seeded_db):
        """A store failure leaves the submitted values for a retry."""
        fill(session, group='D')

        with patch.object(seeded_db, 'insert', AsyncMock(side_effect=QueryError("no"))):
            outcome = await session.submit()

        assert outcome.success is False
        assert outcome.message == 'Error adding result.'
        assert session.get('skaterName') == 'Sonja Henie'
        assert session.get('eventName') == '500m'
        assert session.get('placement') == '1'
        assert session.get('groupSize') == '8'
        assert session.get('group') == 'D'

    @pytest.mark.asyncio
    async def test_success_refreshes_event_options(self, session, seeded_db):
        """A newly created event shows up in the options after submit."""
        assert 'Sprint' not in await session.reference_data.event_options()

        fill(session, eventName='Sprint')
        await session.submit()

        assert 'Sprint' in await session.reference_data.event_options()

    @pytest.mark.asyncio
    async def test_corrected_skater_after_failure_uses_new_name(self, session, seeded_db):
        """Retyping the skater after a failed submit records the new skater, not the old pick."""
        fill(session, skaterName='Ada Lovelace')
        session.update('skaterId', 1)

        with patch.object(seeded_db, 'insert', AsyncMock(side_effect=QueryError("no"))):
            outcome = await session.submit()
        assert outcome.success is False

        session.update('skaterName', 'Sonja Henie')
        outcome = await session.submit()

        assert outcome.success is True
        assert outcome.result.skater_id == 4
