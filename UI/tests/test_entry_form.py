"""
Tests for the entry form state machine and field validation.
"""

import unittest

from UI.state import entry_form as form
from UI.state.entry_form import EntryFormState, EntryValidationError


class TestValidateFields(unittest.TestCase):

    def _fields(self, **overrides):
        fields = form.empty_fields()
        fields.update({'header': 'Intro', 'type': 'Narrative', 'target': '3', 'limit': '5'})
        fields.update(overrides)
        return fields

    def test_builds_create_payload(self):
        payload = form.validate_fields(self._fields(reviewer='  '))
        self.assertEqual(payload, {
            'header': 'Intro', 'type': 'Narrative', 'status': 'In Process',
            'target': 3, 'limit': 5, 'reviewer': None,
        })

    def test_edit_payload_carries_id(self):
        payload = form.validate_fields(self._fields(id='abc', status='Done', reviewer='Eddie'))
        self.assertEqual(payload['id'], 'abc')
        self.assertEqual(payload['status'], 'Done')
        self.assertEqual(payload['reviewer'], 'Eddie')

    def test_missing_required_fields(self):
        with self.assertRaises(EntryValidationError) as cm:
            form.validate_fields(self._fields(header='', limit=None))
        self.assertEqual(cm.exception.fields, ['header', 'limit'])
        self.assertEqual(cm.exception.message, "Required field missing: Header, Limit")

    def test_rejects_bad_numbers_and_status(self):
        with self.assertRaises(EntryValidationError):
            form.validate_fields(self._fields(target='many'))
        with self.assertRaises(EntryValidationError):
            form.validate_fields(self._fields(limit='-1'))
        with self.assertRaises(EntryValidationError):
            form.validate_fields(self._fields(status='Archived'))


class TestFormTransitions(unittest.TestCase):

    def test_open_create_and_edit_modes(self):
        self.assertIsNone(EntryFormState().mode)
        self.assertEqual(form.open_create().mode, form.MODE_CREATE)
        edit = form.open_edit({'id': 'x1', 'header': 'H', 'type': 'T', 'status': 'Done',
                               'target': 0, 'limit': 4, 'reviewer': None})
        self.assertEqual(edit.mode, form.MODE_EDIT)
        self.assertEqual(edit.fields['target'], '0')
        self.assertEqual(edit.fields['reviewer'], '')

    def test_empty_header_sends_nothing(self):
        state = form.update_fields(form.open_create(), type='Narrative', target='1', limit='1')
        new_state, payload = form.begin_submit(state)
        self.assertIsNone(payload)
        self.assertEqual(new_state.phase, form.COMPOSING)
        self.assertIn('Header', new_state.error)

    def test_submit_success_closes_form(self):
        state = form.update_fields(form.open_create(), header='H', type='T', target='1', limit='2')
        submitting, payload = form.begin_submit(state)
        self.assertEqual(submitting.phase, form.SUBMITTING)
        self.assertIsNotNone(payload)
        closed = form.submit_succeeded(submitting)
        self.assertFalse(closed.is_open)

    def test_submit_failure_keeps_fields(self):
        state = form.update_fields(form.open_create(), header='H', type='T', target='1', limit='2')
        submitting, _ = form.begin_submit(state)
        failed = form.submit_failed(submitting, 'Server error')
        self.assertEqual(failed.phase, form.COMPOSING)
        self.assertEqual(failed.error, 'Server error')
        self.assertEqual(failed.fields['header'], 'H')

    def test_submit_ignored_when_idle(self):
        state, payload = form.begin_submit(EntryFormState())
        self.assertIsNone(payload)
        self.assertFalse(state.is_open)

    def test_store_round_trip(self):
        state = form.submit_failed(form.open_edit({'id': 'a', 'header': 'H'}), 'oops')
        self.assertEqual(EntryFormState.from_dict(state.to_dict()), state)

    def test_success_notice_survives_store_round_trip(self):
        closed = form.submit_succeeded(form.open_create(), 'Saved')
        self.assertFalse(closed.is_open)
        self.assertEqual(EntryFormState.from_dict(closed.to_dict()).notice, 'Saved')


if __name__ == '__main__':
    unittest.main()
