"""
Tests for the mapping of table events to state transitions used by the master
callback.
"""

import unittest
from unittest.mock import MagicMock

from UI.controller.entry_table_events import TableUpdateTrigger, handle_table_event
from UI.state import entry_table as table
from UI.state.entry_table import EntryTableState


def entries(count):
    return [{'id': f"r{i}", 'header': f"Row {i}"} for i in range(1, count + 1)]


class TestHandleTableEvent(unittest.TestCase):

    def setUp(self):
        self.actions = MagicMock()
        self.actions.after_reorder.return_value = None
        self.state = table.load(EntryTableState(page_size=5), entries(12))

    def test_init_fetches(self):
        self.actions.refresh.return_value = ([table.load_op(entries(2))], None)
        state, error = handle_table_event(EntryTableState(), 'init', 1, self.actions)
        self.assertIsNone(error)
        self.assertEqual(table.entry_ids(state), ['r1', 'r2'])

    def test_reload_failure_keeps_state(self):
        self.actions.refresh.return_value = ([], 'Failed to fetch entries')
        state, error = handle_table_event(self.state, 'reload', 1, self.actions)
        self.assertEqual(state, self.state)
        self.assertEqual(error, 'Failed to fetch entries')

    def test_update_trigger_applies_ops(self):
        trigger = TableUpdateTrigger.create_trigger_data('entry_delete', 'delete', [table.remove_op('r1')])
        state, error = handle_table_event(self.state, 'update', trigger, self.actions)
        self.assertIsNone(error)
        self.assertNotIn('r1', table.entry_ids(state))

    def test_update_trigger_error_only(self):
        trigger = TableUpdateTrigger.create_trigger_data('entry_delete', 'delete', [], 'Failed to delete entry')
        state, error = handle_table_event(self.state, 'update', trigger, self.actions)
        self.assertEqual(state, self.state)
        self.assertEqual(error, 'Failed to delete entry')

    def test_page_size_and_navigation(self):
        state, _ = handle_table_event(self.state, 'next', 1, self.actions)
        self.assertEqual(state.page_index, 2)
        state, _ = handle_table_event(state, 'page_size', '10', self.actions)
        self.assertEqual((state.page_size, state.page_index), (10, 1))
        same, _ = handle_table_event(state, 'page_size', '10', self.actions)
        self.assertEqual(same, state)

    def test_checkbox_events_only_apply_changes(self):
        state, _ = handle_table_event(self.state, 'select', ('r2', True), self.actions)
        self.assertEqual(state.selected, ('r2',))
        # Re-render reports the value the state already has
        same, _ = handle_table_event(state, 'select', ('r2', True), self.actions)
        self.assertEqual(same.selected, ('r2',))
        state, _ = handle_table_event(state, 'select_all', True, self.actions)
        self.assertEqual(len(state.selected), 5)
        state, _ = handle_table_event(state, 'select_all', False, self.actions)
        self.assertEqual(state.selected, ())

    def test_pointer_move_calls_order_hook(self):
        event = {'action': 'move', 'source': 'r1', 'target': 'r3'}
        state, error = handle_table_event(self.state, 'drag', event, self.actions)
        self.assertIsNone(error)
        self.assertEqual(table.entry_ids(state)[:3], ['r2', 'r3', 'r1'])
        self.actions.after_reorder.assert_called_once()

    def test_pointer_move_onto_itself_does_nothing(self):
        event = {'action': 'move', 'source': 'r1', 'target': 'r1'}
        state, _ = handle_table_event(self.state, 'drag', event, self.actions)
        self.assertIs(state, self.state)
        self.actions.after_reorder.assert_not_called()

    def test_keyboard_reorder_flow(self):
        state, _ = handle_table_event(self.state, 'grab', 'r1', self.actions)
        self.assertEqual(state.drag.entry_id, 'r1')
        state, _ = handle_table_event(state, 'down', 1, self.actions)
        state, _ = handle_table_event(state, 'drag', {'action': 'step', 'delta': 1}, self.actions)
        self.assertEqual(table.entry_ids(state)[:3], ['r2', 'r3', 'r1'])
        state, _ = handle_table_event(state, 'drop', 1, self.actions)
        self.assertIsNone(state.drag)
        before, after = self.actions.after_reorder.call_args[0]
        self.assertEqual(before[:3], ['r1', 'r2', 'r3'])
        self.assertEqual(after[:3], ['r2', 'r3', 'r1'])

    def test_grabbing_held_row_drops_it(self):
        state, _ = handle_table_event(self.state, 'grab', 'r2', self.actions)
        state, _ = handle_table_event(state, 'grab', 'r2', self.actions)
        self.assertIsNone(state.drag)

    def test_grabbing_other_row_switches_hold(self):
        state, _ = handle_table_event(self.state, 'grab', 'r2', self.actions)
        state, _ = handle_table_event(state, 'grab', 'r4', self.actions)
        self.assertEqual(state.drag.entry_id, 'r4')

    def test_cancel_restores_order(self):
        state, _ = handle_table_event(self.state, 'grab', 'r1', self.actions)
        state, _ = handle_table_event(state, 'down', 1, self.actions)
        state, _ = handle_table_event(state, 'cancel', 1, self.actions)
        self.assertEqual(table.entry_ids(state), table.entry_ids(self.state))
        self.actions.after_reorder.assert_not_called()

    def test_sort_event(self):
        state, _ = handle_table_event(self.state, 'sort', 'header', self.actions)
        self.assertEqual(state.sort_column, 'header')

    def test_unknown_source(self):
        with self.assertRaises(ValueError):
            handle_table_event(self.state, 'teleport', None, self.actions)


if __name__ == '__main__':
    unittest.main()
