"""
Tests for the entries table state: pagination, selection, store updates and
drag reordering.
"""

import unittest

from UI.state import entry_table as table
from UI.state.entry_table import EntryTableState


def make_entries(count):
    return [
        {'id': f"e{i}", 'header': f"Section {i}", 'type': 'Narrative', 'status': 'In Process',
         'target': i, 'limit': i * 2, 'reviewer': None if i % 3 == 0 else f"Reviewer {i}"}
        for i in range(1, count + 1)
    ]


def loaded_state(count, page_size=10):
    return table.load(EntryTableState(page_size=page_size), make_entries(count))


class TestPagination(unittest.TestCase):

    def test_visible_page_sizes(self):
        entries = make_entries(25)
        for size in table.PAGE_SIZE_OPTIONS:
            pages = table.total_pages(len(entries), size)
            for index in range(1, pages + 1):
                rows = table.visible_page(entries, index, size)
                expected = min(size, len(entries) - (index - 1) * size)
                self.assertEqual(len(rows), expected)
            self.assertEqual(table.visible_page(entries, pages + 1, size), [])

    def test_total_pages(self):
        self.assertEqual(table.total_pages(0, 10), 0)
        self.assertEqual(table.total_pages(10, 10), 1)
        self.assertEqual(table.total_pages(11, 10), 2)
        with self.assertRaises(ValueError):
            table.total_pages(3, 0)

    def test_go_to_page_is_clamped(self):
        state = loaded_state(25)
        self.assertEqual(table.go_to_page(state, 'previous').page_index, 1)
        last = table.go_to_page(state, 'last')
        self.assertEqual(last.page_index, 3)
        self.assertEqual(table.go_to_page(last, 'next').page_index, 3)
        self.assertEqual(table.go_to_page(last, 'first').page_index, 1)
        with self.assertRaises(ValueError):
            table.go_to_page(state, 'sideways')

    def test_set_page_size_resets_to_first_page(self):
        state = table.set_page(loaded_state(25), 3)
        resized = table.set_page_size(state, 5)
        self.assertEqual(resized.page_size, 5)
        self.assertEqual(resized.page_index, 1)
        self.assertEqual(len(table.current_page(resized)), 5)

    def test_empty_store_has_one_display_page(self):
        state = table.load(EntryTableState(), [])
        self.assertEqual(table.page_count(state), 0)
        self.assertEqual(state.page_index, 1)
        self.assertEqual(table.current_page(state), [])

    def test_page_clamped_after_delete_empties_last_page(self):
        state = table.go_to_page(loaded_state(11), 'last')
        self.assertEqual(state.page_index, 2)
        state = table.remove_entry(state, 'e11')
        self.assertEqual(state.page_index, 1)


class TestSelection(unittest.TestCase):

    def test_toggle_twice_restores(self):
        state = loaded_state(5)
        toggled = table.toggle(table.toggle(state, 'e2'), 'e2')
        self.assertEqual(toggled.selected, state.selected)

    def test_toggle_ignores_rows_not_on_page(self):
        state = loaded_state(15)
        self.assertEqual(table.toggle(state, 'e12').selected, ())

    def test_toggle_all_selects_then_clears_page(self):
        state = loaded_state(15)
        selected = table.toggle_all(state)
        self.assertEqual(set(selected.selected), set(table.visible_ids(state)))
        self.assertTrue(table.all_visible_selected(selected))
        self.assertEqual(table.toggle_all(selected).selected, ())

    def test_toggle_all_from_partial_selects_page(self):
        state = table.toggle(loaded_state(4), 'e1')
        self.assertEqual(len(table.toggle_all(state).selected), 4)

    def test_selection_pruned_on_page_change(self):
        state = table.toggle_all(loaded_state(15))
        moved = table.go_to_page(state, 'next')
        self.assertEqual(moved.selected, ())

    def test_selection_summary(self):
        state = table.toggle(table.toggle(loaded_state(7), 'e1'), 'e3')
        self.assertEqual(table.selection_summary(state), "2 of 7 row(s) selected.")

    def test_delete_removes_id_from_selection(self):
        state = table.toggle(loaded_state(3), 'e2')
        state = table.remove_entry(state, 'e2')
        self.assertNotIn('e2', state.selected)
        self.assertEqual(table.entry_ids(state), ['e1', 'e3'])


class TestStoreUpdates(unittest.TestCase):

    def test_patch_keeps_position(self):
        state = loaded_state(3)
        patched = table.patch_entry(state, {'id': 'e2', 'header': 'Renamed', 'target': 99})
        self.assertEqual(table.entry_ids(patched), ['e1', 'e2', 'e3'])
        entry = table.find_entry(patched, 'e2')
        self.assertEqual(entry['header'], 'Renamed')
        self.assertEqual(entry['target'], 99)
        self.assertEqual(entry['type'], 'Narrative')

    def test_append_inserts_at_top(self):
        state = table.append_entry(loaded_state(2), {'id': 'new', 'header': 'New'})
        self.assertEqual(table.entry_ids(state)[0], 'new')

    def test_apply_updates_in_order(self):
        ops = [
            table.load_op(make_entries(3)),
            table.remove_op('e1'),
            table.patch_op({'id': 'e3', 'status': 'Done'}),
            table.append_op({'id': 'e9', 'header': 'Nine'}),
        ]
        state = table.apply_updates(EntryTableState(), ops)
        self.assertTrue(state.loaded)
        self.assertEqual(table.entry_ids(state), ['e9', 'e2', 'e3'])
        self.assertEqual(table.find_entry(state, 'e3')['status'], 'Done')

    def test_apply_updates_rejects_unknown_op(self):
        with self.assertRaises(ValueError):
            table.apply_updates(EntryTableState(), [{'op': 'explode'}])

    def test_sort_flips_direction_and_puts_missing_last(self):
        state = loaded_state(6)
        ascending = table.sort_by(state, 'reviewer')
        reviewers = [e['reviewer'] for e in ascending.entries]
        self.assertEqual(reviewers[-2:], [None, None])
        descending = table.sort_by(ascending, 'reviewer')
        self.assertFalse(descending.sort_ascending)
        self.assertEqual([e['reviewer'] for e in descending.entries][-2:], [None, None])
        self.assertEqual(descending.entries[0]['reviewer'], 'Reviewer 5')

    def test_round_trip_through_store_dict(self):
        state = table.begin_drag(table.toggle(loaded_state(4), 'e1'), 'e2')
        self.assertEqual(EntryTableState.from_dict(state.to_dict()), state)


class TestDragReorder(unittest.TestCase):

    def test_array_move(self):
        self.assertEqual(table.array_move(['a', 'b', 'c', 'd'], 0, 2), ['b', 'c', 'a', 'd'])
        self.assertEqual(table.array_move(['a', 'b', 'c', 'd'], 3, 1), ['a', 'd', 'b', 'c'])

    def test_move_keeps_ids(self):
        state = loaded_state(5)
        moved = table.move_entry(state, 'e1', 'e4')
        self.assertEqual(table.entry_ids(moved), ['e2', 'e3', 'e4', 'e1', 'e5'])
        self.assertEqual(sorted(table.entry_ids(moved)), sorted(table.entry_ids(state)))

    def test_move_onto_itself_or_nothing(self):
        state = loaded_state(3)
        self.assertIs(table.move_entry(state, 'e1', 'e1'), state)
        self.assertIs(table.move_entry(state, 'e1', None), state)

    def test_move_outside_page_is_ignored(self):
        state = loaded_state(15)
        self.assertIs(table.move_entry(state, 'e1', 'e12'), state)

    def test_keyboard_steps_and_drop(self):
        state = table.begin_drag(loaded_state(4), 'e2')
        state = table.drag_step(state, 1)
        state = table.drag_step(state, 1)
        self.assertEqual(table.entry_ids(state), ['e1', 'e3', 'e4', 'e2'])
        # Already at the bottom of the page
        self.assertEqual(table.entry_ids(table.drag_step(state, 1)), ['e1', 'e3', 'e4', 'e2'])
        dropped = table.drop(state)
        self.assertIsNone(dropped.drag)
        self.assertEqual(table.entry_ids(dropped), ['e1', 'e3', 'e4', 'e2'])

    def test_keyboard_cancel_restores_order(self):
        state = loaded_state(4)
        held = table.drag_step(table.begin_drag(state, 'e1'), 2)
        self.assertNotEqual(table.entry_ids(held), table.entry_ids(state))
        cancelled = table.cancel_drag(held)
        self.assertIsNone(cancelled.drag)
        self.assertEqual(table.entry_ids(cancelled), table.entry_ids(state))

    def test_drag_step_stays_on_page(self):
        state = table.go_to_page(loaded_state(15), 'next')
        held = table.begin_drag(state, 'e11')
        self.assertEqual(table.entry_ids(table.drag_step(held, -5)), table.entry_ids(held))

    def test_page_change_releases_held_row(self):
        state = table.begin_drag(loaded_state(15), 'e3')
        self.assertIsNone(table.go_to_page(state, 'next').drag)


if __name__ == '__main__':
    unittest.main()
