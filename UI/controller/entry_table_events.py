"""
Entry Table Events

Maps one triggering input of the entries table to a state transition. The
master callback in entry_table_controller feeds every event through
handle_table_event() so the table store has a single writer, and the mapping
can be exercised without a running Dash app.

Event sources:
    'init' / 'reload'      fetch the entries
    'update'               store updates produced by the form or delete flow
    'page_size'            new rows-per-page value
    'first' ... 'last'     pagination buttons
    'select_all'           header checkbox value
    'select'               (entry_id, checkbox value)
    'sort'                 column name
    'grab'                 drag handle of entry_id clicked
    'drag'                 browser drag event {action, ...}
    'up' / 'down'          keyboard toolbar steps
    'drop' / 'cancel'      keyboard toolbar confirm/abort
"""

import logging
import time
import uuid
from typing import Any, Dict, List, Optional, Tuple

from UI.state import entry_table as table
from UI.state.entry_table import EntryTableState

logger = logging.getLogger(__name__)

PAGE_MOVES = ('first', 'previous', 'next', 'last')


class TableUpdateTrigger:
    """Payloads written to the table update trigger store."""

    @staticmethod
    def create_trigger_data(source: str, reason: str, ops: Optional[List[Dict]] = None,
                            error: Optional[str] = None) -> Dict[str, Any]:
        return {
            'timestamp': time.time(),
            'source': source,
            'reason': reason,
            'trigger_id': uuid.uuid4().hex[:8],
            'ops': ops or [],
            'error': error,
        }


def _reordered(actions, before: EntryTableState, after: EntryTableState) -> Optional[str]:
    return actions.after_reorder(table.entry_ids(before), table.entry_ids(after))


def _drop_held(state: EntryTableState, actions) -> Tuple[EntryTableState, Optional[str]]:
    if state.drag is None:
        return state, None
    origin = list(state.drag.origin_order)
    dropped = table.drop(state)
    return dropped, actions.after_reorder(origin, table.entry_ids(dropped))


def handle_table_event(state: EntryTableState, source: str, value: Any,
                       actions) -> Tuple[EntryTableState, Optional[str]]:
    """
    Apply one table event.

    Args:
        state: current table state
        source: event source (see module docstring)
        value: the event's payload
        actions: EntryActions used for fetching and the order hook

    Returns:
        tuple: (new_state, error_message). new_state compares equal to
        state when the event changed nothing.
    """
    if source in ('init', 'reload'):
        ops, error = actions.refresh()
        return table.apply_updates(state, ops), error

    if source == 'update':
        if not value:
            return state, None
        return table.apply_updates(state, value.get('ops')), value.get('error')

    if source == 'page_size':
        if value is None or int(value) == state.page_size:
            return state, None
        return table.set_page_size(state, int(value)), None

    if source in PAGE_MOVES:
        return table.go_to_page(state, source), None

    if source == 'select_all':
        if bool(value) == table.all_visible_selected(state):
            return state, None
        return table.toggle_all(state), None

    if source == 'select':
        entry_id, checked = value
        if bool(checked) == (entry_id in state.selected):
            return state, None
        return table.toggle(state, entry_id), None

    if source == 'sort':
        return table.sort_by(state, value), None

    if source == 'grab':
        held = state.drag.entry_id if state.drag else None
        state, error = _drop_held(state, actions)
        if held == value:
            return state, error
        return table.begin_drag(state, value), error

    if source in ('up', 'down'):
        return table.drag_step(state, -1 if source == 'up' else 1), None

    if source == 'drop':
        return _drop_held(state, actions)

    if source == 'cancel':
        return table.cancel_drag(state), None

    if source == 'drag':
        return _handle_drag_event(state, value or {}, actions)

    raise ValueError(f"Unknown table event: {source}")


def _handle_drag_event(state, event, actions):
    action = event.get('action')
    if action == 'move':
        moved = table.move_entry(state, event.get('source'), event.get('target'))
        if moved is state:
            return state, None
        return moved, _reordered(actions, state, moved)
    if action == 'step':
        return table.drag_step(state, int(event.get('delta') or 0)), None
    if action == 'cancel':
        return table.cancel_drag(state), None
    logger.warning(f"Ignoring unknown drag action: {action}")
    return state, None
