"""
Entry Table State

Client-side state of the entries table: the ordered entry store, pagination,
the page-scoped selection and the held row of a keyboard drag.

The state is an immutable value and every operation is a pure transition
returning a new state, so it can live in a dcc.Store between callbacks and be
tested without a browser. to_dict()/from_dict() convert to and from the JSON
kept in the store.

Policies:
- Selection is scoped to the visible page. Any transition that changes the
  visible slice drops selected ids that are no longer visible.
- After the store shrinks or grows, the page index is clamped to the last
  valid page.
- Reordering (drag or sort) only changes client order; nothing is persisted
  here. Callers compare entry_ids() before/after to decide whether to invoke
  an order-persistence hook.
"""

import math
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

PAGE_SIZE_OPTIONS = (5, 10, 20, 50)
DEFAULT_PAGE_SIZE = 10
SORTABLE_COLUMNS = ('header', 'type', 'status', 'target', 'limit', 'reviewer')


@dataclass(frozen=True)
class DragState:
    entry_id: str
    origin_order: Tuple[str, ...]


@dataclass(frozen=True)
class EntryTableState:
    entries: Tuple[Dict[str, Any], ...] = ()
    page_index: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    selected: Tuple[str, ...] = ()
    drag: Optional[DragState] = None
    sort_column: Optional[str] = None
    sort_ascending: bool = True
    loaded: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'entries': [dict(e) for e in self.entries],
            'page_index': self.page_index,
            'page_size': self.page_size,
            'selected': list(self.selected),
            'drag': None if self.drag is None else {
                'entry_id': self.drag.entry_id,
                'origin_order': list(self.drag.origin_order),
            },
            'sort_column': self.sort_column,
            'sort_ascending': self.sort_ascending,
            'loaded': self.loaded,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'EntryTableState':
        if not data:
            return cls()
        drag = data.get('drag')
        return cls(
            entries=tuple(dict(e) for e in data.get('entries') or []),
            page_index=int(data.get('page_index') or 1),
            page_size=int(data.get('page_size') or DEFAULT_PAGE_SIZE),
            selected=tuple(data.get('selected') or []),
            drag=None if not drag else DragState(drag['entry_id'], tuple(drag['origin_order'])),
            sort_column=data.get('sort_column'),
            sort_ascending=bool(data.get('sort_ascending', True)),
            loaded=bool(data.get('loaded', False)),
        )


# ---------------------------------------------------------------------------
# Pagination view
# ---------------------------------------------------------------------------

def total_pages(total: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return math.ceil(total / page_size)


def visible_page(entries: Sequence[Dict[str, Any]], page_index: int, page_size: int) -> List[Dict[str, Any]]:
    """
    Slice of entries shown on a page (1-based).

    Returns fewer than page_size rows on the last page and an empty list when
    page_index is out of range.
    """
    if page_index < 1 or page_size <= 0:
        return []
    start = (page_index - 1) * page_size
    return list(entries[start:start + page_size])


def page_count(state: EntryTableState) -> int:
    return total_pages(len(state.entries), state.page_size)


def current_page(state: EntryTableState) -> List[Dict[str, Any]]:
    return visible_page(state.entries, state.page_index, state.page_size)


def visible_ids(state: EntryTableState) -> List[str]:
    return [e['id'] for e in current_page(state)]


def entry_ids(state: EntryTableState) -> List[str]:
    return [e['id'] for e in state.entries]


def find_entry(state: EntryTableState, entry_id: str) -> Optional[Dict[str, Any]]:
    for entry in state.entries:
        if entry['id'] == entry_id:
            return entry
    return None


def _clamp_page(index: int, total: int, page_size: int) -> int:
    last = max(1, total_pages(total, page_size))
    return min(max(1, index), last)


def _normalize(state: EntryTableState) -> EntryTableState:
    """Clamp the page index and prune the selection to the visible page."""
    index = _clamp_page(state.page_index, len(state.entries), state.page_size)
    visible = {e['id'] for e in visible_page(state.entries, index, state.page_size)}
    selected = tuple(i for i in state.selected if i in visible)
    drag = state.drag
    if drag is not None and drag.entry_id not in visible:
        drag = None
    return replace(state, page_index=index, selected=selected, drag=drag)


def set_page(state: EntryTableState, page_index: int) -> EntryTableState:
    return _normalize(replace(state, page_index=page_index))


def go_to_page(state: EntryTableState, where: str) -> EntryTableState:
    """Navigate with one of 'first', 'previous', 'next', 'last'."""
    moves = {
        'first': 1,
        'previous': state.page_index - 1,
        'next': state.page_index + 1,
        'last': page_count(state),
    }
    if where not in moves:
        raise ValueError(f"Unknown page navigation: {where}")
    return set_page(state, moves[where])


def set_page_size(state: EntryTableState, page_size: int) -> EntryTableState:
    page_size = int(page_size)
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return _normalize(replace(state, page_size=page_size, page_index=1))


# ---------------------------------------------------------------------------
# Entry store
# ---------------------------------------------------------------------------

def load(state: EntryTableState, entries: Sequence[Dict[str, Any]]) -> EntryTableState:
    """Replace the store with a fresh fetch, keeping fetch order (newest first)."""
    fresh = tuple(dict(e) for e in entries)
    return _normalize(replace(
        state,
        entries=fresh,
        drag=None,
        sort_column=None,
        sort_ascending=True,
        loaded=True,
    ))


def patch_entry(state: EntryTableState, updated: Dict[str, Any]) -> EntryTableState:
    """Merge returned fields into the entry with the same id, keeping its position."""
    entry_id = updated.get('id')
    entries = tuple(
        {**e, **updated} if e['id'] == entry_id else e
        for e in state.entries
    )
    return replace(state, entries=entries)


def append_entry(state: EntryTableState, entry: Dict[str, Any]) -> EntryTableState:
    """Optimistic insert at the top of the store (newest first)."""
    if find_entry(state, entry['id']) is not None:
        return patch_entry(state, entry)
    return _normalize(replace(state, entries=(dict(entry),) + state.entries))


def remove_entry(state: EntryTableState, entry_id: str) -> EntryTableState:
    entries = tuple(e for e in state.entries if e['id'] != entry_id)
    selected = tuple(i for i in state.selected if i != entry_id)
    return _normalize(replace(state, entries=entries, selected=selected))


def _sort_key(column: str):
    def key(entry):
        value = entry.get(column)
        if value is None:
            return (1, '')
        if isinstance(value, str):
            return (0, value.lower())
        return (0, value)
    return key


def sort_by(state: EntryTableState, column: str, ascending: Optional[bool] = None) -> EntryTableState:
    """
    Sort the store by a column. Without an explicit direction, sorting the
    same column again flips it. None values always sort last.
    """
    if column not in SORTABLE_COLUMNS:
        raise ValueError(f"Column is not sortable: {column}")
    if ascending is None:
        ascending = not state.sort_ascending if state.sort_column == column else True
    present = [e for e in state.entries if e.get(column) is not None]
    missing = [e for e in state.entries if e.get(column) is None]
    present.sort(key=_sort_key(column), reverse=not ascending)
    return _normalize(replace(
        state,
        entries=tuple(present + missing),
        sort_column=column,
        sort_ascending=ascending,
        drag=None,
    ))


# ---------------------------------------------------------------------------
# Selection tracker
# ---------------------------------------------------------------------------

def toggle(state: EntryTableState, entry_id: str) -> EntryTableState:
    if entry_id not in visible_ids(state):
        return state
    if entry_id in state.selected:
        selected = tuple(i for i in state.selected if i != entry_id)
    else:
        selected = state.selected + (entry_id,)
    return replace(state, selected=selected)


def all_visible_selected(state: EntryTableState) -> bool:
    ids = visible_ids(state)
    return bool(ids) and all(i in state.selected for i in ids)


def toggle_all(state: EntryTableState) -> EntryTableState:
    """Clear when the whole page is selected, otherwise select the whole page."""
    if all_visible_selected(state):
        return replace(state, selected=())
    return replace(state, selected=tuple(visible_ids(state)))


def selection_summary(state: EntryTableState) -> str:
    return f"{len(state.selected)} of {len(state.entries)} row(s) selected."


# ---------------------------------------------------------------------------
# Drag reorder
# ---------------------------------------------------------------------------

def array_move(items: Sequence[Any], old_index: int, new_index: int) -> List[Any]:
    moved = list(items)
    moved.insert(new_index, moved.pop(old_index))
    return moved


def _index_of(state: EntryTableState, entry_id: str) -> int:
    for i, entry in enumerate(state.entries):
        if entry['id'] == entry_id:
            return i
    return -1


def move_entry(state: EntryTableState, source_id: str, target_id: Optional[str]) -> EntryTableState:
    """
    Drop source_id onto target_id: the source is taken out and reinserted at
    the target's index. Both rows must be on the rendered page; a drop on
    itself or on nothing leaves the state untouched.
    """
    if not target_id or source_id == target_id:
        return state
    page = visible_ids(state)
    if source_id not in page or target_id not in page:
        return state
    old_index = _index_of(state, source_id)
    new_index = _index_of(state, target_id)
    return replace(state, entries=tuple(array_move(state.entries, old_index, new_index)))


def begin_drag(state: EntryTableState, entry_id: str) -> EntryTableState:
    """Pick up a row for keyboard reordering."""
    if entry_id not in visible_ids(state):
        return state
    return replace(state, drag=DragState(entry_id, tuple(entry_ids(state))))


def drag_step(state: EntryTableState, delta: int) -> EntryTableState:
    """Move the held row up (negative) or down (positive) within the page."""
    if state.drag is None or delta == 0:
        return state
    page_start = (state.page_index - 1) * state.page_size
    page_end = page_start + len(current_page(state)) - 1
    old_index = _index_of(state, state.drag.entry_id)
    new_index = min(max(old_index + delta, page_start), page_end)
    if new_index == old_index:
        return state
    return replace(state, entries=tuple(array_move(state.entries, old_index, new_index)))


def drop(state: EntryTableState) -> EntryTableState:
    """Confirm the keyboard move at the current position."""
    return replace(state, drag=None)


def cancel_drag(state: EntryTableState) -> EntryTableState:
    """Put the held row back where it was picked up."""
    if state.drag is None:
        return state
    by_id = {e['id']: e for e in state.entries}
    restored = [by_id[i] for i in state.drag.origin_order if i in by_id]
    restored += [e for e in state.entries if e['id'] not in state.drag.origin_order]
    return replace(state, entries=tuple(restored), drag=None)


# ---------------------------------------------------------------------------
# Store updates produced by completed requests
# ---------------------------------------------------------------------------

def load_op(entries: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    return {'op': 'load', 'entries': [dict(e) for e in entries]}


def patch_op(entry: Dict[str, Any]) -> Dict[str, Any]:
    return {'op': 'patch', 'entry': dict(entry)}


def append_op(entry: Dict[str, Any]) -> Dict[str, Any]:
    return {'op': 'append', 'entry': dict(entry)}


def remove_op(entry_id: str) -> Dict[str, Any]:
    return {'op': 'remove', 'id': entry_id}


def apply_updates(state: EntryTableState, ops: Sequence[Dict[str, Any]]) -> EntryTableState:
    """Apply store updates in order. Unknown operations raise ValueError."""
    for op in ops or []:
        kind = op.get('op')
        if kind == 'load':
            state = load(state, op['entries'])
        elif kind == 'patch':
            state = patch_entry(state, op['entry'])
        elif kind == 'append':
            state = append_entry(state, op['entry'])
        elif kind == 'remove':
            state = remove_entry(state, op['id'])
        else:
            raise ValueError(f"Unknown table update: {kind}")
    return state
