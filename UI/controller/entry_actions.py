"""
Entry Actions

Operations of the entries table that talk to the CRUD endpoint: refresh,
create/edit submission, delete and the order-persistence hook.

Each operation performs at most one request through EntriesClient (plus a
refetch after a create) and returns the store updates to apply with
entry_table.apply_updates(), together with the new form state or a
user-facing error message. Errors never escape: they are turned into
messages at this boundary and a failed request produces no store update.

A per-entry in-flight guard rejects an edit or delete for an entry while
another request for the same entry is still outstanding.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from UI.state import entry_table as table
from UI.state import entry_form as form
from UI.state.entry_form import EntryFormState
from utils.entries_client import (
    EntriesClient,
    EntryNotFoundError,
    EntryServiceError,
    GENERIC_ERROR_MESSAGE,
)

logger = logging.getLogger(__name__)

IN_FLIGHT_MESSAGE = "A request for this entry is already in progress."
NOT_FOUND_MESSAGE = "This entry no longer exists. Reload the table to see the latest data."
SAVED_NOT_SHOWN_MESSAGE = "Entry saved. Reload the table to see it."

Ops = List[Dict]


def noop_persist_order(ordered_ids):
    """Default order hook: reordering stays in the browser session only."""
    return None


class InFlightRegistry:
    """Ids with an outstanding request. Shared by all callback threads."""

    def __init__(self):
        self._lock = threading.Lock()
        self._ids = set()

    def acquire(self, entry_id: str) -> bool:
        with self._lock:
            if entry_id in self._ids:
                return False
            self._ids.add(entry_id)
            return True

    def release(self, entry_id: str) -> None:
        with self._lock:
            self._ids.discard(entry_id)

    def __contains__(self, entry_id) -> bool:
        with self._lock:
            return entry_id in self._ids


class EntryActions:
    """
    Args:
        client: EntriesClient for the CRUD endpoint
        persist_order: called with the ordered list of entry ids after every
            completed reorder; defaults to a no-op
        refetch_after_create: refetch the whole table after a create (default)
            instead of inserting the returned entry locally
    """

    def __init__(self, client: EntriesClient,
                 persist_order: Optional[Callable[[List[str]], None]] = None,
                 refetch_after_create: bool = True,
                 in_flight: Optional[InFlightRegistry] = None):
        self.client = client
        self.persist_order = persist_order or noop_persist_order
        self.refetch_after_create = refetch_after_create
        self.in_flight = in_flight or InFlightRegistry()

    # -------- Read --------

    def refresh(self) -> Tuple[Ops, Optional[str]]:
        try:
            entries = self.client.list_entries()
        except EntryServiceError as e:
            logger.error(f"Failed to fetch entries: {e.message}")
            return [], e.message or GENERIC_ERROR_MESSAGE
        return [table.load_op(entries)], None

    # -------- Create / edit --------

    def submit(self, form_state: EntryFormState) -> Tuple[Ops, EntryFormState]:
        """
        Validate and send the form. On validation failure no request is made.
        On a failed request the form stays open with the error and there are
        no store updates.
        """
        form_state, payload = form.begin_submit(form_state)
        if payload is None:
            return [], form_state

        entry_id = payload.get('id')
        if entry_id and not self.in_flight.acquire(entry_id):
            return [], form.submit_failed(form_state, IN_FLIGHT_MESSAGE)

        notice = None
        try:
            if entry_id:
                updated = self.client.update_entry(payload)
                ops = [table.patch_op(updated or payload)]
                logger.info("Entry %s updated", entry_id)
            else:
                created = self.client.create_entry(payload)
                ops, notice = self._after_create(created)
                logger.info("Entry %s created", (created or {}).get('id'))
        except EntryNotFoundError as e:
            logger.warning(f"Entry {entry_id} not found on save: {e.message}")
            return [], form.submit_failed(form_state, NOT_FOUND_MESSAGE)
        except EntryServiceError as e:
            return [], form.submit_failed(form_state, e.message or GENERIC_ERROR_MESSAGE)
        finally:
            if entry_id:
                self.in_flight.release(entry_id)

        return ops, form.submit_succeeded(form_state, notice)

    def _after_create(self, created) -> Tuple[Ops, Optional[str]]:
        """Store updates after a create, plus a notice when the new entry cannot be shown."""
        if self.refetch_after_create or not created:
            try:
                return [table.load_op(self.client.list_entries())], None
            except EntryServiceError as e:
                # The entry exists server side either way
                logger.warning(f"Refetch after create failed: {e.message}")
                if not created:
                    return [], SAVED_NOT_SHOWN_MESSAGE
        return [table.append_op(created)], None

    # -------- Delete --------

    def delete(self, entry_id: str) -> Tuple[Ops, Optional[str]]:
        """Delete after the user confirmed. Returns (updates, error_message)."""
        if not entry_id:
            return [], "Invalid entry id"
        if not self.in_flight.acquire(entry_id):
            return [], IN_FLIGHT_MESSAGE
        try:
            self.client.delete_entry(entry_id)
        except EntryNotFoundError:
            return [], NOT_FOUND_MESSAGE
        except EntryServiceError as e:
            return [], e.message or GENERIC_ERROR_MESSAGE
        finally:
            self.in_flight.release(entry_id)

        logger.info("Entry %s deleted", entry_id)
        return [table.remove_op(entry_id)], None

    # -------- Reorder --------

    def after_reorder(self, before_ids: Sequence[str], after_ids: Sequence[str]) -> Optional[str]:
        """Invoke the order hook when a completed reorder changed the order."""
        if list(before_ids) == list(after_ids):
            return None
        try:
            self.persist_order(list(after_ids))
        except Exception as e:
            logger.error(f"Persisting entry order failed: {str(e)}")
            return "The new order could not be saved."
        return None
