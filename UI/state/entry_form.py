"""
Entry form state machine.

    idle --open_create/open_edit--> composing --begin_submit--> submitting
    submitting --submit_succeeded--> idle
    submitting --submit_failed--> composing (error shown, fields kept)

The form is in "create" mode when no entry id is preloaded and in "edit"
mode when an existing entry's fields are.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from db_models.entries import ENTRY_STATUSES, STATUS_IN_PROCESS

IDLE = 'idle'
COMPOSING = 'composing'
SUBMITTING = 'submitting'

MODE_CREATE = 'create'
MODE_EDIT = 'edit'

REQUIRED_FIELDS = ('header', 'type', 'target', 'limit')
FIELD_LABELS = {
    'header': 'Header',
    'type': 'Type',
    'status': 'Status',
    'target': 'Target',
    'limit': 'Limit',
    'reviewer': 'Reviewer',
}


def empty_fields() -> Dict[str, Any]:
    return {
        'id': '',
        'header': '',
        'type': '',
        'status': STATUS_IN_PROCESS,
        'target': '',
        'limit': '',
        'reviewer': '',
    }


class EntryValidationError(Exception):
    """Raised before submission when the form fields are incomplete or invalid."""

    def __init__(self, message: str, fields: List[str]):
        super().__init__(message)
        self.message = message
        self.fields = fields


@dataclass(frozen=True)
class EntryFormState:
    phase: str = IDLE
    fields: Dict[str, Any] = field(default_factory=empty_fields)
    error: Optional[str] = None
    notice: Optional[str] = None

    @property
    def mode(self) -> Optional[str]:
        if self.phase == IDLE:
            return None
        return MODE_EDIT if self.fields.get('id') else MODE_CREATE

    @property
    def is_open(self) -> bool:
        return self.phase != IDLE

    def to_dict(self) -> Dict[str, Any]:
        return {'phase': self.phase, 'fields': dict(self.fields), 'error': self.error,
                'notice': self.notice}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'EntryFormState':
        if not data:
            return cls()
        fields = empty_fields()
        fields.update(data.get('fields') or {})
        return cls(phase=data.get('phase', IDLE), fields=fields, error=data.get('error'),
                   notice=data.get('notice'))


def _is_blank(value) -> bool:
    return value is None or str(value).strip() == ''


def _parse_count(value, label: str) -> int:
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise EntryValidationError(f"{label} must be a whole number.", [label.lower()])
    if number < 0:
        raise EntryValidationError(f"{label} cannot be negative.", [label.lower()])
    return number


def validate_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check the form fields and build the request payload.

    Returns:
        dict: payload for POST (no id) or PUT (with id)

    Raises:
        EntryValidationError: when a required field is empty or a number is invalid
    """
    missing = [name for name in REQUIRED_FIELDS if _is_blank(fields.get(name))]
    if missing:
        labels = ', '.join(FIELD_LABELS[name] for name in missing)
        raise EntryValidationError(f"Required field missing: {labels}", missing)

    status = fields.get('status') or STATUS_IN_PROCESS
    if status not in ENTRY_STATUSES:
        raise EntryValidationError(f"Status must be one of: {', '.join(ENTRY_STATUSES)}", ['status'])

    payload = {
        'header': str(fields['header']).strip(),
        'type': str(fields['type']).strip(),
        'status': status,
        'target': _parse_count(fields['target'], 'Target'),
        'limit': _parse_count(fields['limit'], 'Limit'),
        'reviewer': None if _is_blank(fields.get('reviewer')) else str(fields['reviewer']).strip(),
    }
    if fields.get('id'):
        payload['id'] = fields['id']
    return payload


def open_create() -> EntryFormState:
    return EntryFormState(phase=COMPOSING, fields=empty_fields())


def open_edit(entry: Dict[str, Any]) -> EntryFormState:
    """Preload an existing entry's fields; numbers become text for the inputs."""
    fields = empty_fields()
    fields.update({
        'id': entry.get('id') or '',
        'header': entry.get('header') or '',
        'type': entry.get('type') or '',
        'status': entry.get('status') or STATUS_IN_PROCESS,
        'target': '' if entry.get('target') is None else str(entry['target']),
        'limit': '' if entry.get('limit') is None else str(entry['limit']),
        'reviewer': entry.get('reviewer') or '',
    })
    return EntryFormState(phase=COMPOSING, fields=fields)


def close() -> EntryFormState:
    return EntryFormState()


def update_fields(state: EntryFormState, **changes) -> EntryFormState:
    if state.phase != COMPOSING:
        return state
    fields = dict(state.fields)
    fields.update(changes)
    return replace(state, fields=fields)


def begin_submit(state: EntryFormState) -> Tuple[EntryFormState, Optional[Dict[str, Any]]]:
    """
    Validate and move to submitting.

    Returns:
        tuple: (new_state, payload). payload is None when validation failed,
        in which case new_state carries the error and no request may be sent.
    """
    if state.phase != COMPOSING:
        return state, None
    try:
        payload = validate_fields(state.fields)
    except EntryValidationError as e:
        return replace(state, error=e.message), None
    return replace(state, phase=SUBMITTING, error=None), payload


def submit_succeeded(state: EntryFormState, notice: Optional[str] = None) -> EntryFormState:
    """Close the form. notice is a message for the table after a save that is not shown yet."""
    return EntryFormState(notice=notice)


def submit_failed(state: EntryFormState, message: str) -> EntryFormState:
    return replace(state, phase=COMPOSING, error=message)
