"""
Shared constants for the dashboard UI.
"""

from db_models.cards import CARD_HEADINGS
from db_models.entries import ENTRY_STATUSES, STATUS_IN_PROCESS
from UI.state.entry_table import PAGE_SIZE_OPTIONS, DEFAULT_PAGE_SIZE

# Visitor chart ranges: label -> number of days
TIME_RANGES = {
    '90d': 90,
    '30d': 30,
    '7d': 7,
}
DEFAULT_TIME_RANGE = '90d'

# Entry table columns in display order: (field, label, align)
ENTRY_COLUMNS = [
    ('header', 'Header', 'left'),
    ('type', 'Section Type', 'left'),
    ('status', 'Status', 'left'),
    ('target', 'Target', 'center'),
    ('limit', 'Limit', 'center'),
    ('reviewer', 'Reviewer', 'left'),
]

# Pages that require a logged in user
PROTECTED_PATHS = ('/dashboard', '/cards', '/chart-data')

__all__ = [
    'CARD_HEADINGS', 'ENTRY_STATUSES', 'STATUS_IN_PROCESS', 'PAGE_SIZE_OPTIONS',
    'DEFAULT_PAGE_SIZE', 'TIME_RANGES', 'DEFAULT_TIME_RANGE', 'ENTRY_COLUMNS',
    'PROTECTED_PATHS',
]
