"""
Utilities package for the dashboard UI.
"""

from UI.utils.page_guard import is_logged_in, login_redirect

__all__ = [
    'is_logged_in',
    'login_redirect',
]
