"""
Login gate for Dash page layouts.
"""

from dash import dcc
from flask_login import current_user


def login_redirect():
    """A component that sends the browser to the login page when rendered."""
    return dcc.Location(pathname="/login", id="login-gate-redirect", refresh=True)


def is_logged_in():
    return bool(current_user and current_user.is_authenticated)
