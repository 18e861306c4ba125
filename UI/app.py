"""
Dash application and the Flask server it runs on.

Pages under UI/pages register themselves with dash.register_page; callback
modules import `app` from here and are imported by main.py.
"""

import dash
import dash_bootstrap_components as dbc
from dash import dcc, html
from flask import redirect, request

from app_factory import create_server
from config import Config
from UI.utils.page_guard import is_logged_in

server = create_server(Config)

app = dash.Dash(
    __name__,
    server=server,
    use_pages=True,
    suppress_callback_exceptions=True,
    title='Dashboard',
    external_stylesheets=[dbc.themes.BOOTSTRAP, dbc.icons.FONT_AWESOME],
)

app.layout = html.Div([
    dcc.Location(id='url', refresh='callback-nav'),
    dash.page_container,
])


@server.before_request
def redirect_root():
    # Dash owns the "/" view, so the landing redirect happens before it
    if request.path == '/':
        return redirect('/dashboard' if is_logged_in() else '/login')
    return None
