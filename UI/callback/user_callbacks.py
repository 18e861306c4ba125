from dash import Input, Output
from dash.exceptions import PreventUpdate
from flask_login import logout_user

from UI.app import app
from UI.pages.dashboard.ids import DashboardIds as IDS


@app.callback(
    Output("url", "href"),
    Input(IDS.LOGOUT_BUTTON, "n_clicks"),
    prevent_initial_call=True
)
def handle_logout(n_clicks):
    """Clear the session and go back to the login page."""
    if not n_clicks:
        raise PreventUpdate
    logout_user()
    return "/login"
