import dash
import dash_bootstrap_components as dbc
from dash import html

from UI.pages.components import navbar
from UI.utils.page_guard import is_logged_in, login_redirect

dash.register_page(__name__, path='/chart-data', title='Chart data')


def layout(**kwargs):
    if not is_logged_in():
        return login_redirect()

    form = dbc.Card(dbc.CardBody([
        html.H5("Add visitor data", className="mb-3"),
        dbc.Label("Date", html_for="visitor-date-input"),
        dbc.Input(id="visitor-date-input", type="date", className="mb-3"),
        dbc.Row([
            dbc.Col([dbc.Label("Desktop", html_for="visitor-desktop-input"),
                     dbc.Input(id="visitor-desktop-input", type="number", min=0, step=1)]),
            dbc.Col([dbc.Label("Mobile", html_for="visitor-mobile-input"),
                     dbc.Input(id="visitor-mobile-input", type="number", min=0, step=1)]),
        ], className="mb-4"),
        dbc.Button([html.I(className="fas fa-plus me-2"), "Save"], id="visitor-save-button",
                   color="primary", n_clicks=0),
        html.Div(id="visitor-save-result", className="mt-3 fw-semibold"),
    ]), className="shadow-sm")

    return html.Div([
        navbar('/chart-data'),
        dbc.Container([
            dbc.Row([
                dbc.Col(form, md=4, className="mb-4"),
                dbc.Col(html.Div(id="visitor-table-container"), md=8),
            ]),
        ], fluid=True),
    ])
