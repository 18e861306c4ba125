import dash
import dash_bootstrap_components as dbc
from dash import html

from UI.constants import CARD_HEADINGS
from UI.pages.components import navbar
from UI.utils.page_guard import is_logged_in, login_redirect

dash.register_page(__name__, path='/cards', title='KPI cards')


def layout(**kwargs):
    if not is_logged_in():
        return login_redirect()

    form = dbc.Card(dbc.CardBody([
        html.H5("Update a card", className="mb-3"),
        dbc.Label("Heading", html_for="card-heading-select"),
        dbc.Select(id="card-heading-select",
                   options=[{"label": h, "value": h} for h in CARD_HEADINGS],
                   value=CARD_HEADINGS[0], className="mb-3"),
        dbc.Row([
            dbc.Col([dbc.Label("Current value", html_for="card-current-input"),
                     dbc.Input(id="card-current-input", type="number")]),
            dbc.Col([dbc.Label("Previous value", html_for="card-previous-input"),
                     dbc.Input(id="card-previous-input", type="number")]),
        ], className="mb-3"),
        dbc.Label("Description", html_for="card-description-input"),
        dbc.Input(id="card-description-input", className="mb-3"),
        dbc.Label("Note", html_for="card-note-input"),
        dbc.Input(id="card-note-input", className="mb-4"),
        dbc.Button([html.I(className="fas fa-save me-2"), "Save card"], id="card-save-button",
                   color="primary", n_clicks=0),
        html.Div(id="card-save-result", className="mt-3 fw-semibold"),
    ]), className="shadow-sm")

    return html.Div([
        navbar('/cards'),
        dbc.Container([
            dbc.Row([
                dbc.Col(form, md=5, className="mb-4"),
                dbc.Col(html.Div(id="card-preview-grid"), md=7),
            ]),
        ], fluid=True),
    ])
