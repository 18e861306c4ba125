import dash
import dash_bootstrap_components as dbc
from dash import html, dcc

from UI.constants import TIME_RANGES, DEFAULT_TIME_RANGE
from UI.pages.dashboard.ids import DashboardIds as IDS
from UI.pages.components import entry_form_modal, navbar
from UI.pages.components.entry_table import create_entry_table_section
from UI.state.entry_table import EntryTableState
from UI.utils.page_guard import is_logged_in, login_redirect

dash.register_page(__name__, path='/dashboard', title='Dashboard')


def _chart_card():
    return dbc.Card([
        dbc.CardHeader(html.Div([
            html.Div([
                html.H5("Total Visitors", className="mb-0"),
                html.Small(id="visitor-chart-caption", className="text-muted"),
            ]),
            dbc.RadioItems(
                id=IDS.VISITOR_RANGE,
                options=[{"label": f"Last {days} days", "value": key} for key, days in TIME_RANGES.items()],
                value=DEFAULT_TIME_RANGE,
                inline=True,
                class_name="btn-group",
                input_class_name="btn-check",
                label_class_name="btn btn-outline-secondary btn-sm",
                label_checked_class_name="active",
            ),
        ], className="d-flex justify-content-between align-items-center"), className="bg-white"),
        dbc.CardBody(dcc.Graph(id=IDS.VISITOR_CHART, config={"displayModeBar": False})),
        dcc.Interval(id=IDS.VISITOR_REFRESH, interval=30 * 1000),
    ], className="shadow-sm")


def layout(**kwargs):
    if not is_logged_in():
        return login_redirect()

    return html.Div([
        navbar('/dashboard'),
        dbc.Container([
            dbc.Alert(id=IDS.CARDS_ALERT, is_open=False, color="danger", children=[
                html.Span(id="kpi-cards-error"),
                dbc.Button("Retry", id=IDS.CARDS_RETRY, size="sm", color="link"),
            ]),
            html.Div(id=IDS.CARDS_CONTAINER),
            _chart_card(),
            create_entry_table_section(EntryTableState()),
            entry_form_modal(),
        ], fluid=True, className="pb-5"),
    ])
