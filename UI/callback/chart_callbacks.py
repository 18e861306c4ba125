"""
Visitor chart callbacks: the dashboard chart and the chart data page.
"""

import logging

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, State, ALL, ctx, html
from dash.exceptions import PreventUpdate

from UI.app import app
from UI.constants import TIME_RANGES, DEFAULT_TIME_RANGE
from UI.pages.dashboard.ids import DashboardIds as IDS
from UI.pages.components.visitor_chart import create_visitor_figure
from UI.utils.page_guard import is_logged_in
from api.errors import APIError
from api.visitors_api import list_visitors, upsert_visitor, remove_visitor
from utils.visitor_series import visitor_frame, last_n_days, series_totals

logger = logging.getLogger(__name__)


@app.callback(
    [Output(IDS.VISITOR_CHART, 'figure'),
     Output('visitor-chart-caption', 'children')],
    [Input(IDS.VISITOR_RANGE, 'value'),
     Input(IDS.VISITOR_REFRESH, 'n_intervals')],
)
def update_visitor_chart(range_key, n_intervals):
    if not is_logged_in():
        raise PreventUpdate
    days = TIME_RANGES.get(range_key or DEFAULT_TIME_RANGE, TIME_RANGES[DEFAULT_TIME_RANGE])
    rows = [v.to_dict() for v in list_visitors()]
    totals = series_totals(last_n_days(visitor_frame(rows), days))
    caption = f"Total for the last {days} days: {totals['desktop'] + totals['mobile']:,}"
    return create_visitor_figure(rows, days), caption


def _visitor_table(rows):
    if not rows:
        return html.P("No visitor data yet.", className="text-muted")
    header = html.Thead(html.Tr([html.Th("Date"), html.Th("Desktop"), html.Th("Mobile"), html.Th("")]))
    body = html.Tbody([
        html.Tr([
            html.Td(r['date']),
            html.Td(r['desktop']),
            html.Td(r['mobile']),
            html.Td(dbc.Button(html.I(className="fas fa-trash"),
                               id={'type': 'visitor-delete', 'index': r['id']},
                               color="link", size="sm", className="text-danger", n_clicks=0)),
        ]) for r in reversed(rows)
    ])
    return dbc.Table([header, body], hover=True, size="sm", className="bg-white")


@app.callback(
    [Output('visitor-table-container', 'children'),
     Output('visitor-save-result', 'children')],
    [Input('visitor-save-button', 'n_clicks'),
     Input({'type': 'visitor-delete', 'index': ALL}, 'n_clicks')],
    [State('visitor-date-input', 'value'),
     State('visitor-desktop-input', 'value'),
     State('visitor-mobile-input', 'value')],
)
def manage_visitor_rows(save_clicks, delete_clicks, day, desktop, mobile):
    if not is_logged_in():
        raise PreventUpdate
    triggered = ctx.triggered_id
    message = ""
    try:
        if triggered == 'visitor-save-button' and save_clicks:
            record = upsert_visitor(day, desktop, mobile)
            message = html.Span(f"Saved visitor data for {record.date.isoformat()}.", className="text-success")
        elif isinstance(triggered, dict) and triggered.get('type') == 'visitor-delete':
            if not ctx.triggered[0]['value']:
                raise PreventUpdate
            remove_visitor(triggered['index'])
            message = html.Span("Visitor row removed.", className="text-success")
    except APIError as e:
        message = html.Span(e.message, className="text-danger")

    rows = [v.to_dict() for v in list_visitors()]
    return _visitor_table(rows), message
