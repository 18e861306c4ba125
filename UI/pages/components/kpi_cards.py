"""
KPI card grid for the dashboard header.
"""

import dash_bootstrap_components as dbc
from dash import html

from UI.constants import CARD_HEADINGS
from utils.formatting import format_card_value, format_change_percent, trend_label


def kpi_card(card):
    change = card.get('changePercent') or 0
    positive = change >= 0
    return dbc.Card(
        dbc.CardBody([
            html.Div([
                html.Span(card['heading'], className="text-muted"),
                dbc.Badge(
                    [html.I(className=f"fas fa-arrow-trend-{'up' if positive else 'down'} me-1"),
                     format_change_percent(change)],
                    color="light",
                    text_color="success" if positive else "danger",
                    className="border",
                ),
            ], className="d-flex justify-content-between align-items-center"),
            html.H3(format_card_value(card.get('currentValue'), card['heading']),
                    className="fw-bold my-2"),
            html.Div(trend_label(change), className="fw-semibold small"),
            html.Div(card.get('description') or '', className="text-muted small"),
            html.Div(card.get('note') or '', className="text-muted small fst-italic"),
        ]),
        className="h-100 shadow-sm",
    )


def placeholder_card(heading):
    return dbc.Card(
        dbc.CardBody([
            html.Span(heading, className="text-muted"),
            html.H3("--", className="fw-bold my-2"),
            html.A("Set a value", href="/cards", className="small"),
        ]),
        className="h-100 shadow-sm",
    )


def kpi_card_grid(cards):
    """One column per fixed heading, in the fixed heading order."""
    by_heading = {c['heading']: c for c in cards}
    cols = []
    for heading in CARD_HEADINGS:
        card = by_heading.get(heading)
        body = kpi_card(card) if card else placeholder_card(heading)
        cols.append(dbc.Col(body, xs=12, md=6, xl=3, className="mb-3"))
    return dbc.Row(cols)
