"""
KPI card callbacks: the dashboard card grid and the card editor page.
"""

import logging

import dash
from dash import Input, Output, State, html
from dash.exceptions import PreventUpdate
from flask_login import current_user

from UI.app import app
from UI.pages.dashboard.ids import DashboardIds as IDS
from UI.pages.components.kpi_cards import kpi_card_grid
from UI.utils.page_guard import is_logged_in
from api.cards_api import list_cards, save_card
from api.errors import APIError
from db_models.databases import db

logger = logging.getLogger(__name__)


def _load_cards():
    return [c.to_dict() for c in list_cards()]


@app.callback(
    [Output(IDS.CARDS_CONTAINER, 'children'),
     Output(IDS.CARDS_ALERT, 'is_open'),
     Output('kpi-cards-error', 'children')],
    Input(IDS.CARDS_RETRY, 'n_clicks'),
)
def render_dashboard_cards(retry_clicks):
    if not is_logged_in():
        raise PreventUpdate
    try:
        return kpi_card_grid(_load_cards()), False, ""
    except Exception as e:
        db.session.rollback()
        logger.error(f"Error fetching cards: {str(e)}")
        return dash.no_update, True, "Failed to load cards."


@app.callback(
    [Output('card-current-input', 'value'),
     Output('card-previous-input', 'value'),
     Output('card-description-input', 'value'),
     Output('card-note-input', 'value')],
    Input('card-heading-select', 'value'),
)
def preload_card_fields(heading):
    """Fill the editor with the stored values of the chosen heading."""
    if not heading or not is_logged_in():
        raise PreventUpdate
    for card in _load_cards():
        if card['heading'] == heading:
            return card['currentValue'], card['previousValue'], card['description'] or '', card['note'] or ''
    return None, None, '', ''


@app.callback(
    [Output('card-save-result', 'children'),
     Output('card-preview-grid', 'children')],
    Input('card-save-button', 'n_clicks'),
    [State('card-heading-select', 'value'),
     State('card-current-input', 'value'),
     State('card-previous-input', 'value'),
     State('card-description-input', 'value'),
     State('card-note-input', 'value')],
)
def save_card_values(n_clicks, heading, current_value, previous_value, description, note):
    if not is_logged_in():
        raise PreventUpdate
    if not n_clicks:
        return "", kpi_card_grid(_load_cards())
    if current_value is None or previous_value is None:
        return html.Span("Current and previous values are required.", className="text-danger"), dash.no_update

    try:
        card = save_card(heading, current_value, previous_value, description, note,
                         user_id=current_user.id if current_user.is_authenticated else None)
    except APIError as e:
        return html.Span(e.message, className="text-danger"), dash.no_update

    logger.info("Card saved from editor: %s", card.heading)
    return html.Span("Card saved successfully.", className="text-success"), kpi_card_grid(_load_cards())
