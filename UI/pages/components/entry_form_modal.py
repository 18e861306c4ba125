"""
Modal dialog used to add a new entry or update an existing one.
"""

import dash_bootstrap_components as dbc
from dash import html

from UI.constants import ENTRY_STATUSES, STATUS_IN_PROCESS
from UI.pages.dashboard.ids import DashboardIds as IDS


def _field(label, component, required=False):
    return html.Div([
        dbc.Label([label, html.Span(" *", className="text-danger") if required else None],
                  html_for=component.id),
        component,
    ], className="mb-3")


def entry_form_modal():
    return dbc.Modal([
        dbc.ModalHeader(dbc.ModalTitle("Add New Entry", id=IDS.ENTRY_FORM_TITLE)),
        dbc.ModalBody([
            dbc.Alert(id=IDS.ENTRY_FORM_ERROR, color="danger", is_open=False, className="py-2"),
            _field("Header", dbc.Input(id=IDS.ENTRY_FIELD_HEADER, type="text"), required=True),
            _field("Type", dbc.Input(id=IDS.ENTRY_FIELD_TYPE, type="text"), required=True),
            _field("Status", dbc.Select(
                id=IDS.ENTRY_FIELD_STATUS,
                options=[{"label": s, "value": s} for s in ENTRY_STATUSES],
                value=STATUS_IN_PROCESS,
            )),
            dbc.Row([
                dbc.Col(_field("Target", dbc.Input(id=IDS.ENTRY_FIELD_TARGET, type="number", min=0, step=1),
                               required=True)),
                dbc.Col(_field("Limit", dbc.Input(id=IDS.ENTRY_FIELD_LIMIT, type="number", min=0, step=1),
                               required=True)),
            ]),
            _field("Reviewer (Optional)", dbc.Input(id=IDS.ENTRY_FIELD_REVIEWER, type="text")),
        ]),
        dbc.ModalFooter([
            dbc.Button("Cancel", id=IDS.ENTRY_FORM_CANCEL, color="secondary", outline=True, className="me-2"),
            dbc.Button("Add Entry", id=IDS.ENTRY_FORM_SUBMIT, color="primary"),
        ]),
    ],
        id=IDS.ENTRY_FORM_MODAL,
        is_open=False,
        backdrop="static",
    )
