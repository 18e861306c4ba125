"""
Entry Table Component

Renders the entries table from an EntryTableState: drag handle, checkbox,
entry fields and an Edit/Delete menu per row, plus the pagination footer.

Rows are natively draggable (pointer) and each drag handle is a focusable
button that picks the row up for keyboard reordering. The browser side of
both lives in assets/entry_table_dnd.js and reports to the drag-event store.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html

from UI.constants import ENTRY_COLUMNS, PAGE_SIZE_OPTIONS
from UI.pages.dashboard.ids import DashboardIds as IDS
from UI.state import entry_table as table
from UI.state.entry_form import EntryFormState


def _row_id(kind, entry_id):
    return {'type': kind, 'index': entry_id}


def status_badge(status):
    color = "success" if status == "Done" else "light"
    text_color = "white" if status == "Done" else "secondary"
    return dbc.Badge(status, color=color, text_color=text_color, pill=True, className="border")


def _sort_indicator(state, column):
    if state.sort_column != column:
        return "fas fa-sort ms-1 text-muted"
    return "fas fa-sort-up ms-1" if state.sort_ascending else "fas fa-sort-down ms-1"


def render_table_header(state):
    cells = [
        html.Th(
            dbc.Checkbox(
                id=IDS.ENTRY_SELECT_ALL,
                value=table.all_visible_selected(state),
                input_class_name="entry-checkbox",
            ),
            style={"width": "5.5rem"},
        )
    ]
    for column, label, align in ENTRY_COLUMNS:
        cells.append(html.Th(
            html.Button(
                [label, html.I(className=_sort_indicator(state, column))],
                id=_row_id(IDS.ENTRY_SORT, column),
                n_clicks=0,
                className="btn btn-link p-0 fw-semibold text-dark text-decoration-none",
                **{'aria-label': f"Sort by {label}"},
            ),
            className=f"text-{'center' if align == 'center' else 'start'}",
        ))
    cells.append(html.Th("", style={"width": "3rem"}))
    return html.Thead(html.Tr(cells), className="table-light")


def _row_actions(entry_id):
    return dbc.DropdownMenu(
        [
            dbc.DropdownMenuItem(
                [html.I(className="fas fa-pen me-2"), "Edit"],
                id=_row_id(IDS.ENTRY_ROW_EDIT, entry_id),
                n_clicks=0,
            ),
            dbc.DropdownMenuItem(
                [html.I(className="fas fa-trash me-2"), "Delete"],
                id=_row_id(IDS.ENTRY_ROW_DELETE, entry_id),
                n_clicks=0,
                class_name="text-danger",
            ),
        ],
        label=html.I(className="fas fa-ellipsis-vertical"),
        color="link",
        caret=False,
        align_end=True,
        size="sm",
    )


def render_entry_row(entry, selected, held):
    entry_id = entry['id']
    handle = html.Button(
        html.I(className="fas fa-grip-vertical"),
        id=_row_id(IDS.ENTRY_ROW_GRAB, entry_id),
        n_clicks=0,
        className="btn btn-sm btn-link text-secondary entry-drag-handle",
        title="Drag to reorder, or press Space and use the arrow keys",
        **{
            'data-entry-id': entry_id,
            'aria-label': f"Reorder {entry.get('header', '')}",
            'aria-pressed': 'true' if held else 'false',
        },
    )
    checkbox = dbc.Checkbox(
        id=_row_id(IDS.ENTRY_ROW_SELECT, entry_id),
        value=selected,
        input_class_name="entry-checkbox",
    )

    cells = [html.Td(html.Div([handle, checkbox], className="d-flex align-items-center"))]
    for column, _label, align in ENTRY_COLUMNS:
        value = entry.get(column)
        if column == 'status':
            content = status_badge(value)
        elif column == 'type':
            content = dbc.Badge(value, color="light", text_color="secondary", pill=True, className="border")
        elif column == 'reviewer' and not value:
            content = html.Span("Unassigned", className="text-muted fst-italic")
        else:
            content = value
        cells.append(html.Td(content, className=f"text-{'center' if align == 'center' else 'start'}"))
    cells.append(html.Td(_row_actions(entry_id), className="text-end"))

    class_name = "entry-row"
    if held:
        class_name += " table-primary entry-row-held"
    return html.Tr(
        cells,
        className=class_name,
        draggable="true",
        **{'data-entry-id': entry_id},
    )


def render_table_body(state):
    rows = table.current_page(state)
    if not rows:
        message = "No entries yet. Use \"Add New Entry\" to create one." if state.loaded else "Loading entries..."
        return html.Tbody(html.Tr(html.Td(message, colSpan=len(ENTRY_COLUMNS) + 2,
                                          className="text-center text-muted py-4")))
    held_id = state.drag.entry_id if state.drag else None
    return html.Tbody([
        render_entry_row(entry, entry['id'] in state.selected, entry['id'] == held_id)
        for entry in rows
    ])


def render_table(state):
    return dbc.Table(
        [render_table_header(state), render_table_body(state)],
        hover=True,
        responsive=True,
        className="mb-0 align-middle entry-table",
    )


def pagination_view(state):
    """
    Values for the pagination footer.

    Returns:
        dict: summary, page_label and the disabled flags of the four buttons
    """
    pages = table.page_count(state)
    at_first = state.page_index <= 1
    at_last = state.page_index >= max(1, pages)
    return {
        'summary': table.selection_summary(state),
        'page_label': f"Page {state.page_index} of {max(1, pages)}",
        'first_disabled': at_first,
        'previous_disabled': at_first,
        'next_disabled': at_last,
        'last_disabled': at_last,
    }


def drag_toolbar():
    """Buttons shown while a row is held for keyboard reordering."""
    return html.Div([
        html.Span("Moving row: use the arrow keys, Enter to drop, Escape to cancel.",
                  className="me-3 small", role="status", **{'aria-live': 'polite'}),
        dbc.Button(html.I(className="fas fa-arrow-up"), id=IDS.ENTRY_DRAG_UP, size="sm",
                   color="secondary", outline=True, className="me-1", title="Move up"),
        dbc.Button(html.I(className="fas fa-arrow-down"), id=IDS.ENTRY_DRAG_DOWN, size="sm",
                   color="secondary", outline=True, className="me-2", title="Move down"),
        dbc.Button("Drop", id=IDS.ENTRY_DRAG_DROP, size="sm", color="primary", className="me-1"),
        dbc.Button("Cancel", id=IDS.ENTRY_DRAG_CANCEL, size="sm", color="link"),
    ], id=IDS.ENTRY_DRAG_TOOLBAR, className="d-flex align-items-center px-3 py-2 bg-light border-bottom",
        style={"display": "none"})


def create_entry_table_section(initial_state):
    """The whole table card: header bar, table, pagination footer and stores."""
    footer = html.Div([
        html.Div(id=IDS.ENTRY_SELECTION_SUMMARY, className="text-muted"),
        html.Div([
            html.Div([
                html.Span("Rows per page", className="fw-semibold me-2"),
                dbc.Select(
                    id=IDS.ENTRY_PAGE_SIZE,
                    options=[{"label": str(n), "value": str(n)} for n in PAGE_SIZE_OPTIONS],
                    value=str(initial_state.page_size),
                    style={"width": "5rem"},
                ),
            ], className="d-flex align-items-center me-4"),
            html.Span(id=IDS.ENTRY_PAGE_LABEL, className="fw-semibold me-3"),
            dbc.ButtonGroup([
                dbc.Button(html.I(className="fas fa-angles-left"), id=IDS.ENTRY_PAGE_FIRST,
                           color="secondary", outline=True, size="sm", title="First page"),
                dbc.Button(html.I(className="fas fa-angle-left"), id=IDS.ENTRY_PAGE_PREVIOUS,
                           color="secondary", outline=True, size="sm", title="Previous page"),
                dbc.Button(html.I(className="fas fa-angle-right"), id=IDS.ENTRY_PAGE_NEXT,
                           color="secondary", outline=True, size="sm", title="Next page"),
                dbc.Button(html.I(className="fas fa-angles-right"), id=IDS.ENTRY_PAGE_LAST,
                           color="secondary", outline=True, size="sm", title="Last page"),
            ]),
        ], className="d-flex align-items-center"),
    ], className="d-flex justify-content-between align-items-center px-3 py-2")

    return html.Div([
        dcc.Store(id=IDS.ENTRY_TABLE_STATE, data=initial_state.to_dict()),
        dcc.Store(id=IDS.ENTRY_TABLE_UPDATE_TRIGGER),
        dcc.Store(id=IDS.ENTRY_DRAG_EVENT),
        dcc.Store(id=IDS.ENTRY_DELETE_PENDING),
        dcc.Store(id=IDS.ENTRY_FORM_STATE, data=EntryFormState().to_dict()),
        dcc.Interval(id=IDS.ENTRY_TABLE_INIT, interval=250, max_intervals=1),
        dcc.ConfirmDialog(id=IDS.ENTRY_DELETE_CONFIRM,
                          message="Are you sure you want to delete this entry?"),

        html.Div([
            html.H4("Document Sections", className="mb-0"),
            html.Div([
                dbc.Button([html.I(className="fas fa-rotate me-2"), "Reload"], id=IDS.ENTRY_RELOAD,
                           color="light", className="me-2"),
                dbc.Button([html.I(className="fas fa-plus me-2"), "Add New Entry"],
                           id=IDS.ENTRY_ADD_BUTTON, color="primary"),
            ]),
        ], className="d-flex justify-content-between align-items-center mb-3"),

        dbc.Alert(id=IDS.ENTRY_TABLE_ALERT, is_open=False, dismissable=True, color="danger"),

        html.Div([
            drag_toolbar(),
            html.Div(render_table(initial_state), id=IDS.ENTRY_TABLE_BODY),
            footer,
        ], className="border rounded overflow-hidden bg-white"),
    ], className="mt-4")
