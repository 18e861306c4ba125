"""
Entry Table Controller

Single point of control for the entries table on the dashboard.

    ┌──────────────────────────────────────────────────────────┐
    │ Master callback: Output(entry-table-state, data)         │
    │  ├─ init interval / reload button  -> fetch              │
    │  ├─ entry-table-update-trigger     -> form/delete ops    │
    │  ├─ pagination, selection, sort                          │
    │  └─ drag handle, drag events, keyboard toolbar           │
    ├──────────────────────────────────────────────────────────┤
    │ Render callback: state -> table, footer, drag toolbar    │
    │ Form callbacks:  open/edit/cancel/submit -> form state   │
    │ Delete callbacks: confirm -> delete -> update trigger    │
    └──────────────────────────────────────────────────────────┘

Only the master callback writes the table state. The form and delete flows
send their store updates through the update trigger store.
"""

import dash
from dash import ALL, Input, Output, State, ctx
from dash.exceptions import PreventUpdate

from UI.app import app, server
from UI.controller.entry_actions import EntryActions
from UI.controller.entry_table_events import PAGE_MOVES, TableUpdateTrigger, handle_table_event
from UI.pages.components.entry_table import pagination_view, render_table
from UI.pages.dashboard.ids import DashboardIds as IDS
from UI.state import entry_form as form
from UI.state import entry_table as table
from UI.state.entry_form import EntryFormState, MODE_EDIT
from UI.state.entry_table import EntryTableState
from utils.entries_client import EntriesClient

actions = EntryActions(
    EntriesClient(server.config['ENTRIES_API_URL'], timeout=server.config['API_TIMEOUT_SEC'])
)

_SOURCES = {
    IDS.ENTRY_TABLE_INIT: 'init',
    IDS.ENTRY_RELOAD: 'reload',
    IDS.ENTRY_TABLE_UPDATE_TRIGGER: 'update',
    IDS.ENTRY_PAGE_SIZE: 'page_size',
    IDS.ENTRY_PAGE_FIRST: 'first',
    IDS.ENTRY_PAGE_PREVIOUS: 'previous',
    IDS.ENTRY_PAGE_NEXT: 'next',
    IDS.ENTRY_PAGE_LAST: 'last',
    IDS.ENTRY_SELECT_ALL: 'select_all',
    IDS.ENTRY_DRAG_EVENT: 'drag',
    IDS.ENTRY_DRAG_UP: 'up',
    IDS.ENTRY_DRAG_DOWN: 'down',
    IDS.ENTRY_DRAG_DROP: 'drop',
    IDS.ENTRY_DRAG_CANCEL: 'cancel',
}

_PATTERN_SOURCES = {
    IDS.ENTRY_ROW_SELECT: 'select',
    IDS.ENTRY_SORT: 'sort',
    IDS.ENTRY_ROW_GRAB: 'grab',
}


def _pattern(kind):
    return {'type': kind, 'index': ALL}


def _event_from_trigger():
    """Translate the triggering input into (source, value) for handle_table_event."""
    trigger = ctx.triggered_id
    value = ctx.triggered[0]['value'] if ctx.triggered else None

    if isinstance(trigger, dict):
        source = _PATTERN_SOURCES.get(trigger.get('type'))
        if source == 'select':
            return source, (trigger['index'], value)
        # Freshly rendered buttons report n_clicks=0
        if not value:
            raise PreventUpdate
        return source, trigger['index']

    source = _SOURCES.get(trigger)
    if source is None:
        raise PreventUpdate
    if source in PAGE_MOVES or source in ('reload', 'up', 'down', 'drop', 'cancel'):
        if not value:
            raise PreventUpdate
    return source, value


@app.callback(
    [Output(IDS.ENTRY_TABLE_STATE, 'data'),
     Output(IDS.ENTRY_TABLE_ALERT, 'children'),
     Output(IDS.ENTRY_TABLE_ALERT, 'is_open')],
    [Input(IDS.ENTRY_TABLE_INIT, 'n_intervals'),
     Input(IDS.ENTRY_RELOAD, 'n_clicks'),
     Input(IDS.ENTRY_TABLE_UPDATE_TRIGGER, 'data'),
     Input(IDS.ENTRY_PAGE_SIZE, 'value'),
     Input(IDS.ENTRY_PAGE_FIRST, 'n_clicks'),
     Input(IDS.ENTRY_PAGE_PREVIOUS, 'n_clicks'),
     Input(IDS.ENTRY_PAGE_NEXT, 'n_clicks'),
     Input(IDS.ENTRY_PAGE_LAST, 'n_clicks'),
     Input(IDS.ENTRY_SELECT_ALL, 'value'),
     Input(_pattern(IDS.ENTRY_ROW_SELECT), 'value'),
     Input(_pattern(IDS.ENTRY_SORT), 'n_clicks'),
     Input(_pattern(IDS.ENTRY_ROW_GRAB), 'n_clicks'),
     Input(IDS.ENTRY_DRAG_EVENT, 'data'),
     Input(IDS.ENTRY_DRAG_UP, 'n_clicks'),
     Input(IDS.ENTRY_DRAG_DOWN, 'n_clicks'),
     Input(IDS.ENTRY_DRAG_DROP, 'n_clicks'),
     Input(IDS.ENTRY_DRAG_CANCEL, 'n_clicks')],
    State(IDS.ENTRY_TABLE_STATE, 'data'),
    prevent_initial_call=True,
)
def entry_table_master_controller(*args):
    """
    Master callback and the only writer of the entry table state.

    Every input is mapped to an event and reduced with handle_table_event().
    The alert shows the error of a failed fetch, save, delete or order hook.
    """
    state_data = args[-1]
    source, value = _event_from_trigger()
    state = EntryTableState.from_dict(state_data)

    try:
        new_state, error = handle_table_event(state, source, value, actions)
    except ValueError as e:
        print(f"[ENTRY TABLE] Ignoring {source} event: {e}")
        raise PreventUpdate

    if new_state == state and not error:
        raise PreventUpdate

    print(f"[ENTRY TABLE] {source}: {len(new_state.entries)} entries, page {new_state.page_index}")
    state_out = new_state.to_dict() if new_state != state else dash.no_update
    if error:
        return state_out, error, True
    return state_out, dash.no_update, False if source in ('init', 'reload') else dash.no_update


@app.callback(
    [Output(IDS.ENTRY_TABLE_BODY, 'children'),
     Output(IDS.ENTRY_SELECTION_SUMMARY, 'children'),
     Output(IDS.ENTRY_PAGE_LABEL, 'children'),
     Output(IDS.ENTRY_PAGE_FIRST, 'disabled'),
     Output(IDS.ENTRY_PAGE_PREVIOUS, 'disabled'),
     Output(IDS.ENTRY_PAGE_NEXT, 'disabled'),
     Output(IDS.ENTRY_PAGE_LAST, 'disabled'),
     Output(IDS.ENTRY_DRAG_TOOLBAR, 'style')],
    Input(IDS.ENTRY_TABLE_STATE, 'data'),
)
def render_entry_table(state_data):
    state = EntryTableState.from_dict(state_data)
    view = pagination_view(state)
    toolbar_style = {} if state.drag else {'display': 'none'}
    return (
        render_table(state),
        view['summary'],
        view['page_label'],
        view['first_disabled'],
        view['previous_disabled'],
        view['next_disabled'],
        view['last_disabled'],
        toolbar_style,
    )


# ---------------------------------------------------------------------------
# Create / edit form
# ---------------------------------------------------------------------------

_FIELD_STATES = [
    State(IDS.ENTRY_FIELD_HEADER, 'value'),
    State(IDS.ENTRY_FIELD_TYPE, 'value'),
    State(IDS.ENTRY_FIELD_STATUS, 'value'),
    State(IDS.ENTRY_FIELD_TARGET, 'value'),
    State(IDS.ENTRY_FIELD_LIMIT, 'value'),
    State(IDS.ENTRY_FIELD_REVIEWER, 'value'),
]


@app.callback(
    [Output(IDS.ENTRY_FORM_STATE, 'data'),
     Output(IDS.ENTRY_TABLE_UPDATE_TRIGGER, 'data', allow_duplicate=True)],
    [Input(IDS.ENTRY_ADD_BUTTON, 'n_clicks'),
     Input(_pattern(IDS.ENTRY_ROW_EDIT), 'n_clicks'),
     Input(IDS.ENTRY_FORM_CANCEL, 'n_clicks'),
     Input(IDS.ENTRY_FORM_SUBMIT, 'n_clicks')],
    [State(IDS.ENTRY_FORM_STATE, 'data'),
     State(IDS.ENTRY_TABLE_STATE, 'data')] + _FIELD_STATES,
    running=[(Output(IDS.ENTRY_FORM_SUBMIT, 'disabled'), True, False)],
    prevent_initial_call=True,
)
def manage_entry_form(add_clicks, edit_clicks, cancel_clicks, submit_clicks,
                      form_data, table_data, header, entry_type, status, target, limit, reviewer):
    """Open, cancel and submit the entry form. Successful saves feed the table."""
    trigger = ctx.triggered_id
    value = ctx.triggered[0]['value'] if ctx.triggered else None
    if not value:
        raise PreventUpdate

    if trigger == IDS.ENTRY_ADD_BUTTON:
        return form.open_create().to_dict(), dash.no_update

    if isinstance(trigger, dict) and trigger.get('type') == IDS.ENTRY_ROW_EDIT:
        entry = table.find_entry(EntryTableState.from_dict(table_data), trigger['index'])
        if entry is None:
            raise PreventUpdate
        return form.open_edit(entry).to_dict(), dash.no_update

    if trigger == IDS.ENTRY_FORM_CANCEL:
        return form.close().to_dict(), dash.no_update

    if trigger == IDS.ENTRY_FORM_SUBMIT:
        form_state = form.update_fields(
            EntryFormState.from_dict(form_data),
            header=header, type=entry_type, status=status,
            target=target, limit=limit, reviewer=reviewer,
        )
        ops, form_state = actions.submit(form_state)
        if not ops and not form_state.notice:
            return form_state.to_dict(), dash.no_update
        reason = 'edit' if form_data and (form_data.get('fields') or {}).get('id') else 'create'
        return form_state.to_dict(), TableUpdateTrigger.create_trigger_data('entry_form', reason, ops,
                                                                            form_state.notice)

    raise PreventUpdate


@app.callback(
    [Output(IDS.ENTRY_FORM_MODAL, 'is_open'),
     Output(IDS.ENTRY_FORM_TITLE, 'children'),
     Output(IDS.ENTRY_FORM_SUBMIT, 'children'),
     Output(IDS.ENTRY_FORM_ERROR, 'children'),
     Output(IDS.ENTRY_FORM_ERROR, 'is_open'),
     Output(IDS.ENTRY_FIELD_HEADER, 'value'),
     Output(IDS.ENTRY_FIELD_TYPE, 'value'),
     Output(IDS.ENTRY_FIELD_STATUS, 'value'),
     Output(IDS.ENTRY_FIELD_TARGET, 'value'),
     Output(IDS.ENTRY_FIELD_LIMIT, 'value'),
     Output(IDS.ENTRY_FIELD_REVIEWER, 'value')],
    Input(IDS.ENTRY_FORM_STATE, 'data'),
    prevent_initial_call=True,
)
def render_entry_form(form_data):
    state = EntryFormState.from_dict(form_data)
    editing = state.mode == MODE_EDIT
    fields = state.fields
    return (
        state.is_open,
        "Edit Entry" if editing else "Add New Entry",
        "Save Changes" if editing else "Add Entry",
        state.error or "",
        bool(state.error),
        fields['header'],
        fields['type'],
        fields['status'],
        fields['target'],
        fields['limit'],
        fields['reviewer'],
    )


# ---------------------------------------------------------------------------
# Delete with confirmation
# ---------------------------------------------------------------------------

@app.callback(
    [Output(IDS.ENTRY_DELETE_PENDING, 'data'),
     Output(IDS.ENTRY_DELETE_CONFIRM, 'message'),
     Output(IDS.ENTRY_DELETE_CONFIRM, 'displayed')],
    Input(_pattern(IDS.ENTRY_ROW_DELETE), 'n_clicks'),
    State(IDS.ENTRY_TABLE_STATE, 'data'),
    prevent_initial_call=True,
)
def ask_delete_confirmation(delete_clicks, table_data):
    trigger = ctx.triggered_id
    if not isinstance(trigger, dict) or not ctx.triggered[0]['value']:
        raise PreventUpdate
    entry = table.find_entry(EntryTableState.from_dict(table_data), trigger['index'])
    if entry is None:
        raise PreventUpdate
    message = f"Are you sure you want to delete \"{entry.get('header', '')}\"? This cannot be undone."
    return entry['id'], message, True


@app.callback(
    Output(IDS.ENTRY_TABLE_UPDATE_TRIGGER, 'data', allow_duplicate=True),
    Input(IDS.ENTRY_DELETE_CONFIRM, 'submit_n_clicks'),
    State(IDS.ENTRY_DELETE_PENDING, 'data'),
    prevent_initial_call=True,
)
def delete_confirmed_entry(submit_n_clicks, entry_id):
    if not submit_n_clicks or not entry_id:
        raise PreventUpdate
    ops, error = actions.delete(entry_id)
    return TableUpdateTrigger.create_trigger_data('entry_delete', 'delete', ops, error)
