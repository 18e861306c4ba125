class DashboardIds:
    # Navigation
    URL = 'url'
    PAGE_REDIRECT = 'dashboard-redirect'
    LOGOUT_BUTTON = 'logout-button'

    # KPI cards
    CARDS_CONTAINER = 'kpi-cards-container'
    CARDS_ALERT = 'kpi-cards-alert'
    CARDS_RETRY = 'kpi-cards-retry'

    # Visitor chart
    VISITOR_CHART = 'visitor-chart'
    VISITOR_RANGE = 'visitor-chart-range'
    VISITOR_REFRESH = 'visitor-chart-refresh'

    # Entry table stores and triggers
    ENTRY_TABLE_STATE = 'entry-table-state'
    ENTRY_TABLE_UPDATE_TRIGGER = 'entry-table-update-trigger'
    ENTRY_DRAG_EVENT = 'entry-drag-event'
    ENTRY_TABLE_INIT = 'entry-table-init'

    # Entry table view
    ENTRY_TABLE_BODY = 'entry-table-body'
    ENTRY_TABLE_ALERT = 'entry-table-alert'
    ENTRY_SELECT_ALL = 'entry-select-all'
    ENTRY_SELECTION_SUMMARY = 'entry-selection-summary'
    ENTRY_PAGE_LABEL = 'entry-page-label'
    ENTRY_PAGE_SIZE = 'entry-page-size'
    ENTRY_PAGE_FIRST = 'entry-page-first'
    ENTRY_PAGE_PREVIOUS = 'entry-page-previous'
    ENTRY_PAGE_NEXT = 'entry-page-next'
    ENTRY_PAGE_LAST = 'entry-page-last'
    ENTRY_RELOAD = 'entry-table-reload'

    # Pattern-matching row controls (dict ids with 'type' and 'index')
    ENTRY_ROW_SELECT = 'entry-row-select'
    ENTRY_ROW_EDIT = 'entry-row-edit'
    ENTRY_ROW_DELETE = 'entry-row-delete'
    ENTRY_ROW_GRAB = 'entry-row-grab'
    ENTRY_SORT = 'entry-sort'

    # Keyboard reorder toolbar
    ENTRY_DRAG_TOOLBAR = 'entry-drag-toolbar'
    ENTRY_DRAG_UP = 'entry-drag-up'
    ENTRY_DRAG_DOWN = 'entry-drag-down'
    ENTRY_DRAG_DROP = 'entry-drag-drop'
    ENTRY_DRAG_CANCEL = 'entry-drag-cancel'

    # Entry form modal
    ENTRY_FORM_STATE = 'entry-form-state'
    ENTRY_FORM_MODAL = 'entry-form-modal'
    ENTRY_FORM_TITLE = 'entry-form-title'
    ENTRY_FORM_ERROR = 'entry-form-error'
    ENTRY_ADD_BUTTON = 'entry-add-button'
    ENTRY_FORM_SUBMIT = 'entry-form-submit'
    ENTRY_FORM_CANCEL = 'entry-form-cancel'
    ENTRY_FIELD_HEADER = 'entry-field-header'
    ENTRY_FIELD_TYPE = 'entry-field-type'
    ENTRY_FIELD_STATUS = 'entry-field-status'
    ENTRY_FIELD_TARGET = 'entry-field-target'
    ENTRY_FIELD_LIMIT = 'entry-field-limit'
    ENTRY_FIELD_REVIEWER = 'entry-field-reviewer'

    # Delete confirmation
    ENTRY_DELETE_CONFIRM = 'entry-delete-confirm'
    ENTRY_DELETE_PENDING = 'entry-delete-pending'
