"""
Top navigation bar shown on authenticated pages.
"""

import dash_bootstrap_components as dbc
from dash import html
from flask_login import current_user

from UI.pages.dashboard.ids import DashboardIds as IDS


def navbar(active='/dashboard'):
    links = [
        ('/dashboard', 'Dashboard', 'fa-gauge'),
        ('/cards', 'Cards', 'fa-table-cells-large'),
        ('/chart-data', 'Chart Data', 'fa-chart-area'),
    ]
    user_label = current_user.email if current_user.is_authenticated else ''
    return dbc.Navbar(
        dbc.Container([
            dbc.NavbarBrand("Dashboard", href="/dashboard", className="fw-bold"),
            dbc.Nav([
                dbc.NavItem(dbc.NavLink([html.I(className=f"fas {icon} me-2"), label],
                                        href=href, active=(href == active)))
                for href, label, icon in links
            ], className="me-auto", navbar=True),
            html.Span(user_label, className="text-muted me-3 small"),
            dbc.Button([html.I(className="fas fa-sign-out-alt me-2"), "Log out"],
                       id=IDS.LOGOUT_BUTTON, color="light", size="sm"),
        ], fluid=True),
        color="white",
        className="border-bottom mb-4",
    )
