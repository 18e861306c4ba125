import dash
import dash_bootstrap_components as dbc
from dash import html, dcc, callback, Input, Output, State
from dash.exceptions import PreventUpdate
from flask_login import login_user

from api.errors import APIError
from api import auth_service

dash.register_page(__name__, path='/otp', title='Verify code')


def layout(email=None, **kwargs):
    return dbc.Container(fluid=True, children=[
        dbc.Row(className="justify-content-center align-items-center vh-100", children=[
            dbc.Col(dbc.Card(dbc.CardBody([
                html.H4("Enter verification code", className="mb-2 text-center"),
                html.P(["We sent a 6-digit code to ", html.Strong(email or "your email"), "."],
                       className="text-muted text-center"),
                dcc.Store(id="otp-email", data=email),
                dbc.Input(id="otp-code-input", placeholder="123456", maxLength=6,
                          inputMode="numeric", className="mb-3 text-center fs-4"),
                dbc.Button("Verify", id="otp-verify-button", color="primary", n_clicks=0,
                           class_name="w-100 mb-2"),
                dbc.Button("Resend code", id="otp-resend-button", color="link", n_clicks=0,
                           class_name="w-100"),
                html.Div(id="otp-result", className="mt-3 text-center fw-semibold"),
                dcc.Location(id="otp-redirect", refresh=True),
            ])), width={"size": 12, "md": 6, "xl": 4}),
        ]),
    ], className="bg-light")


@callback(
    [Output("otp-redirect", "href"),
     Output("otp-result", "children", allow_duplicate=True)],
    Input("otp-verify-button", "n_clicks"),
    State("otp-email", "data"),
    State("otp-code-input", "value"),
    prevent_initial_call=True
)
def verify_code(n_clicks, email, code):
    if not n_clicks:
        raise PreventUpdate
    if not email:
        return "/login", dash.no_update
    if not code:
        return dash.no_update, html.Span("Please enter the code.", className="text-danger")

    try:
        user = auth_service.verify_login_otp(email, code)
    except APIError as e:
        return dash.no_update, html.Span(e.message, className="text-danger")

    login_user(user, remember=True)
    return "/dashboard", ""


@callback(
    Output("otp-result", "children", allow_duplicate=True),
    Input("otp-resend-button", "n_clicks"),
    State("otp-email", "data"),
    prevent_initial_call=True
)
def resend_code(n_clicks, email):
    if not n_clicks or not email:
        raise PreventUpdate
    try:
        auth_service.request_login_otp(email, purpose='resend')
    except APIError as e:
        return html.Span(e.message, className="text-danger")
    return html.Span("A new code has been sent to your email.", className="text-success")
