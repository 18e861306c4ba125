import dash
import dash_bootstrap_components as dbc
from dash import html, dcc, callback, Input, Output, State, ctx
from dash.exceptions import PreventUpdate
from flask_login import login_user

from api.errors import APIError
from api import auth_service

dash.register_page(__name__, path='/signup', title='Sign up')

layout = dbc.Container(fluid=True, children=[
    dbc.Row(className="justify-content-center align-items-center vh-100", children=[
        dbc.Col(dbc.Card(dbc.CardBody([
            html.H4("Create an account", className="mb-4 text-center"),
            dbc.Input(id="signup-name-input", placeholder="Full name", className="mb-3"),
            dbc.InputGroup([
                dbc.Input(id="signup-email-input", placeholder="Email", type="email"),
                dbc.Button("Send code", id="signup-send-otp", color="secondary", n_clicks=0),
            ], className="mb-3"),
            dbc.InputGroup([
                dbc.Input(id="signup-otp-input", placeholder="Verification code", maxLength=6),
                dbc.Button("Verify", id="signup-verify-otp", color="secondary", n_clicks=0),
            ], className="mb-3"),
            dbc.Input(id="signup-phone-input", placeholder="Phone (optional)", className="mb-4"),
            dbc.Button("Sign up", id="signup-button", color="primary", n_clicks=0,
                       class_name="w-100 mb-2"),
            html.Div(html.A("Already have an account? Log in", href="/login"), className="text-center"),
            html.Div(id="signup-result", className="mt-3 text-center fw-semibold"),
            dcc.Store(id="signup-email-verified", data=False),
            dcc.Location(id="signup-redirect", refresh=True),
        ])), width={"size": 12, "md": 6, "xl": 4}),
    ]),
], className="bg-light")


def _error(message):
    return html.Span(message, className="text-danger")


@callback(
    [Output("signup-result", "children"),
     Output("signup-email-verified", "data"),
     Output("signup-redirect", "href")],
    [Input("signup-send-otp", "n_clicks"),
     Input("signup-verify-otp", "n_clicks"),
     Input("signup-button", "n_clicks")],
    [State("signup-name-input", "value"),
     State("signup-email-input", "value"),
     State("signup-otp-input", "value"),
     State("signup-phone-input", "value"),
     State("signup-email-verified", "data")],
    prevent_initial_call=True
)
def handle_signup(send_clicks, verify_clicks, signup_clicks, name, email, otp, phone, verified):
    """Three steps on one form: send the email code, verify it, create the account."""
    button_id = ctx.triggered_id
    if button_id is None:
        raise PreventUpdate

    try:
        if button_id == "signup-send-otp":
            auth_service.send_signup_otp(email)
            return html.Span("Code sent. Check your inbox.", className="text-success"), False, dash.no_update

        if button_id == "signup-verify-otp":
            auth_service.verify_signup_otp(email, otp)
            return html.Span("Email verified.", className="text-success"), True, dash.no_update

        if button_id == "signup-button":
            if not verified:
                return _error("Verify your email first"), dash.no_update, dash.no_update
            user = auth_service.register_user(name, email, phone)
            login_user(user, remember=True)
            return "", True, "/dashboard"
    except APIError as e:
        return _error(e.message), dash.no_update, dash.no_update

    raise PreventUpdate
