import dash
import dash_bootstrap_components as dbc
from dash import html, dcc, callback, Input, Output, State
from dash.exceptions import PreventUpdate
from urllib.parse import quote

from api.errors import APIError
from api import auth_service

dash.register_page(__name__, path='/login', title='Login')

BACKGROUND = {"background": "linear-gradient(135deg, #1e3a8a, #2563eb)", "minHeight": "100vh"}
CARD_STYLE = {"width": "100%", "maxWidth": "450px", "borderRadius": "15px",
              "boxShadow": "0 15px 30px rgba(0,0,0,0.2)"}

layout = dbc.Container(fluid=True, children=[
    dbc.Row(className="justify-content-center align-items-center vh-100", children=[
        dbc.Col([
            html.H1("Dashboard", className='text-center',
                    style={'color': 'white', "fontSize": "3rem", "fontWeight": "700"}),
            html.Div("Sign in with a one-time code sent to your email",
                     className='text-center mb-4', style={'color': '#f8f9fa', "opacity": "0.9"}),
            dbc.Card(
                dbc.CardBody([
                    html.H4("Welcome Back", className="card-title mb-4 text-center"),
                    dbc.Input(id="login-email-input", placeholder="Email", type="email",
                              className="mb-4", style={"borderRadius": "8px", "padding": "12px 15px"}),
                    dbc.Row([
                        dbc.Col(dbc.Button([html.I(className="fas fa-paper-plane me-2"), "Send code"],
                                           id="login-button", color="primary", n_clicks=0,
                                           class_name="w-100 py-2"), width=6),
                        dbc.Col(html.A(dbc.Button([html.I(className="fas fa-user-plus me-2"), "Sign up"],
                                                  color="light", class_name="w-100 py-2"),
                                       href="/signup"), width=6),
                    ]),
                    html.Div(id="login-result", className="mt-3",
                             style={'color': '#dc3545', 'textAlign': 'center', 'fontWeight': '500'}),
                    dcc.Location(id='login-redirect', refresh=True),
                ]),
                style=CARD_STYLE,
                className="mx-auto",
            ),
        ], width={"size": 12, "md": 8, "lg": 6, "xl": 4}),
    ]),
], className="p-0", style=BACKGROUND)


@callback(
    [Output("login-redirect", "href"),
     Output("login-result", "children")],
    Input("login-button", "n_clicks"),
    State("login-email-input", "value"),
    prevent_initial_call=True
)
def handle_login(login_clicks, email):
    """Send a login code and continue to the code entry page."""
    if not login_clicks:
        raise PreventUpdate

    if not email:
        return dash.no_update, "Please enter your email."

    try:
        auth_service.request_login_otp(email)
    except APIError as e:
        return dash.no_update, e.message

    return f"/otp?email={quote(email.strip().lower())}", ""
