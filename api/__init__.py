"""
REST API package.

register_api() attaches every blueprint to the Flask server behind the Dash app.
"""

from api.errors import APIError, install_blueprint_handlers, register_error_handlers
from api.entries_api import entries_bp
from api.cards_api import cards_bp
from api.visitors_api import visitors_bp
from api.auth_api import auth_bp

API_BLUEPRINTS = (entries_bp, cards_bp, visitors_bp, auth_bp)

# Blueprints may only be configured before their first registration
for _bp in API_BLUEPRINTS:
    install_blueprint_handlers(_bp)


def register_api(server):
    register_error_handlers(server)
    for bp in API_BLUEPRINTS:
        server.register_blueprint(bp)


__all__ = ['APIError', 'register_api']
