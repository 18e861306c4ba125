"""
Flask server factory.

The Dash application (UI.app) is mounted on the server built here. API tests
build their own server with TestConfig.
"""

import logging

from flask import Flask, jsonify, redirect, request
from flask_login import LoginManager

from config import Config
from db_models.databases import db
from db_models.users import User
from api import register_api

logger = logging.getLogger(__name__)

login_manager = LoginManager()


@login_manager.user_loader
def load_user(user_id):
    try:
        return db.session.get(User, int(user_id))
    except (TypeError, ValueError):
        return None


@login_manager.unauthorized_handler
def handle_unauthorized():
    if request.path.startswith('/api/'):
        return jsonify({'error': 'Unauthorized'}), 401
    return redirect('/login')


def create_server(config_class=Config, config_override=None):
    server = Flask(__name__)
    server.config.from_object(config_class)
    if config_override:
        server.config.update(config_override)

    db.init_app(server)
    login_manager.init_app(server)
    register_api(server)

    with server.app_context():
        db.create_all()

    logger.info("Server created (database: %s)", server.config.get('SQLALCHEMY_DATABASE_URI'))
    return server
