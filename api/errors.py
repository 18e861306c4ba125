"""
Error handling for the REST layer.

Handlers raise APIError with a user-facing message and an HTTP status; the
handlers registered here turn it into the {"error": ...} payload every client
of this API expects.
"""

import logging

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from db_models.databases import db

logger = logging.getLogger(__name__)


class APIError(Exception):
    """An error that should be reported to the API caller as-is."""

    def __init__(self, message, status=400):
        super().__init__(message)
        self.message = message
        self.status = status

    def to_dict(self):
        return {'error': self.message}


def _handle_api_error(ex):
    db.session.rollback()
    return jsonify(ex.to_dict()), ex.status


def _handle_unexpected(ex):
    if isinstance(ex, HTTPException):
        return jsonify({'error': ex.description}), ex.code
    db.session.rollback()
    logger.exception(f"Unhandled error on {request.method} {request.path}")
    return jsonify({'error': 'Server error'}), 500


def install_blueprint_handlers(bp):
    """Turn every exception raised inside a REST blueprint into a JSON error."""
    bp.register_error_handler(APIError, _handle_api_error)
    bp.register_error_handler(Exception, _handle_unexpected)


def register_error_handlers(server):
    # Dash callbacks catch APIError themselves; this covers plain Flask views
    server.register_error_handler(APIError, _handle_api_error)


def get_json_body():
    """Parsed JSON body of the current request, or an empty dict."""
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise APIError('Request body must be a JSON object', 400)
    return body
