"""
Tests for the Dash application mounted on the Flask server: import of the
app with every callback module, the landing redirect and the login check on
callbacks reached through the Dash dispatch endpoint.
"""

import importlib
import unittest
from unittest.mock import patch

from config import Config
from db_models.cards import Card
from db_models.databases import db

CALLBACK_MODULES = (
    'UI.callback.card_callbacks',
    'UI.callback.chart_callbacks',
    'UI.callback.user_callbacks',
    'UI.controller.entry_table_controller',
)


def card_save_request(app, heading='Total Revenue', current=150, previous=100):
    """Body the browser posts to /_dash-update-component for the card Save button."""
    output = next(key for key in app.callback_map if 'card-save-result.children' in key)
    return {
        'output': output,
        'outputs': [
            {'id': 'card-save-result', 'property': 'children'},
            {'id': 'card-preview-grid', 'property': 'children'},
        ],
        'inputs': [{'id': 'card-save-button', 'property': 'n_clicks', 'value': 1}],
        'state': [
            {'id': 'card-heading-select', 'property': 'value', 'value': heading},
            {'id': 'card-current-input', 'property': 'value', 'value': current},
            {'id': 'card-previous-input', 'property': 'value', 'value': previous},
            {'id': 'card-description-input', 'property': 'value', 'value': ''},
            {'id': 'card-note-input', 'property': 'value', 'value': ''},
        ],
        'changedPropIds': ['card-save-button.n_clicks'],
    }


class TestDashApp(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        with patch.object(Config, 'SQLALCHEMY_DATABASE_URI', 'sqlite://'), \
                patch.object(Config, 'MAIL_SUPPRESS_SEND', True):
            ui_app = importlib.import_module('UI.app')
            for name in CALLBACK_MODULES:
                importlib.import_module(name)
        cls.app = ui_app.app
        cls.server = ui_app.server

    def setUp(self):
        self.client = self.server.test_client()

    def tearDown(self):
        with self.server.app_context():
            db.session.remove()
            db.drop_all()
            db.create_all()

    def login(self, email='ada@example.com'):
        with patch('api.auth_service.generate_otp', return_value='123456'):
            self.client.post('/api/send-signup-otp', json={'email': email})
        self.client.post('/api/verify-signup-otp', json={'email': email, 'otp': '123456'})
        resp = self.client.post('/api/signup', json={'name': 'Ada', 'email': email})
        self.assertEqual(resp.status_code, 201)

    def card_count(self):
        with self.server.app_context():
            return Card.query.count()

    def test_callbacks_registered(self):
        keys = list(self.app.callback_map)
        self.assertTrue(any('entry-table-state.data' in k for k in keys))
        self.assertTrue(any('card-save-result.children' in k for k in keys))

    def test_root_redirects_to_login_when_anonymous(self):
        resp = self.client.get('/')
        self.assertEqual(resp.status_code, 302)
        self.assertTrue(resp.headers['Location'].endswith('/login'))

    def test_root_redirects_to_dashboard_when_logged_in(self):
        self.login()
        resp = self.client.get('/')
        self.assertEqual(resp.status_code, 302)
        self.assertTrue(resp.headers['Location'].endswith('/dashboard'))

    def test_anonymous_card_save_is_ignored(self):
        resp = self.client.post('/_dash-update-component', json=card_save_request(self.app))
        self.assertIn(resp.status_code, (200, 204))
        self.assertEqual(self.card_count(), 0)

    def test_logged_in_card_save_stores_card(self):
        self.login()
        resp = self.client.post('/_dash-update-component', json=card_save_request(self.app))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.card_count(), 1)


if __name__ == '__main__':
    unittest.main()
