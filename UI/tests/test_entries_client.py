"""
Tests for the HTTP client of the entries endpoint, with a mocked session.
"""

import unittest
from unittest.mock import MagicMock

import requests

from utils.entries_client import (
    EntriesClient,
    EntryNotFoundError,
    EntryRequestError,
    EntryServiceError,
    NETWORK_ERROR_MESSAGE,
)

URL = 'http://testserver/api/entries'


def response(status, payload=None, content=b'x'):
    resp = MagicMock()
    resp.status_code = status
    resp.content = content if payload is not None or status != 204 else b''
    if payload is None:
        resp.json.side_effect = ValueError('no json')
    else:
        resp.json.return_value = payload
    return resp


class TestEntriesClient(unittest.TestCase):

    def setUp(self):
        self.session = MagicMock()
        self.client = EntriesClient(URL + '/', timeout=3, session=self.session)

    def test_list_entries(self):
        self.session.request.return_value = response(200, [{'id': 'a'}])
        self.assertEqual(self.client.list_entries(), [{'id': 'a'}])
        args, kwargs = self.session.request.call_args
        self.assertEqual(args, ('GET', URL))
        self.assertEqual(kwargs['timeout'], 3)

    def test_create_sends_json_body(self):
        self.session.request.return_value = response(201, {'id': 'new'})
        created = self.client.create_entry({'header': 'H'})
        self.assertEqual(created, {'id': 'new'})
        args, kwargs = self.session.request.call_args
        self.assertEqual(args[0], 'POST')
        self.assertEqual(kwargs['json'], {'header': 'H'})

    def test_delete_sends_id_in_body(self):
        self.session.request.return_value = response(200, {'message': 'Entry deleted', 'id': 'a'})
        self.assertIsNone(self.client.delete_entry('a'))
        args, kwargs = self.session.request.call_args
        self.assertEqual(args[0], 'DELETE')
        self.assertEqual(kwargs['json'], {'id': 'a'})

    def test_no_content_response(self):
        self.session.request.return_value = response(204, None, content=b'')
        self.assertIsNone(self.client.delete_entry('a'))

    def test_not_found_maps_to_entry_not_found(self):
        self.session.request.return_value = response(404, {'error': 'Entry not found'})
        with self.assertRaises(EntryNotFoundError) as cm:
            self.client.update_entry({'id': 'gone', 'header': 'H'})
        self.assertEqual(cm.exception.message, 'Entry not found')
        self.assertEqual(cm.exception.status, 404)

    def test_bad_request_uses_server_message(self):
        self.session.request.return_value = response(400, {'error': 'Missing required fields'})
        with self.assertRaises(EntryRequestError) as cm:
            self.client.create_entry({})
        self.assertEqual(cm.exception.message, 'Missing required fields')

    def test_server_error_without_body_uses_fallback(self):
        self.session.request.return_value = response(500, None)
        with self.assertRaises(EntryServiceError) as cm:
            self.client.list_entries()
        self.assertEqual(cm.exception.message, 'Failed to fetch entries')
        self.assertEqual(cm.exception.status, 500)

    def test_network_failure(self):
        self.session.request.side_effect = requests.ConnectionError('refused')
        with self.assertRaises(EntryServiceError) as cm:
            self.client.list_entries()
        self.assertEqual(cm.exception.message, NETWORK_ERROR_MESSAGE)
        self.assertIsNone(cm.exception.status)


if __name__ == '__main__':
    unittest.main()
