"""
Tests for the /api/entries REST endpoints.
"""

import unittest

from app_factory import create_server
from config import TestConfig
from db_models.databases import db


class EntriesApiTestCase(unittest.TestCase):

    def setUp(self):
        self.server = create_server(TestConfig)
        self.client = self.server.test_client()

    def tearDown(self):
        with self.server.app_context():
            db.session.remove()
            db.drop_all()

    def _create(self, **overrides):
        body = {'header': 'Cover page', 'type': 'Cover page', 'target': 18, 'limit': 5}
        body.update(overrides)
        return self.client.post('/api/entries', json=body)

    def test_list_is_empty_initially(self):
        resp = self.client.get('/api/entries')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json(), [])

    def test_create_returns_entry_with_defaults(self):
        resp = self._create(reviewer='')
        self.assertEqual(resp.status_code, 201)
        entry = resp.get_json()
        self.assertTrue(entry['id'])
        self.assertEqual(entry['status'], 'In Process')
        self.assertIsNone(entry['reviewer'])
        self.assertEqual(entry['target'], 18)
        self.assertIn('createdAt', entry)

    def test_create_accepts_numeric_strings(self):
        resp = self._create(target='7', limit='0')
        self.assertEqual(resp.status_code, 201)
        self.assertEqual((resp.get_json()['target'], resp.get_json()['limit']), (7, 0))

    def test_create_missing_fields(self):
        resp = self.client.post('/api/entries', json={'header': 'Only header'})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.get_json(), {'error': 'Missing required fields'})

    def test_create_rejects_negative_and_bad_status(self):
        self.assertEqual(self._create(target=-1).status_code, 400)
        self.assertEqual(self._create(limit='ten').status_code, 400)
        self.assertEqual(self._create(status='Archived').status_code, 400)

    def test_list_is_newest_first(self):
        first = self._create(header='First').get_json()
        second = self._create(header='Second').get_json()
        ids = [e['id'] for e in self.client.get('/api/entries').get_json()]
        self.assertEqual(set(ids), {first['id'], second['id']})
        if first['createdAt'] != second['createdAt']:
            self.assertEqual(ids[0], second['id'])

    def test_update_is_partial(self):
        entry = self._create(reviewer='Eddie').get_json()
        resp = self.client.put('/api/entries', json={'id': entry['id'], 'status': 'Done', 'target': 20})
        self.assertEqual(resp.status_code, 200)
        updated = resp.get_json()
        self.assertEqual(updated['status'], 'Done')
        self.assertEqual(updated['target'], 20)
        self.assertEqual(updated['header'], 'Cover page')
        self.assertEqual(updated['reviewer'], 'Eddie')

    def test_update_requires_id(self):
        resp = self.client.put('/api/entries', json={'header': 'x'})
        self.assertEqual(resp.status_code, 400)

    def test_update_unknown_entry(self):
        resp = self.client.put('/api/entries', json={'id': 'missing', 'header': 'x'})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.get_json(), {'error': 'Entry not found'})

    def test_delete_with_body(self):
        entry = self._create().get_json()
        resp = self.client.delete('/api/entries', json={'id': entry['id']})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json(), {'message': 'Entry deleted', 'id': entry['id']})
        self.assertEqual(self.client.get('/api/entries').get_json(), [])

    def test_delete_twice_is_not_found(self):
        entry = self._create().get_json()
        self.client.delete('/api/entries', json={'id': entry['id']})
        resp = self.client.delete('/api/entries', json={'id': entry['id']})
        self.assertEqual(resp.status_code, 404)

    def test_delete_by_path(self):
        entry = self._create().get_json()
        resp = self.client.delete(f"/api/entries/{entry['id']}")
        self.assertEqual(resp.status_code, 204)
        self.assertEqual(self.client.delete(f"/api/entries/{entry['id']}").status_code, 404)

    def test_non_object_body(self):
        resp = self.client.post('/api/entries', json=['not', 'an', 'object'])
        self.assertEqual(resp.status_code, 400)
        self.assertIn('error', resp.get_json())


if __name__ == '__main__':
    unittest.main()
