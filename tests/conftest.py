"""
Shared fixtures: a Flask app with every dashboard module registered and a
fake portfolio API standing in for the requests session.
"""

import json
import threading
from unittest.mock import MagicMock

import pytest
from flask import Flask

from folio_admin import FolioAdmin

API_URL = 'http://api.test/api'


def make_response(status=200, body=None):
    """Build a mock requests.Response carrying a JSON (or text) body"""
    response = MagicMock()
    response.status_code = status
    response.reason = 'OK' if status < 400 else 'Request failed'

    if body is None:
        response.content = b''
        response.text = ''
        response.json.side_effect = ValueError('No JSON')
    elif isinstance(body, str):
        response.content = body.encode()
        response.text = body
        response.json.side_effect = ValueError('Not JSON')
    else:
        response.text = json.dumps(body)
        response.content = response.text.encode()
        response.json.return_value = body
    return response


class FakePortfolioApi:
    """Stands in for requests.Session; answers from a route table and records calls"""

    def __init__(self, base_url=API_URL):
        self.base_url = base_url
        self.routes = {}
        self.calls = []
        self._lock = threading.Lock()

    def add(self, method, path, body=None, status=200):
        self.routes[(method.upper(), path)] = (status, body)

    def fail(self, method, path, error):
        self.routes[(method.upper(), path)] = (None, error)

    def request(self, method, url, json=None, files=None, headers=None, timeout=None):
        path = url[len(self.base_url):]
        with self._lock:
            self.calls.append({
                'method': method, 'path': path, 'json': json,
                'files': files, 'headers': headers or {}, 'timeout': timeout,
            })

        status, body = self.routes.get(
            (method.upper(), path),
            (404, {'message': f'Route {path} not found'}),
        )
        if isinstance(body, Exception):
            raise body
        return make_response(status, body)

    def calls_to(self, method, path):
        return [c for c in self.calls if c['method'] == method.upper() and c['path'] == path]


@pytest.fixture
def backend():
    return FakePortfolioApi()


@pytest.fixture
def app(tmp_path, backend):
    """Flask app with all Folio Admin modules and the fake API wired in"""
    app = Flask(__name__)
    app.config['TESTING'] = True
    FolioAdmin(app, {
        'SECRET_KEY': 'test-secret',
        'API_URL': API_URL,
        'LOG_DB': str(tmp_path / 'logs.db'),
    })
    app.extensions['folio_admin'].api.http = backend
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    """Test client whose session already holds an API token"""
    with client.session_transaction() as sess:
        sess['token'] = 'test-token'
        sess['username'] = 'admin'
    return client


def flashed(client):
    """Return the (category, message) pairs waiting in the session"""
    with client.session_transaction() as sess:
        return list(sess.get('_flashes', []))


SAMPLE_PROJECTS = [
    {
        '_id': 'p1', 'title': 'Recipe App', 'type': 'mobile',
        'description': 'Cook things', 'images': ['https:&#x2F;&#x2F;cdn.test&#x2F;a.png'],
        'features': ['Offline mode'], 'techStack': ['Flutter'], 'status': 'published',
    },
    {
        '_id': 'p2', 'title': 'Landing Page', 'type': 'web',
        'description': 'Marketing site', 'images': [],
        'features': [], 'techStack': ['React'], 'status': 'draft',
    },
    {
        '_id': 'p3', 'title': 'Shop Front', 'type': 'web',
        'description': 'Store', 'images': [], 'features': [], 'techStack': [],
        'status': 'published',
    },
]

SAMPLE_MESSAGES = [
    {
        '_id': 'm1', 'sender': {'username': 'ada', 'email': 'ada@example.com'},
        'content': 'Hello there', 'isRead': False, 'createdAt': '2026-10-19T09:15:00.000Z',
    },
    {
        '_id': 'm2', 'sender': {'username': 'bob', 'email': 'bob@example.com'},
        'content': 'Nice work', 'isRead': True, 'createdAt': '2026-10-17T12:00:00.000Z',
    },
]
