import json
import os
import sys
import threading

import pytest
from flask_jwt_extended import create_access_token

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from app import create_app
from config import TestConfig
from database import Database
from errors import RemoteServerError, SettingsConflictError
from models import User
from services import DatabaseStorage, RelationalStore, SettingsStore, WorkspaceStore


class FakeRemoteServer:
    """In-memory stand-in for RemoteServerClient.

    Workspaces and their child collections live in dicts, settings files in
    a path -> (text, version) map. Set ``down = True`` to make every call
    fail the way an unreachable server does, ``etags = True`` to hand out
    version tags and honour If-Match on upload, and ``before_download`` to
    run a hook after a download has read the file.
    """

    def __init__(self):
        self.down = False
        self.etags = False
        self.before_download = None
        self.workspaces = {}
        self.children = {}
        self.files = {}
        self.calls = []
        self._lock = threading.Lock()

    def _check(self, action):
        if self.down:
            raise RemoteServerError(f'Could not reach remote server: connection refused ({action})')

    @staticmethod
    def _not_found(action):
        return RemoteServerError(f'Failed to {action}: 404 Not Found', status_code=404)

    def request_json(self, method, path, payload=None, action=None):
        action = action or f'{method} {path}'
        self.calls.append((method, path, payload))
        self._check(action)

        rest = path.strip('/').split('/')[2:]
        if not rest:
            if method == 'GET':
                return list(self.workspaces.values())
            self.workspaces[payload['id']] = dict(payload)
            return dict(payload)

        ws_id = rest[0]
        if len(rest) == 1:
            if ws_id not in self.workspaces:
                raise self._not_found(action)
            if method == 'GET':
                return dict(self.workspaces[ws_id])
            if method == 'PUT':
                self.workspaces[ws_id].update(payload)
                return dict(self.workspaces[ws_id])
            del self.workspaces[ws_id]
            return None

        documents = self.children.setdefault((ws_id, rest[1]), {})
        if len(rest) == 2:
            if method == 'GET':
                return list(documents.values())
            documents[payload['id']] = dict(payload)
            return dict(payload)

        record_id = rest[2]
        if record_id not in documents:
            raise self._not_found(action)
        if method == 'PUT':
            documents[record_id].update(payload)
            return dict(documents[record_id])
        del documents[record_id]
        return None

    def download_file(self, path):
        self._check('download file')
        if path not in self.files:
            raise self._not_found('download file')
        text, version = self.files[path]
        if self.before_download:
            self.before_download(path)
        return text, (f'"{version}"' if self.etags else None)

    def upload_file(self, directory, filename, content, etag=None):
        self._check('upload file')
        path = f'{directory}/{filename}'
        with self._lock:
            current = self.files.get(path)
            if self.etags and etag is not None and current and etag != f'"{current[1]}"':
                raise SettingsConflictError('Failed to upload file: document changed on the server',
                                            status_code=412)
            version = current[1] + 1 if current else 1
            self.files[path] = (content, version)

    # Test helpers

    def put_json(self, path, data):
        self.files[path] = (json.dumps(data), 1)

    def read_json(self, path):
        return json.loads(self.files[path][0])


@pytest.fixture
def remote():
    return FakeRemoteServer()


@pytest.fixture
def fallback_dir(tmp_path):
    """Directory for the local workspaces.json fallback"""
    return str(tmp_path / 'server_data')


@pytest.fixture
def database():
    """Fresh in-memory SQLite database per test"""
    db = Database('sqlite://')
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def storage(database, remote, fallback_dir):
    return DatabaseStorage(
        RelationalStore(database),
        WorkspaceStore(remote, fallback_dir),
        SettingsStore(remote, 'project_data'),
    )


@pytest.fixture
def app(storage):
    return create_app(TestConfig, storage=storage)


@pytest.fixture
def client(app):
    """Create test client"""
    with app.test_client() as client:
        yield client


@pytest.fixture
def user(storage):
    return storage.upsert_user({
        'username': 'testuser',
        'email': 'test@example.com',
        'password_hash': User.hash_password('password123'),
    })


@pytest.fixture
def auth_headers(app, user):
    """Authorization header for the test user"""
    with app.app_context():
        token = create_access_token(identity=str(user.id))
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def other_headers(app, storage):
    """Authorization header for a second, unrelated user"""
    other = storage.upsert_user({
        'username': 'otheruser',
        'email': 'other@example.com',
        'password_hash': User.hash_password('password123'),
    })
    with app.app_context():
        token = create_access_token(identity=str(other.id))
    return {'Authorization': f'Bearer {token}'}
