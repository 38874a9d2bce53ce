from sqlalchemy.exc import IntegrityError

from app import create_app
from config import TestConfig
from services import DatabaseStorage, IStorage


def test_create_app_wires_database_storage():
    app = create_app(TestConfig)
    storage = app.extensions['storage']
    assert isinstance(storage, DatabaseStorage)
    assert isinstance(storage, IStorage)
    assert storage.workspaces.remote.base_url == 'http://localhost:8888'


def test_tables_are_created_on_startup():
    app = create_app(TestConfig)
    with app.test_client() as client:
        response = client.post('/api/auth/register', json={
            'username': 'fresh', 'email': 'fresh@example.com', 'password': 'pw'})
    assert response.status_code == 201


def test_unknown_route_is_json_404(client):
    response = client.get('/api/nothing-here')
    assert response.status_code == 404
    assert 'error' in response.get_json()


def test_wrong_method_is_json_405(client, auth_headers):
    response = client.patch('/api/projects', headers=auth_headers)
    assert response.status_code == 405


def test_unexpected_error_is_json_500(client, auth_headers, storage, monkeypatch):
    def explode(user_id):
        raise RuntimeError('database on fire')

    monkeypatch.setattr(storage, 'get_projects', explode)

    response = client.get('/api/projects', headers=auth_headers)

    assert response.status_code == 500
    assert response.get_json() == {'error': 'database on fire', 'error_type': 'RuntimeError'}


def test_non_json_body_is_400(client, auth_headers):
    response = client.post('/api/projects', headers=auth_headers, data='name=x',
                           content_type='application/x-www-form-urlencoded')
    assert response.status_code == 400


def test_database_error_hides_statement_parameters(client, auth_headers, storage, monkeypatch, caplog):
    def explode(user_id):
        raise IntegrityError('INSERT INTO users ...', {'password_hash': 'scrypt:secret-hash'},
                             Exception('UNIQUE constraint failed: users.email'))

    monkeypatch.setattr(storage, 'get_projects', explode)

    response = client.get('/api/projects', headers=auth_headers)

    assert response.status_code == 500
    assert response.get_json() == {'error': 'Internal server error', 'error_type': 'IntegrityError'}
    assert 'secret-hash' not in caplog.text
    assert 'UNIQUE constraint failed' in caplog.text
