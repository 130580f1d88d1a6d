import io
import logging

import pytest

from app import create_app

DEFAULT_PASSWORD = 'admin123'


@pytest.fixture
def app(tmp_path):
    """Application bound to an in-memory database and a temporary upload folder.

    No application context is left pushed, so every test client request gets a
    fresh `g` and authentication is resolved per request.
    """
    return create_app('testing', UPLOAD_FOLDER=str(tmp_path / 'uploads'))


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def token(client):
    response = client.post('/api/auth/login', json={'password': DEFAULT_PASSWORD})
    assert response.status_code == 200
    return response.get_json()['token']


@pytest.fixture
def auth_headers(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture(autouse=True)
def configure_logging_for_tests(caplog):
    """Let caplog see the application logger."""
    caplog.set_level(logging.DEBUG)
    yield


def make_image(size=10 * 1024, filename='avatar.png', content_type='image/png'):
    """Multipart file tuple accepted by the Flask test client"""
    return (io.BytesIO(b'\x89PNG\r\n\x1a\n' + b'\0' * (size - 8)), filename, content_type)
