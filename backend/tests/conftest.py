import os
import sys
import pytest

# Ensure the backend root (containing the `wizwac` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from wizwac import create_app, rooms, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = '*'
    SYMBOL_A = 'X'
    SYMBOL_B = 'O'
    ROOM_CODE_ATTEMPTS = 5
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def fixed_code(monkeypatch):
    """Make the next rooms get predictable codes, 'ABCD' first."""
    codes = iter(['ABCD', 'EFGH', 'IJKL', 'MNOP'])
    monkeypatch.setattr(rooms, 'code_generator', lambda: next(codes))
    return 'ABCD'


@pytest.fixture()
def connect(flask_app):
    """Factory for Socket.IO test clients; each one is a separate connection."""
    clients = []

    def _connect():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
        )
        # Flush the 'connected' greeting
        test_client.get_received()
        clients.append(test_client)
        return test_client

    yield _connect
    for test_client in clients:
        if test_client.is_connected():
            test_client.disconnect()
