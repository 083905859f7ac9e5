import os
import random
import sys

import pytest

# Ensure the backend root (containing the `crossclues` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from crossclues.config import Config
from crossclues.game.service import GameService
from crossclues.server import create_app


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    TRUST_PROXY_HEADERS = False
    SOCKETIO_ASYNC_MODE = 'threading'
    FRONTEND_DIST = os.path.join(CURRENT_DIR, 'no-such-dist')
    DEFAULT_GRID_SIZE = 5


@pytest.fixture()
def service():
    return GameService(rng=random.Random(1234))


@pytest.fixture()
def app_and_socketio(service):
    return create_app(TestConfig, service=service)


@pytest.fixture()
def flask_app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(app_and_socketio):
    application, socketio = app_and_socketio
    test_client = socketio.test_client(application, flask_test_client=application.test_client())
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()
