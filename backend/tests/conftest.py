import os
import sys
import pytest

# Ensure the backend root (containing the `pomosync` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from pomosync import create_app, socketio
from pomosync.config import Config


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SOCKETIO_NAMESPACE = '/'
    CORS_ALLOWED_ORIGINS = '*'
    TICK_INTERVAL_SEC = 1.0
    DEFAULT_WORK_MINUTES = 25
    DEFAULT_BREAK_MINUTES = 5


class FakeDriver:
    """Records arm/disarm calls instead of scheduling real ticks."""

    def __init__(self):
        self.arms = 0
        self.disarms = 0
        self.armed = False

    def arm(self):
        self.arms += 1
        self.armed = True

    def disarm(self):
        self.disarms += 1
        self.armed = False

    def is_current(self, generation):
        return self.armed


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def hub(flask_app):
    from pomosync.sync import get_hub
    return get_hub(flask_app)


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
    )
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()


@pytest.fixture()
def fake_driver():
    return FakeDriver()
