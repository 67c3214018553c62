import os
import sys
import pytest

# Ensure the backend root (containing the `xo_relay` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from config import Config
from xo_relay import create_app, socketio
from xo_relay.services.rooms import Notifier


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    SOCKETIO_NAMESPACE = '/'
    PLAYER_SYMBOLS = ('X', 'O')
    LOG_LEVEL = 'DEBUG'


class RecordingNotifier(Notifier):
    """Collects everything the room services send, per connection."""

    def __init__(self):
        self.sent = []
        self.subscriptions = set()

    def send_to_one(self, connection, event, *args):
        self.sent.append((connection, event, args))

    def subscribe(self, connection, room_id):
        self.subscriptions.add((connection, room_id))

    def unsubscribe(self, connection, room_id):
        self.subscriptions.discard((connection, room_id))

    def received(self, connection):
        return [(event, args) for sid, event, args in self.sent if sid == connection]

    def clear(self):
        self.sent.clear()


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_sio_client(flask_app):
    created = []

    def _make():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def sio_client(make_sio_client):
    return make_sio_client()
