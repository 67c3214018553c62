from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

from xo_relay.services.rooms import RelayHub, SocketIONotifier

socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config['LOG_LEVEL'])

    allowed_origins = flask_app.config['CORS_ALLOWED_ORIGINS']
    CORS(flask_app, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One hub per app so tests never share rooms
    namespace = flask_app.config['SOCKETIO_NAMESPACE']
    flask_app.extensions['xo_relay'] = RelayHub(
        SocketIONotifier(socketio, namespace),
        symbols=flask_app.config['PLAYER_SYMBOLS'],
        logger=flask_app.logger,
    )

    from xo_relay.main import main
    flask_app.register_blueprint(main)

    # Importing here ensures the handlers bind to the initialized socketio instance
    from xo_relay.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace)

    return flask_app
