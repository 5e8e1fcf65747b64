import logging

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config
from wizwac.services.games.registry import RoomRegistry

rooms = RoomRegistry()
socketio = SocketIO(async_mode=None)


def _allowed_origins(value):
    if not value or value.strip() == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def _log_level(value):
    level = str(value or 'INFO').strip().upper()
    # getLevelName maps known names to ints and anything else to a string
    if not isinstance(logging.getLevelName(level), int):
        return logging.INFO
    return logging.getLevelName(level)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(_log_level(flask_app.config.get('LOG_LEVEL')))

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ORIGINS'))
    rooms.init_app(flask_app)
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from wizwac.routes import main
    flask_app.register_blueprint(main)

    from wizwac.api.rooms import rooms_api
    flask_app.register_blueprint(rooms_api, url_prefix='/api/rooms')

    # Importing here ensures the handlers bind to the initialized socketio instance
    from wizwac.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    return flask_app
