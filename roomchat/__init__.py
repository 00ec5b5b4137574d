# Flask application factory

import logging

from flask import Flask

import config as default_config
from roomchat.extensions import socketio, init_broker

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def create_app(config=None):
    # Create and configure the chat application
    flask_app = Flask(__name__)

    # Defaults from config.py (and config.json), then the optional override object
    flask_app.config.from_object(default_config)
    if config:
        flask_app.config.from_object(config)

    configure_logging(flask_app.config.get('LOG_LEVEL', 'INFO'))

    # Socket handlers must be registered before init_app builds the server
    import roomchat.sockets  # noqa

    socketio.init_app(flask_app, **_socketio_options(flask_app.config))
    init_broker(flask_app)

    # Register blueprints
    from roomchat.routes import api_bp
    flask_app.register_blueprint(api_bp)

    logging.getLogger(__name__).info(
        f"[SERVER CONFIG] async_mode={socketio.server.async_mode}, "
        f"limits={flask_app.config['MAX_USERNAME_LENGTH']}/{flask_app.config['MAX_ROOM_NAME_LENGTH']}"
    )
    return flask_app


def configure_logging(level):
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger('roomchat').setLevel(level)


def _socketio_options(app_config):
    options = {
        'cors_allowed_origins': app_config.get('CORS_ALLOWED_ORIGINS', '*'),
        'ping_timeout': app_config.get('PING_TIMEOUT', 60),
        'ping_interval': app_config.get('PING_INTERVAL', 25),
    }
    # Leave async_mode unset to let Flask-SocketIO pick eventlet/gevent/threading
    if app_config.get('ASYNC_MODE'):
        options['async_mode'] = app_config['ASYNC_MODE']
    return options
