# Flask extensions initialization
# Helps avoid circular imports by initializing extensions without app context

from flask import current_app
from flask_socketio import SocketIO

from roomchat.core import ChatBroker, ChatLimits

socketio = SocketIO(
    path='socket.io',
    engineio_logger=False,
    socketio_logger=False
)

BROKER_KEY = 'chat_broker'


class SocketIOTransport:
    # Emits and room membership through the Socket.IO server; the server is
    # looked up per call since init_app replaces it for every new app

    def __init__(self, sio):
        self._sio = sio

    def emit(self, event, data, to=None, namespace=None):
        self._sio.emit(event, data, to=to, namespace=namespace)

    def enter_room(self, sid, room, namespace=None):
        self._sio.server.enter_room(sid, room, namespace=namespace)

    def leave_room(self, sid, room, namespace=None):
        self._sio.server.leave_room(sid, room, namespace=namespace)

    def close_room(self, room, namespace=None):
        self._sio.server.close_room(room, namespace=namespace)


def init_broker(flask_app):
    # One broker (registry + sessions) per application, nothing module-level
    broker = ChatBroker(
        transport=SocketIOTransport(socketio),
        limits=ChatLimits.from_config(flask_app.config),
    )
    flask_app.extensions[BROKER_KEY] = broker
    return broker


def get_broker(flask_app=None):
    # Broker of the given app, or of the app handling the current event/request
    flask_app = flask_app or current_app
    return flask_app.extensions[BROKER_KEY]
