# Entry point for the RoomChat server

import logging

from roomchat import create_app
from roomchat.extensions import socketio

app = create_app()
logger = logging.getLogger('roomchat.run')

if __name__ == '__main__':
    host = app.config['HOST']
    port = app.config['PORT']
    logger.info(f"[SERVER STARTUP] Starting RoomChat on {host}:{port}")
    socketio.run(app, host=host, port=port, allow_unsafe_werkzeug=True, debug=False)
