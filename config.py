# Configuration file for the RoomChat server

import json
import os

# Try to load configuration from `config.json` located next to this file.
# If the file is missing or a key is absent, fall back to the defaults below.
_BASE_DIR = os.path.dirname(os.path.abspath(__file__))
_JSON_PATH = os.path.join(_BASE_DIR, 'config.json')

# Defaults
_defaults = {
    'SECRET_KEY': 'change-me-roomchat',
    'HOST': '0.0.0.0',
    'PORT': 3000,
    'LOG_LEVEL': 'INFO',
    'CORS_ALLOWED_ORIGINS': '*',
    # None lets Flask-SocketIO pick eventlet, gevent or threading
    'ASYNC_MODE': None,
    'PING_TIMEOUT': 60,
    'PING_INTERVAL': 25,
    'MAX_USERNAME_LENGTH': 20,
    'MAX_ROOM_NAME_LENGTH': 30,
    'MAX_MESSAGE_LENGTH': 5000,
}

_cfg = {}
try:
    with open(_JSON_PATH, 'r', encoding='utf-8') as f:
        _cfg = json.load(f) or {}
except FileNotFoundError:
    # No config.json present, defaults only
    _cfg = {}
except ValueError:
    # Unparseable config.json, keep running on defaults
    _cfg = {}


# Helper to get value from JSON or defaults
def _get(key):
    return _cfg.get(key, _defaults.get(key))


# Security
SECRET_KEY = _get('SECRET_KEY')

# Server
HOST = _get('HOST')
PORT = int(_get('PORT'))
LOG_LEVEL = _get('LOG_LEVEL')

# Socket.IO
CORS_ALLOWED_ORIGINS = _get('CORS_ALLOWED_ORIGINS')
ASYNC_MODE = _get('ASYNC_MODE')
PING_TIMEOUT = int(_get('PING_TIMEOUT'))
PING_INTERVAL = int(_get('PING_INTERVAL'))

# Chat limits
MAX_USERNAME_LENGTH = int(_get('MAX_USERNAME_LENGTH'))
MAX_ROOM_NAME_LENGTH = int(_get('MAX_ROOM_NAME_LENGTH'))
MAX_MESSAGE_LENGTH = int(_get('MAX_MESSAGE_LENGTH'))
