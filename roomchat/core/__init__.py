# Chat core package: registry, sessions, dispatcher, broker

from roomchat.core.broker import ChatBroker, ChatLimits, JOIN_FIELDS_REQUIRED
from roomchat.core.dispatcher import BroadcastDispatcher
from roomchat.core.errors import InvalidRequest
from roomchat.core.registry import RoomRegistry
from roomchat.core.sessions import SessionStore

__all__ = [
    'ChatBroker', 'ChatLimits', 'JOIN_FIELDS_REQUIRED',
    'BroadcastDispatcher', 'InvalidRequest',
    'RoomRegistry', 'SessionStore'
]
