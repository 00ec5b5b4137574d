"""Test configuration and fixtures."""
from datetime import datetime, timedelta, timezone

import pytest

from roomchat import create_app
from roomchat.core import ChatBroker
from roomchat.extensions import socketio


class ChatTestConfig:
    TESTING = True
    ASYNC_MODE = 'threading'
    LOG_LEVEL = 'WARNING'
    SECRET_KEY = 'test'


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start=None):
        self.current = start or datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.current

    def advance(self, seconds=1):
        self.current += timedelta(seconds=seconds)


class RecordingTransport:
    """Stands in for the Socket.IO server: keeps rooms, emits and deliveries."""

    def __init__(self):
        self.rooms = {}
        self.emits = []
        self.calls = []

    def emit(self, event, payload, to=None, namespace=None):
        self.emits.append((event, payload, to))
        if to is None:
            self.calls.append((event, payload, None))
        elif to in self.rooms:
            for sid in self.rooms[to]:
                self.calls.append((event, payload, sid))
        else:
            self.calls.append((event, payload, to))

    def enter_room(self, sid, room, namespace=None):
        members = self.rooms.setdefault(room, [])
        if sid not in members:
            members.append(sid)

    def leave_room(self, sid, room, namespace=None):
        members = self.rooms.get(room, [])
        if sid in members:
            members.remove(sid)

    def close_room(self, room, namespace=None):
        self.rooms.pop(room, None)

    def clear(self):
        self.emits = []
        self.calls = []

    def named(self, event):
        return [(payload, to) for name, payload, to in self.calls if name == event]

    def received_by(self, sid):
        # Events delivered to one connection, including global broadcasts
        return [(name, payload) for name, payload, to in self.calls if to in (sid, None)]

    def names_for(self, sid):
        return [name for name, payload, to in self.calls if to == sid]


def received_named(received, event):
    """Payloads of one event out of a test client's get_received() list."""
    # 'message' and 'json' events carry the payload itself in args, not a list
    return [
        msg['args'] if event in ('message', 'json') else msg['args'][0]
        for msg in received if msg['name'] == event
    ]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def broker(transport, clock):
    return ChatBroker(transport=transport, clock=clock)


@pytest.fixture
def app():
    return create_app(ChatTestConfig)


@pytest.fixture
def connect(app):
    """Factory for connected Socket.IO test clients, disconnected at teardown."""
    clients = []

    def _connect():
        client = socketio.test_client(app)
        clients.append(client)
        return client

    yield _connect
    for client in clients:
        if client.is_connected():
            client.disconnect()


def assert_registry_invariants(broker):
    """Every live room has members and admins; every active room was joined."""
    for summary in broker.registry.list_rooms():
        room = broker.registry.get(summary.name)
        assert room.members
        assert room.admins
        assert room.created_by in room.admins
        assert len(room.members) == len(set(room.members))
    for session in broker.sessions:
        if session.active_room is not None:
            assert session.active_room in session.joined_rooms
