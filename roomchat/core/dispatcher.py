"""
Broadcast dispatcher - room-scoped, global and requester-only fanout.

Room fanout rides on the transport's own rooms: a connection enters the
Socket.IO room of every chat room it joins and leaves it on disconnect.
Delivery is fire once: whatever the transport does with an emit is final.
"""
import logging

logger = logging.getLogger(__name__)


class BroadcastDispatcher:
    """
    Wraps a transport exposing `emit(event, data, to=None, namespace=None)`,
    `enter_room(sid, room, namespace)`, `leave_room(sid, room, namespace)`
    and `close_room(room, namespace)`.
    """

    def __init__(self, transport, namespace='/'):
        self._transport = transport
        self.namespace = namespace

    def subscribe(self, sid, room_name):
        self._transport.enter_room(sid, room_name, namespace=self.namespace)

    def unsubscribe(self, sid, room_name):
        self._transport.leave_room(sid, room_name, namespace=self.namespace)

    def close(self, room_name):
        self._transport.close_room(room_name, namespace=self.namespace)

    def notify_room(self, room_name, event, payload):
        self._transport.emit(event, payload, to=room_name, namespace=self.namespace)
        logger.debug(f"[DISPATCH ROOM] {event} -> {room_name}")

    def notify_all(self, event, payload):
        self._transport.emit(event, payload, to=None, namespace=self.namespace)
        logger.debug(f"[DISPATCH ALL] {event}")

    def notify_session(self, sid, event, payload):
        self._transport.emit(event, payload, to=sid, namespace=self.namespace)
        logger.debug(f"[DISPATCH SESSION] {event} -> {sid}")
