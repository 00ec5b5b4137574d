# Socket.IO event handlers
# Thin router: validate the payload, hand it to the broker, report join errors

import logging

from flask import request
from flask_socketio import emit
from pydantic import ValidationError

from roomchat.core import InvalidRequest, JOIN_FIELDS_REQUIRED
from roomchat.extensions import socketio, get_broker
from roomchat.schemas import parse_request

logger = logging.getLogger(__name__)


def _parse(event, data):
    # Validated request, or None for payloads the core never sees
    try:
        return parse_request(event, data)
    except ValidationError as e:
        logger.debug(f"[SOCKET {event}] {request.sid} sent an invalid payload: {e.errors()}")
        return None


@socketio.on('connect')
def on_connect(auth=None):
    get_broker().connect(request.sid)


@socketio.on('disconnect')
def on_disconnect(reason=None):
    get_broker().disconnect(request.sid)


@socketio.on('join-room')
def on_join_room(data=None):
    # Join or create a room; the only event that reports errors back
    req = _parse('join-room', data)
    if req is None:
        emit('error', JOIN_FIELDS_REQUIRED)
        return
    try:
        get_broker().join(request.sid, req.username, req.room_name)
    except InvalidRequest as e:
        emit('error', str(e))


@socketio.on('switch-room')
def on_switch_room(data=None):
    req = _parse('switch-room', data)
    if req:
        get_broker().switch_room(request.sid, req.room_name)


@socketio.on('send-message')
def on_send_message(data=None):
    req = _parse('send-message', data)
    if req:
        get_broker().send_message(request.sid, req.text)


@socketio.on('delete-message')
def on_delete_message(data=None):
    req = _parse('delete-message', data)
    if req:
        get_broker().remove_message(request.sid, req.room_name, req.id)


@socketio.on('add-admin')
def on_add_admin(data=None):
    req = _parse('add-admin', data)
    if req:
        get_broker().add_admin(request.sid, req.username, req.room_name)


@socketio.on('list-rooms')
def on_list_rooms(data=None):
    if _parse('list-rooms', data) is None:
        return None
    rooms = get_broker().list_rooms()
    emit('room-list', rooms)
    return rooms


@socketio.on('list-users')
def on_list_users(data=None):
    req = _parse('list-users', data)
    if req is None:
        return None
    users = get_broker().list_users(req.room_name)
    if users is not None:
        emit('users-updated', users)
    return users


@socketio.on_error_default
def on_socket_error(e):
    # Keep the connection alive; log with traceback
    event = getattr(request, 'event', None) or {}
    logger.exception(f"[SOCKET ERROR] {event.get('message')}: {e}")
