"""
Chat broker - room and session coordination core.

Every operation runs under one lock: the check-then-mutate sequences
(create-if-absent, admin check + promote, membership check + append) and
the fanout that follows them always see a single consistent state.
"""
import logging
import threading
from dataclasses import dataclass

from roomchat.core.dispatcher import BroadcastDispatcher
from roomchat.core.errors import InvalidRequest
from roomchat.core.registry import RoomRegistry
from roomchat.core.sessions import SessionStore
from roomchat.functions import clean_name, clip_text
from roomchat.models import Message

logger = logging.getLogger(__name__)

JOIN_FIELDS_REQUIRED = 'Username and room name are required'


@dataclass
class ChatLimits:
    max_username_length: int = 20
    max_room_name_length: int = 30
    max_message_length: int = 5000

    @classmethod
    def from_config(cls, config):
        return cls(
            max_username_length=int(config.get('MAX_USERNAME_LENGTH', cls.max_username_length)),
            max_room_name_length=int(config.get('MAX_ROOM_NAME_LENGTH', cls.max_room_name_length)),
            max_message_length=int(config.get('MAX_MESSAGE_LENGTH', cls.max_message_length)),
        )


class ChatBroker:
    """
    Owns the room registry and the session store of one application and
    fans out notifications through a BroadcastDispatcher.
    """

    def __init__(self, transport, limits=None, clock=None, namespace='/'):
        self.limits = limits or ChatLimits()
        self.registry = RoomRegistry(clock=clock)
        self.sessions = SessionStore()
        self.dispatcher = BroadcastDispatcher(transport, namespace=namespace)
        self._lock = threading.RLock()

    # --- NAMES ---

    def clean_username(self, value):
        return clean_name(value, self.limits.max_username_length)

    def clean_room_name(self, value):
        return clean_name(value, self.limits.max_room_name_length)

    # --- SESSION LIFECYCLE ---

    def connect(self, sid):
        with self._lock:
            session = self.sessions.create(sid)
            logger.info(f"[SOCKET CONNECT] {sid} connected ({len(self.sessions)} live)")
            return session

    def disconnect(self, sid):
        # Session and its room subscriptions go first: no fanout target for its own departure
        with self._lock:
            session = self.sessions.discard(sid)
            if session is None or not session.is_identified:
                logger.info(f"[SOCKET DISCONNECT] {sid} disconnected")
                return

            for room_name in list(session.joined_rooms):
                self.dispatcher.unsubscribe(sid, room_name)
                if self.sessions.has_other_member(room_name, session.username):
                    logger.debug(f"[SOCKET DISCONNECT] {session.username} still present in {room_name}")
                    continue
                self.leave(room_name, session.username)
            logger.info(f"[SOCKET DISCONNECT] {session.username} ({sid}) disconnected")

    def join(self, sid, username, room_name):
        """
        Join (creating it if needed) a room and focus it.

        Returns:
            dict: the room-info payload sent to the requester

        Raises:
            InvalidRequest: username or room name missing/blank
        """
        username = self.clean_username(username)
        room_name = self.clean_room_name(room_name)
        if not username or not room_name:
            raise InvalidRequest(JOIN_FIELDS_REQUIRED)

        with self._lock:
            session = self.sessions.create(sid)
            if session.username is None:
                session.username = username
            elif session.username != username:
                logger.debug(f"[ROOM JOIN] {sid} keeps username {session.username}, ignoring {username}")
            username = session.username

            room, created = self.registry.get_or_create(room_name, username)
            if created:
                room.add_member(username)

            membership_changed = created
            if session.mark_joined(room_name):
                self.dispatcher.subscribe(sid, room_name)
                if not created:
                    membership_changed = room.add_member(username)
            session.activate(room_name)

            if created:
                self.dispatcher.notify_all('room-created', room.summary().to_dict())

            info = room.info_payload(username)
            self.dispatcher.notify_session(sid, 'room-info', info)

            if membership_changed:
                self._announce_users(room)
                if not created:
                    self.dispatcher.notify_room(room_name, 'notice', f'{username} joined the room.')
            logger.info(f"[ROOM JOIN] {username} joined {room_name}")
            return info

    def switch_room(self, sid, room_name):
        # Refocus a room this connection already joined; requester-only response
        with self._lock:
            session = self.sessions.get(sid)
            if session is None or not session.is_identified:
                return None
            room_name = self.clean_room_name(room_name)
            room = self.registry.get(room_name)
            if room is None or not session.activate(room_name):
                logger.debug(f"[ROOM SWITCH] {sid} cannot switch to {room_name}")
                return None

            info = room.info_payload(session.username)
            self.dispatcher.notify_session(sid, 'room-info', info)
            logger.info(f"[ROOM SWITCH] {session.username} switched to {room_name}")
            return info

    def send_message(self, sid, text):
        # Post to the session's active room as the session's user
        with self._lock:
            session = self.sessions.get(sid)
            if session is None or not session.is_identified or session.active_room is None:
                return None
            return self.post_message(session.active_room, session.username, text)

    def remove_message(self, sid, room_name, message_id):
        with self._lock:
            session = self.sessions.get(sid)
            if session is None or not session.is_identified:
                return False
            return self.delete_message(room_name, session.username, message_id)

    def add_admin(self, sid, target, room_name):
        with self._lock:
            session = self.sessions.get(sid)
            if session is None or not session.is_identified:
                return False
            return self.promote(room_name, session.username, target)

    # --- ROOM OPERATIONS ---

    def leave(self, room_name, username):
        with self._lock:
            room = self.registry.get(room_name)
            if room is None or not room.remove_member(username):
                return

            if room.is_empty:
                self.remove_room(room_name)
            else:
                self._announce_users(room)
                self.dispatcher.notify_room(room_name, 'notice', f'{username} left the room.')
            logger.info(f"[ROOM LEAVE] {username} left {room_name}")

    def remove_room(self, room_name):
        # Registry entry, transport room and one global announcement go together
        with self._lock:
            room = self.registry.remove(room_name)
            if room is None:
                return None
            self.dispatcher.close(room_name)
            self.dispatcher.notify_all('room-removed', {'name': room_name})
            return room

    def post_message(self, room_name, author, text):
        # No membership check on the author
        with self._lock:
            room = self.registry.get(self.clean_room_name(room_name))
            text = clip_text(text, self.limits.max_message_length)
            if room is None or not text:
                return None

            message = Message(
                id=self.registry.next_message_id(),
                author=author,
                text=text,
                room=room.name,
                created_at=self.registry.now(),
            )
            room.add_message(message)
            self.registry.touch(room.name)

            self.dispatcher.notify_room(room.name, 'message', message.to_dict())
            activity = room.summary().to_dict()
            activity['lastMessage'] = text
            self.dispatcher.notify_all('room-activity', activity)
            logger.debug(f"[MESSAGE] {author} -> {room.name} ({message.id})")
            return message

    def delete_message(self, room_name, actor, message_id):
        # Admins only; anything else is silently ignored
        with self._lock:
            room = self.registry.get(self.clean_room_name(room_name))
            if room is None or not room.is_admin(actor):
                return False
            message_id = str(message_id)
            if not room.remove_message(message_id):
                return False

            self.dispatcher.notify_room(room.name, 'message-deleted', {'id': message_id})
            logger.info(f"[MESSAGE DELETE] {actor} deleted {message_id} in {room.name}")
            return True

    def promote(self, room_name, actor, target):
        # Admins only, target must not be an admin yet; silent otherwise
        with self._lock:
            room = self.registry.get(self.clean_room_name(room_name))
            target = self.clean_username(target)
            if room is None or not target or not room.is_admin(actor):
                return False
            if not room.add_admin(target):
                return False

            self.dispatcher.notify_room(room.name, 'notice', f'{target} is now an admin.')
            self._announce_users(room)
            self.dispatcher.notify_room(room.name, 'admin-granted', {'username': target, 'roomName': room.name})
            logger.info(f"[ADMIN] {actor} promoted {target} in {room.name}")
            return True

    # --- READS ---

    def list_rooms(self):
        with self._lock:
            return [summary.to_dict() for summary in self.registry.list_rooms()]

    def list_users(self, room_name):
        with self._lock:
            room = self.registry.get(self.clean_room_name(room_name))
            if room is None:
                return None
            return room.users_payload()

    # Membership update to the room plus the member count for room browsers
    def _announce_users(self, room):
        self.dispatcher.notify_room(room.name, 'users-updated', room.users_payload())
        self.dispatcher.notify_all('room-activity', room.summary().to_dict())
