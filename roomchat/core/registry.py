"""
Room registry - authoritative mapping of room name to Room state.

Not thread-safe on its own: ChatBroker calls it only while holding its lock.
"""
import logging
from typing import Dict, List, Optional, Tuple

from roomchat.functions import utc_now
from roomchat.models import Room, RoomSummary

logger = logging.getLogger(__name__)


class RoomRegistry:
    """Owns every live room and the message id clock."""

    def __init__(self, clock=None):
        self._rooms: Dict[str, Room] = {}
        self._clock = clock or utc_now
        self._last_message_id = 0

    def __contains__(self, name):
        return name in self._rooms

    def __len__(self):
        return len(self._rooms)

    def now(self):
        return self._clock()

    def get(self, name) -> Optional[Room]:
        return self._rooms.get(name)

    def get_or_create(self, name, creator) -> Tuple[Room, bool]:
        """
        Return the room called `name`, creating it with `creator` as sole
        admin when it does not exist yet.

        Returns:
            (room, created)
        """
        room = self._rooms.get(name)
        if room is not None:
            return room, False

        room = Room(name=name, created_by=creator, last_activity=self.now())
        self._rooms[name] = room
        logger.info(f"[ROOM CREATE] {name} created by {creator}")
        return room, True

    def remove(self, name) -> Optional[Room]:
        room = self._rooms.pop(name, None)
        if room is not None:
            logger.info(f"[ROOM REMOVE] {name} removed")
        return room

    def touch(self, name):
        room = self._rooms.get(name)
        if room is not None:
            room.last_activity = self.now()

    def list_rooms(self) -> List[RoomSummary]:
        """Room summaries, most recently active first."""
        summaries = [room.summary() for room in self._rooms.values()]
        summaries.sort(key=lambda summary: summary.last_activity, reverse=True)
        return summaries

    def next_message_id(self):
        # Millisecond timestamp, bumped so ids never repeat or go backwards
        stamp = int(self.now().timestamp() * 1000)
        self._last_message_id = max(stamp, self._last_message_id + 1)
        return str(self._last_message_id)
