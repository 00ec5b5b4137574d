# Connection-related models: per-connection session state

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Session:
    # Server-side state of one live Socket.IO connection
    sid: str
    username: Optional[str] = None
    joined_rooms: List[str] = field(default_factory=list)  # ordered set, join order
    active_room: Optional[str] = None

    @property
    def is_identified(self):
        return self.username is not None

    @property
    def state(self):
        # 'unidentified' until the first successful join
        if not self.is_identified:
            return 'unidentified'
        return 'active'

    def has_joined(self, room_name):
        return room_name in self.joined_rooms

    def mark_joined(self, room_name):
        if room_name in self.joined_rooms:
            return False
        self.joined_rooms.append(room_name)
        return True

    def activate(self, room_name):
        # Active room must be one this connection joined
        if room_name not in self.joined_rooms:
            return False
        self.active_room = room_name
        return True
