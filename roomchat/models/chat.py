# Chat-related models: rooms and room summaries

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from roomchat.functions import iso_timestamp
from roomchat.models.content import Message


@dataclass
class RoomSummary:
    # Row of the room browser
    name: str
    member_count: int
    creator: str
    last_activity: datetime

    def to_dict(self):
        return {
            'name': self.name,
            'memberCount': self.member_count,
            'creator': self.creator,
            'lastActivity': iso_timestamp(self.last_activity),
        }


@dataclass
class Room:
    # Named chat room: members in join order, admins, message history
    name: str
    created_by: str
    last_activity: datetime
    members: List[str] = field(default_factory=list)
    admins: List[str] = field(default_factory=list)  # ordered set
    history: List[Message] = field(default_factory=list)

    def __post_init__(self):
        if self.created_by not in self.admins:
            self.admins.insert(0, self.created_by)

    @property
    def member_count(self):
        return len(self.members)

    @property
    def is_empty(self):
        return not self.members

    def add_member(self, username):
        if username in self.members:
            return False
        self.members.append(username)
        return True

    def remove_member(self, username):
        if username not in self.members:
            return False
        self.members.remove(username)
        return True

    def is_admin(self, username):
        return username in self.admins

    def add_admin(self, username):
        if username in self.admins:
            return False
        self.admins.append(username)
        return True

    def add_message(self, message):
        self.history.append(message)

    def find_message(self, message_id) -> Optional[Message]:
        for message in self.history:
            if message.id == message_id:
                return message
        return None

    def remove_message(self, message_id):
        message = self.find_message(message_id)
        if message is None:
            return False
        self.history.remove(message)
        return True

    def summary(self):
        return RoomSummary(
            name=self.name,
            member_count=self.member_count,
            creator=self.created_by,
            last_activity=self.last_activity,
        )

    def users_payload(self):
        return {'members': list(self.members), 'admins': list(self.admins)}

    def info_payload(self, username):
        # What a joining or switching session gets to render the room
        return {
            'name': self.name,
            'isAdmin': self.is_admin(username),
            'members': list(self.members),
            'history': [message.to_dict() for message in self.history],
        }
