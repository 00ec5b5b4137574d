# Content-related models: chat messages

from dataclasses import dataclass
from datetime import datetime

from roomchat.functions import iso_timestamp


@dataclass
class Message:
    # Chat message kept in a room's in-memory history
    id: str
    author: str
    text: str
    room: str
    created_at: datetime

    def to_dict(self):
        return {
            'id': self.id,
            'author': self.author,
            'text': self.text,
            'room': self.room,
            'createdAt': iso_timestamp(self.created_at),
        }
