# Models package
# Import all models here for convenience

from roomchat.models.chat import Room, RoomSummary
from roomchat.models.content import Message
from roomchat.models.session import Session

__all__ = ['Room', 'RoomSummary', 'Message', 'Session']
