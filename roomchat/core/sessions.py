# Session store: one Session per live connection, keyed by sid

from typing import Dict, Optional

from roomchat.models import Session


class SessionStore:

    def __init__(self):
        self._sessions: Dict[str, Session] = {}

    def __contains__(self, sid):
        return sid in self._sessions

    def __len__(self):
        return len(self._sessions)

    def __iter__(self):
        return iter(list(self._sessions.values()))

    def create(self, sid):
        session = self._sessions.get(sid)
        if session is None:
            session = Session(sid=sid)
            self._sessions[sid] = session
        return session

    def get(self, sid) -> Optional[Session]:
        return self._sessions.get(sid)

    def discard(self, sid) -> Optional[Session]:
        return self._sessions.pop(sid, None)

    def has_other_member(self, room_name, username):
        # Another live connection with this username still in the room
        for session in self._sessions.values():
            if session.username == username and session.has_joined(room_name):
                return True
        return False
