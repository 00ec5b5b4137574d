# Schemas package

from roomchat.schemas.events import (
    EventRequest, JoinRoomRequest, SwitchRoomRequest, SendMessageRequest,
    DeleteMessageRequest, AddAdminRequest, ListRoomsRequest, ListUsersRequest,
    REQUEST_SCHEMAS, parse_request
)

__all__ = [
    'EventRequest', 'JoinRoomRequest', 'SwitchRoomRequest', 'SendMessageRequest',
    'DeleteMessageRequest', 'AddAdminRequest', 'ListRoomsRequest', 'ListUsersRequest',
    'REQUEST_SCHEMAS', 'parse_request'
]
