"""
Pydantic models for inbound Socket.IO event payloads.

One schema per event name; the set is closed and checked at the router
boundary before anything reaches the chat core.
"""
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra='ignore')

    # Payload key used when a client sends a bare value instead of an object
    bare_field: ClassVar[Optional[str]] = None

    @field_validator('*', mode='before')
    @classmethod
    def _numbers_as_text(cls, value):
        # Browsers happily send numeric names and ids
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class JoinRoomRequest(EventRequest):
    """Join or create a room."""
    username: str = Field(min_length=1)
    room_name: str = Field(alias='roomName', min_length=1)


class SwitchRoomRequest(EventRequest):
    """Focus a room the connection already joined."""
    bare_field: ClassVar[Optional[str]] = 'roomName'
    room_name: str = Field(alias='roomName', min_length=1)


class SendMessageRequest(EventRequest):
    """Post to the active room."""
    bare_field: ClassVar[Optional[str]] = 'text'
    text: str = Field(min_length=1)


class DeleteMessageRequest(EventRequest):
    """Admin-only message removal."""
    id: str = Field(min_length=1)
    room_name: str = Field(alias='roomName', min_length=1)


class AddAdminRequest(EventRequest):
    """Admin-only promotion of another user."""
    username: str = Field(min_length=1)
    room_name: str = Field(alias='roomName', min_length=1)


class ListRoomsRequest(EventRequest):
    pass


class ListUsersRequest(EventRequest):
    bare_field: ClassVar[Optional[str]] = 'roomName'
    room_name: str = Field(alias='roomName', min_length=1)


REQUEST_SCHEMAS = {
    'join-room': JoinRoomRequest,
    'switch-room': SwitchRoomRequest,
    'send-message': SendMessageRequest,
    'delete-message': DeleteMessageRequest,
    'add-admin': AddAdminRequest,
    'list-rooms': ListRoomsRequest,
    'list-users': ListUsersRequest,
}


def parse_request(event, data):
    """
    Validate the payload of an inbound event.

    Args:
        event: Socket.IO event name, one of REQUEST_SCHEMAS
        data: raw payload as received

    Returns:
        EventRequest: the validated request

    Raises:
        KeyError: unknown event name
        pydantic.ValidationError: payload does not match the schema
    """
    schema = REQUEST_SCHEMAS[event]
    if data is None:
        data = {}
    elif schema.bare_field and isinstance(data, (str, int, float)) and not isinstance(data, bool):
        data = {schema.bare_field: data}
    return schema.model_validate(data)
