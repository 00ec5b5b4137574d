"""Tests for the room registry."""
from roomchat.core import RoomRegistry

from .conftest import FakeClock


def test_get_or_create_creates_once():
    registry = RoomRegistry(clock=FakeClock())

    room, created = registry.get_or_create('General', 'Ana')
    again, created_again = registry.get_or_create('General', 'Bob')

    assert created is True
    assert created_again is False
    assert again is room
    assert room.created_by == 'Ana'
    assert room.admins == ['Ana']
    assert room.history == []
    assert len(registry) == 1


def test_new_room_activity_is_creation_time():
    clock = FakeClock()
    registry = RoomRegistry(clock=clock)

    room, _ = registry.get_or_create('General', 'Ana')

    assert room.last_activity == clock.current


def test_remove_returns_room_and_forgets_it():
    registry = RoomRegistry(clock=FakeClock())
    room, _ = registry.get_or_create('General', 'Ana')

    assert registry.remove('General') is room
    assert 'General' not in registry
    assert registry.remove('General') is None
    assert registry.list_rooms() == []


def test_list_rooms_most_recent_first():
    clock = FakeClock()
    registry = RoomRegistry(clock=clock)
    for name in ('Alpha', 'Beta', 'Gamma'):
        registry.get_or_create(name, 'Ana')
        clock.advance(5)

    assert [s.name for s in registry.list_rooms()] == ['Gamma', 'Beta', 'Alpha']

    registry.touch('Alpha')
    assert [s.name for s in registry.list_rooms()] == ['Alpha', 'Gamma', 'Beta']


def test_summary_fields():
    clock = FakeClock()
    registry = RoomRegistry(clock=clock)
    room, _ = registry.get_or_create('General', 'Ana')
    room.add_member('Ana')
    room.add_member('Bob')

    summary = registry.list_rooms()[0]

    assert summary.to_dict() == {
        'name': 'General',
        'memberCount': 2,
        'creator': 'Ana',
        'lastActivity': '2024-05-01T12:00:00.000Z',
    }


def test_touch_unknown_room_is_ignored():
    registry = RoomRegistry(clock=FakeClock())
    registry.touch('Nowhere')
    assert len(registry) == 0


def test_message_ids_increase_on_frozen_clock():
    registry = RoomRegistry(clock=FakeClock())

    ids = [int(registry.next_message_id()) for _ in range(5)]

    assert ids == sorted(ids)
    assert len(set(ids)) == 5


def test_message_ids_never_go_backwards():
    clock = FakeClock()
    registry = RoomRegistry(clock=clock)

    first = int(registry.next_message_id())
    clock.advance(-60)
    second = int(registry.next_message_id())

    assert second == first + 1
