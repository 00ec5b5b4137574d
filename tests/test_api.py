"""Tests for the read-only HTTP API."""


def test_rooms_empty(app):
    response = app.test_client().get('/api/rooms')

    assert response.status_code == 200
    assert response.get_json() == {'rooms': []}


def test_rooms_lists_live_rooms(app, connect):
    ana = connect()
    ana.emit('join-room', {'username': 'Ana', 'roomName': 'General'})
    ana.emit('join-room', {'username': 'Ana', 'roomName': 'Random'})
    ana.emit('switch-room', 'General')
    ana.emit('send-message', {'text': 'bump'})

    rooms = app.test_client().get('/api/rooms').get_json()['rooms']

    assert [room['name'] for room in rooms] == ['General', 'Random']
    assert rooms[0]['creator'] == 'Ana'
    assert rooms[0]['memberCount'] == 1


def test_room_users(app, connect):
    ana = connect()
    bob = connect()
    ana.emit('join-room', {'username': 'Ana', 'roomName': 'General'})
    bob.emit('join-room', {'username': 'Bob', 'roomName': 'General'})

    response = app.test_client().get('/api/rooms/General/users')

    assert response.status_code == 200
    assert response.get_json() == {'members': ['Ana', 'Bob'], 'admins': ['Ana']}


def test_room_users_unknown_room(app):
    response = app.test_client().get('/api/rooms/Nowhere/users')

    assert response.status_code == 404
    assert response.get_json() == {'error': 'Room not found'}
