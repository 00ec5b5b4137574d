# API routes (read-only room browser data)

from flask import Blueprint, jsonify

from roomchat.extensions import get_broker

api_bp = Blueprint('api', __name__, url_prefix='/api')


@api_bp.route('/rooms', methods=['GET'])
def list_rooms():
    # Live rooms, most recently active first
    return jsonify({'rooms': get_broker().list_rooms()})


@api_bp.route('/rooms/<path:room_name>/users', methods=['GET'])
def list_room_users(room_name):
    users = get_broker().list_users(room_name)
    if users is None:
        return jsonify({'error': 'Room not found'}), 404
    return jsonify(users)
