from flask import Blueprint, jsonify
from wizwac import rooms

rooms_api = Blueprint('rooms_api', __name__)

@rooms_api.route('/<string:room_code>', methods=['GET'])
def get_room(room_code):
    """
    Returns a read-only snapshot of a live room.
    """
    with rooms.lock:
        room = rooms.get(room_code)
        if room is None:
            return jsonify({'error': 'Room not found'}), 404
        return jsonify(room.to_dict())
