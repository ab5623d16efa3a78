from flask import Blueprint, jsonify, request, current_app
from livescore import get_registry
from livescore.errors import InvalidArgumentError, InvalidStateError, MatchError, MatchNotFoundError
from livescore.socketio_events import broadcast_match_deleted, broadcast_match_update, broadcast_scoreboard


matches = Blueprint('matches', __name__)

_ERROR_STATUS = (
    (InvalidArgumentError, 400),
    (MatchNotFoundError, 404),
    (InvalidStateError, 409),
)


@matches.errorhandler(MatchError)
def handle_match_error(exc):
    status = next((code for cls, code in _ERROR_STATUS if isinstance(exc, cls)), 400)
    current_app.logger.info(f"[rejected] {request.method} {request.path} status={status} error={exc}")
    return jsonify({'error': str(exc)}), status


@matches.route('', methods=['POST'])
def start_match():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({'error': 'JSON object body required'}), 400
    match = get_registry().start_new_match(data.get('home_team'), data.get('away_team'))
    broadcast_match_update(match)
    broadcast_scoreboard()
    return jsonify(match.to_dict()), 201


@matches.route('/<int:match_id>', methods=['GET'])
def get_match(match_id):
    return jsonify(get_registry().get_match(match_id).to_dict())


@matches.route('/<int:match_id>/score', methods=['POST'])
def update_score(match_id):
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({'error': 'JSON object body required'}), 400
    match = get_registry().update_score(match_id, data.get('team'), data.get('score'))
    broadcast_match_update(match)
    broadcast_scoreboard()
    return jsonify(match.to_dict())


@matches.route('/<int:match_id>/complete', methods=['POST'])
def complete_match(match_id):
    match = get_registry().complete_match(match_id)
    broadcast_match_update(match)
    broadcast_scoreboard()
    return jsonify(match.to_dict())


@matches.route('/<int:match_id>', methods=['DELETE'])
def delete_match(match_id):
    if get_registry().delete_match(match_id):
        broadcast_match_deleted(match_id)
        broadcast_scoreboard()
    return '', 204


@matches.route('/scoreboard', methods=['GET'])
def get_scoreboard():
    raw_limit = request.args.get('limit')
    if raw_limit is None:
        limit = int(current_app.config.get('SCOREBOARD_DEFAULT_LIMIT', 5))
    else:
        try:
            limit = int(raw_limit)
        except ValueError:
            return jsonify({'error': 'limit must be an integer'}), 400
    board = get_registry().get_scoreboard(limit)
    return jsonify({'matches': [m.to_dict() for m in board]})
