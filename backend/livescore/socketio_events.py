from flask_socketio import join_room, leave_room, emit
from flask import current_app
from livescore import socketio, get_registry
from livescore.errors import MatchError
from livescore.models import Match
from typing import Optional

NAMESPACE = '/ws'


def _room(match_id: int) -> str:
    return f"match:{match_id}"


def _parse_match_id(data) -> Optional[int]:
    if not isinstance(data, dict):
        return None
    raw = data.get('match_id')
    if isinstance(raw, bool):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def _default_limit() -> int:
    return int(current_app.config.get('SCOREBOARD_DEFAULT_LIMIT', 5))


def _broadcasts_enabled() -> bool:
    return bool(current_app.config.get('BROADCAST_UPDATES', True))


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_match(data=None):
    match_id = _parse_match_id(data)
    if match_id is None:
        emit('error', {'message': 'match_id is required'})
        return
    try:
        match = get_registry().get_match(match_id)
    except MatchError as exc:
        emit('error', {'message': str(exc)})
        return
    room = _room(match_id)
    join_room(room)
    emit('joined', {'room': room, 'match': match.to_dict()})


def handle_leave_match(data=None):
    match_id = _parse_match_id(data)
    if match_id is None:
        emit('error', {'message': 'match_id is required'})
        return
    room = _room(match_id)
    leave_room(room)
    emit('left', {'room': room})


def handle_get_scoreboard(data=None):
    if data is None:
        data = {}
    if not isinstance(data, dict):
        emit('error', {'message': 'payload must be an object'})
        return
    limit = data.get('limit', _default_limit())
    try:
        board = get_registry().get_scoreboard(limit)
    except MatchError as exc:
        emit('error', {'message': str(exc)})
        return
    emit('scoreboard', {'matches': [m.to_dict() for m in board]})


def handle_ping(data=None):
    emit('pong', data or {})

# ---- Server-side broadcasts, called after HTTP mutations ----

def broadcast_scoreboard() -> None:
    """Push the current default-size scoreboard to every connected client."""
    if not _broadcasts_enabled():
        return
    board = get_registry().get_scoreboard(_default_limit())
    socketio.emit('scoreboard_update', {'matches': [m.to_dict() for m in board]}, namespace=NAMESPACE)


def broadcast_match_update(match: Match) -> None:
    if not _broadcasts_enabled():
        return
    socketio.emit('match_update', {'match': match.to_dict()}, to=_room(match.id), namespace=NAMESPACE)


def broadcast_match_deleted(match_id: int) -> None:
    if not _broadcasts_enabled():
        return
    socketio.emit('match_deleted', {'match_id': match_id}, to=_room(match_id), namespace=NAMESPACE)
    current_app.logger.info(f"[match_deleted] match={match_id} room={_room(match_id)} notified")


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    handlers = {
        'connect': handle_connect,
        'join_match': handle_join_match,
        'leave_match': handle_leave_match,
        'get_scoreboard': handle_get_scoreboard,
        'ping': handle_ping,
    }
    namespaces = [NAMESPACE, '/'] if testing else [NAMESPACE]
    for namespace in namespaces:
        for event, handler in handlers.items():
            socketio.on_event(event, handler, namespace=namespace)
