from flask_socketio import join_room, leave_room, emit
from yahtzee import socketio
from yahtzee.services.games import parse_session_id


def _room(session_id: str) -> str:
    return f"session:{session_id}"


def notify_state_update(session_id: str) -> None:
    """Tell every client watching the game that dice or scores changed."""
    socketio.emit('state_update', {'session_id': session_id}, to=_room(session_id), namespace='/ws')


def notify_game_complete(session_id: str, scorecard) -> None:
    socketio.emit(
        'game_complete',
        {'session_id': session_id, 'total': scorecard.total},
        to=_room(session_id),
        namespace='/ws',
    )


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_session(data):
    session_id = parse_session_id((data or {}).get('session_id'))
    if not session_id:
        emit('error', {'message': 'a valid session_id is required'})
        return
    room = _room(session_id)
    join_room(room)
    emit('joined', {'room': room})


def handle_leave_session(data):
    session_id = parse_session_id((data or {}).get('session_id'))
    if not session_id:
        emit('error', {'message': 'a valid session_id is required'})
        return
    room = _room(session_id)
    leave_room(room)
    emit('left', {'room': room})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for namespace in namespaces:
        socketio.on_event('connect', handle_connect, namespace=namespace)
        socketio.on_event('join_session', handle_join_session, namespace=namespace)
        socketio.on_event('leave_session', handle_leave_session, namespace=namespace)
        socketio.on_event('ping', handle_ping, namespace=namespace)
