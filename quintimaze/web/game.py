"""Socket.IO game handlers.

Events:
    - join_game: Attach to a session's room; payload { session }
    - leave_game: Detach from a session's room; payload { session }
    - key: Press a key in a session; payload { session, key }

Emits:
    - frame: { session, state, frame, victory } to the caller
    - victory: { session, notes } to the session room when the maze is solved
    - error: validation or unknown-session failures
"""

from flask_socketio import emit, join_room, leave_room

from quintimaze.logging_utils import get_logger
from quintimaze.web import registry, socketio

from .validation import JOIN_GAME, KEY_PRESS, LEAVE_GAME, error_payload, validate

log = get_logger("quintimaze.web")


def _session_or_error(session_id):
    session = registry.get(session_id)
    if session is None:
        emit('error', {'message': 'unknown session', 'field': 'session', 'code': 'not_found'})
    return session


def _emit_result(result):
    emit('frame', result)
    if result['victory'] is not None:
        emit('victory', {'session': result['session'], 'notes': result['victory']}, room=result['session'])


@socketio.on('join_game')
def handle_join_game(data):
    ok, result = validate(data or {}, JOIN_GAME)
    if not ok:
        emit('error', error_payload('join_game', result))
        return
    session = _session_or_error(result['session'])
    if session is None:
        return
    join_room(session.id)
    log.info(event="join_game", session=session.id)
    _emit_result(session.frame())


@socketio.on('leave_game')
def handle_leave_game(data):
    ok, result = validate(data or {}, LEAVE_GAME)
    if not ok:
        emit('error', error_payload('leave_game', result))
        return
    leave_room(result['session'])
    log.info(event="leave_game", session=result['session'])


@socketio.on('key')
def handle_key(data):
    ok, result = validate(data or {}, KEY_PRESS)
    if not ok:
        emit('error', error_payload('key', result))
        return
    session = _session_or_error(result['session'])
    if session is None:
        return
    _emit_result(session.press(result['key']))
