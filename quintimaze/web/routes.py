"""REST API for maze sessions.

Endpoints:
    POST   /api/games                 create a session; body { seed? }
    GET    /api/games/<id>            snapshot plus the pending frame
    POST   /api/games/<id>/keys       press a key; body { key }
    DELETE /api/games/<id>            drop a session
    GET    /api/solve?seed=&x=&y=&z=  exit path for a seed (debug aid)
    GET    /api/health                liveness and session count

Every game response has the shape { session, state, frame, victory }, where
``frame`` is the list of draw instructions produced since the last response.
"""
from dataclasses import replace

from flask import Blueprint, jsonify, request

from quintimaze import __version__
from quintimaze.maze import DEFAULT_SEED, ContractViolation, Coord, MazeConfig, MazeConfigError, solve_report
from quintimaze.web import registry

from .validation import KEY, NEW_GAME, SEED_MAX, error_payload, validate

bp_api = Blueprint('api', __name__, url_prefix='/api')


def _unknown(session_id):
    return jsonify(error='unknown session', session=session_id), 404


def _int_arg(name, default):
    raw = request.args.get(name, '').strip()
    return int(raw) if raw else default


@bp_api.route('/games', methods=['POST'])
def create_game():
    ok, result = validate(request.get_json(silent=True) or {}, NEW_GAME)
    if not ok:
        return jsonify(error_payload('new game', result)), 400
    config = MazeConfig.from_env()
    if 'seed' in result:
        config = replace(config, seed=result['seed'])
    session = registry.create(config)
    return jsonify(session.frame()), 201


@bp_api.route('/games/<session_id>', methods=['GET'])
def get_game(session_id):
    session = registry.get(session_id)
    if session is None:
        return _unknown(session_id)
    return jsonify(session.frame())


@bp_api.route('/games/<session_id>/keys', methods=['POST'])
def press_key(session_id):
    session = registry.get(session_id)
    if session is None:
        return _unknown(session_id)
    ok, result = validate(request.get_json(silent=True), KEY)
    if not ok:
        return jsonify(error_payload('key', result)), 400
    return jsonify(session.press(result['key']))


@bp_api.route('/games/<session_id>', methods=['DELETE'])
def delete_game(session_id):
    if not registry.remove(session_id):
        return _unknown(session_id)
    return '', 204


@bp_api.route('/solve', methods=['GET'])
def solve():
    """Solve the maze a seed produces, from (x, y, z) (default origin).

    Query params are integers; the maze size and forced exit follow the
    server's QUINTI_MAZE_* settings.
    """
    try:
        seed = _int_arg('seed', DEFAULT_SEED)
        start = Coord(*(_int_arg(axis, 0) for axis in ('x', 'y', 'z')))
    except ValueError:
        return jsonify(error='seed and coordinates must be integers'), 400
    if not 0 <= seed <= SEED_MAX:
        return jsonify(error='seed out of range', field='seed'), 400
    try:
        report = solve_report(seed, start, MazeConfig.from_env())
    except MazeConfigError as exc:
        return jsonify(error=str(exc)), 500
    except ContractViolation as exc:
        return jsonify(error=str(exc), field='start'), 400
    return jsonify(report)


@bp_api.route('/health', methods=['GET'])
def health():
    return jsonify(status='ok', sessions=len(registry), version=__version__)
