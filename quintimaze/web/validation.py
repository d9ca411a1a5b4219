"""Payload validation for the web host.

Socket.IO events and JSON request bodies are checked against small dict
schemas before they reach a game session. Nothing here raises on bad input:
``validate`` returns ``(ok, value_or_error)`` and the caller decides whether
to emit an ``error`` event or answer with a 400.

Schema mini-language::

    {'field_name': ('type', required, {extras})}

Types: 'str' (stripped, never empty) and 'int' (JSON booleans rejected).
Extras: str -> min_len, max_len, lower; int -> min, max.

Invalid: (False, {'field': 'key', 'error': 'too long', 'code': 'max_len'})
Valid:   (True, normalized_data)
"""
from __future__ import annotations
from typing import Any, Dict, Tuple

PRIMITIVES = {
    'str': str,
    'int': int,
}


def _fail(field: str, message: str, code: str) -> Tuple[bool, Dict[str, Any]]:
    return False, {'field': field, 'error': message, 'code': code}


def _check_str(name: str, value: str, extras: dict):
    s = value.strip()
    if not s:
        return _fail(name, 'must not be empty', 'empty')
    if 'max_len' in extras and len(s) > extras['max_len']:
        return _fail(name, 'too long', 'max_len')
    if 'min_len' in extras and len(s) < extras['min_len']:
        return _fail(name, 'too short', 'min_len')
    return True, s.lower() if extras.get('lower') else s


def _check_int(name: str, value: int, extras: dict):
    if 'min' in extras and value < extras['min']:
        return _fail(name, f"must be >= {extras['min']}", 'min')
    if 'max' in extras and value > extras['max']:
        return _fail(name, f"must be <= {extras['max']}", 'max')
    return True, value


def validate(payload: Any, schema: Dict[str, tuple]) -> Tuple[bool, Dict[str, Any]]:
    if not isinstance(payload, dict):
        return _fail('__root__', 'payload must be an object', 'type')
    out = {}
    for name, spec in schema.items():
        type_name, required = spec[0], spec[1]
        extras = spec[2] if len(spec) > 2 else {}
        if type_name not in PRIMITIVES:
            return _fail('__schema__', f'unsupported type {type_name}', 'schema')
        if name not in payload or payload[name] is None:
            if required:
                return _fail(name, 'missing required field', 'required')
            continue
        value = payload[name]
        # bool is an int subclass; a JSON true is never a seed or coordinate
        if not isinstance(value, PRIMITIVES[type_name]) or (type_name == 'int' and isinstance(value, bool)):
            return _fail(name, f'expected {type_name}', 'type')
        if type_name == 'str':
            ok, checked = _check_str(name, value, extras)
        else:
            ok, checked = _check_int(name, value, extras)
        if not ok:
            return False, checked
        out[name] = checked
    return True, out


def error_payload(event: str, result: Dict[str, Any]) -> Dict[str, Any]:
    """Shape a validation failure as the body of an ``error`` event / 400 response."""
    return {
        'message': f"Invalid {event}: {result['error']}",
        'field': result['field'],
        'code': result['code'],
    }


SEED_MAX = (1 << 64) - 1

NEW_GAME = {
    'seed': ('int', False, {'min': 0, 'max': SEED_MAX}),
}
KEY = {
    'key': ('str', True, {'min_len': 1, 'max_len': 32, 'lower': True}),
}
JOIN_GAME = {
    'session': ('str', True, {'min_len': 1, 'max_len': 64}),
}
LEAVE_GAME = JOIN_GAME
KEY_PRESS = {
    'session': ('str', True, {'min_len': 1, 'max_len': 64}),
    'key': ('str', True, {'min_len': 1, 'max_len': 32, 'lower': True}),
}
