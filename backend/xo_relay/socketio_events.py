from flask import current_app, request

from xo_relay import socketio
from xo_relay.services.rooms import RelayError, RelayHub, RoomFullError


def _hub() -> RelayHub:
    return current_app.extensions['xo_relay']

def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore

def _room_id(value):
    if isinstance(value, str) and value.strip():
        return value
    return None

def _room_id_from(data):
    if not isinstance(data, dict):
        return None
    return _room_id(data.get('roomId'))


def handle_connect(auth=None):
    sid = _get_sid()
    _hub().connect(sid)
    current_app.logger.info(f"[connect] sid={sid}")


def handle_disconnect(reason=None):
    sid = _get_sid()
    left = _hub().disconnect(sid)
    current_app.logger.info(f"[disconnect] sid={sid} rooms_left={left} reason={reason}")


def handle_join_room(room_id=None):
    room_id = _room_id(room_id)
    if room_id is None:
        current_app.logger.debug(f"[join-room] sid={_get_sid()} ignored: bad room id")
        return
    try:
        _hub().join(_get_sid(), room_id)
    except RoomFullError as exc:
        current_app.logger.warning(f"[room-full] sid={_get_sid()} {exc}")
    except RelayError as exc:
        current_app.logger.warning(f"[join-rejected] sid={_get_sid()} {exc}")


def handle_leave_room(room_id=None):
    room_id = _room_id(room_id)
    if room_id is None:
        current_app.logger.debug(f"[leave-room] sid={_get_sid()} ignored: bad room id")
        return
    _hub().leave(_get_sid(), room_id)


def handle_move(data=None):
    room_id = _room_id_from(data)
    if room_id is None:
        current_app.logger.debug(f"[move] sid={_get_sid()} ignored: bad payload")
        return
    _hub().move(_get_sid(), room_id, data.get('board'))


def handle_game_over(data=None):
    room_id = _room_id_from(data)
    if room_id is None:
        current_app.logger.debug(f"[game-over] sid={_get_sid()} ignored: bad payload")
        return
    _hub().game_over(_get_sid(), room_id, data.get('winner'))


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('join-room', handle_join_room, namespace=namespace)
    socketio.on_event('leave-room', handle_leave_room, namespace=namespace)
    socketio.on_event('move', handle_move, namespace=namespace)
    socketio.on_event('game-over', handle_game_over, namespace=namespace)
