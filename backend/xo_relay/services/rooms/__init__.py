"""Room services: membership, role assignment and relaying.

This package holds the transport-free core. Socket handlers translate
inbound events into calls on these objects, and everything sent back to
clients goes through an injected notifier, so the whole package can be
exercised without a live Socket.IO server.
"""
from .errors import RelayError, ReservedRoomError, RoomFullError
from .hub import RelayHub
from .manager import RoomManager
from .notifier import Notifier, SocketIONotifier
from .registry import ConnectionRegistry
from .relay import RelayDispatcher
from .table import RoomTable

__all__ = [
    'RelayError',
    'ReservedRoomError',
    'RoomFullError',
    'RelayHub',
    'RoomManager',
    'Notifier',
    'SocketIONotifier',
    'ConnectionRegistry',
    'RelayDispatcher',
    'RoomTable',
]
