import logging
import threading
import time
from typing import Any, List, Optional, Sequence

from .errors import ReservedRoomError
from .manager import DEFAULT_SYMBOLS, RoomManager
from .notifier import Notifier
from .registry import ConnectionRegistry
from .relay import RelayDispatcher
from .table import RoomTable


class RelayHub:
    """Owns the registry and room table for one application.

    Socket handlers may run on several threads or greenlets, so every
    entry point takes the same lock before touching the table. Events from
    a connection that is no longer registered are dropped.
    """

    def __init__(
        self,
        notifier: Notifier,
        symbols: Sequence[str] = DEFAULT_SYMBOLS,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.registry = ConnectionRegistry()
        self.table = RoomTable()
        self.rooms = RoomManager(self.table, notifier, symbols=symbols, logger=self.logger)
        self.relay = RelayDispatcher(self.table, notifier, logger=self.logger)
        self._lock = threading.RLock()

    def connect(self, connection: str) -> None:
        with self._lock:
            self.registry.register(connection)

    def join(self, connection: str, room_id: str) -> Optional[str]:
        with self._lock:
            if not self._live(connection, 'join-room'):
                return None
            # Socket.IO gives every session a private room named after its sid
            if self.registry.is_connected(room_id):
                raise ReservedRoomError(room_id)
            return self.rooms.join(connection, room_id)

    def leave(self, connection: str, room_id: str) -> bool:
        with self._lock:
            if not self._live(connection, 'leave-room'):
                return False
            return self.rooms.leave(connection, room_id)

    def move(self, connection: str, room_id: str, board: Any) -> List[str]:
        with self._lock:
            if not self._live(connection, 'move'):
                return []
            return self.relay.relay_move(connection, room_id, board)

    def game_over(self, connection: str, room_id: str, winner: Any) -> List[str]:
        with self._lock:
            if not self._live(connection, 'game-over'):
                return []
            return self.relay.relay_outcome(room_id, winner)

    def disconnect(self, connection: str) -> int:
        with self._lock:
            left = self.rooms.disconnect(connection)
            since = self.registry.connected_since(connection)
            if self.registry.unregister(connection):
                self.logger.debug(f"[session] sid={connection} lasted={time.time() - since:.1f}s rooms_left={left}")
            return left

    def stats(self) -> dict:
        with self._lock:
            rooms = self.table.snapshot()
            return {
                'connections': len(self.registry),
                'rooms': len(rooms),
                'players': sum(len(members) for members in rooms.values()),
            }

    def _live(self, connection: str, event: str) -> bool:
        if self.registry.is_connected(connection):
            return True
        self.logger.debug(f"[stale] event={event} sid={connection} not connected")
        return False
