import logging
from typing import Any, List, Optional

from .notifier import Notifier
from .table import RoomTable

UPDATE_BOARD = 'update-board'
GAME_OVER = 'game-over'


class RelayDispatcher:
    """Forwards opaque game payloads between members of a room."""

    def __init__(self, table: RoomTable, notifier: Notifier, logger: Optional[logging.Logger] = None):
        self.table = table
        self.notifier = notifier
        self.logger = logger or logging.getLogger(__name__)

    def relay_move(self, sender: str, room_id: str, payload: Any) -> List[str]:
        # The mover already applied the board locally; no echo.
        targets = [member for member in self.table.members(room_id) if member != sender]
        if targets:
            self.notifier.send_to_set(targets, UPDATE_BOARD, payload)
        self.logger.debug(f"[move] room={room_id} sid={sender} delivered={len(targets)}")
        return targets

    def relay_outcome(self, room_id: str, payload: Any) -> List[str]:
        # Everyone hears the result, including whoever reported it.
        targets = list(self.table.members(room_id))
        if targets:
            self.notifier.send_to_set(targets, GAME_OVER, payload)
        self.logger.debug(f"[game-over] room={room_id} winner={payload!r} delivered={len(targets)}")
        return targets
