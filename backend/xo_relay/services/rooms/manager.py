import logging
from typing import Dict, Optional, Sequence, Tuple

from .errors import RelayError, RoomFullError
from .notifier import Notifier
from .table import RoomTable

ROOM_CAPACITY = 2
DEFAULT_SYMBOLS = ('X', 'O')

START_GAME = 'start-game'
PLAYER_LEFT = 'player-left'


class RoomManager:
    """Join, leave and disconnect handling for a RoomTable.

    Roles are fixed by join position at arrival time: whoever makes the
    room one member strong is sent ``symbols[0]``, whoever makes it two is
    sent ``symbols[1]``. A member keeps that role until it leaves, even if
    its partner leaves first. Only the connection that just joined is told
    its role.
    """

    def __init__(
        self,
        table: RoomTable,
        notifier: Notifier,
        symbols: Sequence[str] = DEFAULT_SYMBOLS,
        capacity: int = ROOM_CAPACITY,
        logger: Optional[logging.Logger] = None,
    ):
        if len(symbols) < capacity:
            raise ValueError(f"need {capacity} player symbols, got {len(symbols)}")
        self.table = table
        self.notifier = notifier
        self.symbols = tuple(symbols)
        self.capacity = capacity
        self.logger = logger or logging.getLogger(__name__)
        # Role each member was told at join time, kept until it leaves
        self._roles: Dict[Tuple[str, str], str] = {}

    def join(self, connection: str, room_id: str) -> Optional[str]:
        """Add ``connection`` to ``room_id`` and return the role it was sent.

        Returns None when it was already a member. Raises RoomFullError
        when the room is at capacity, and RelayError when the transport
        refuses the subscription; the table is untouched in both cases.
        """
        if self.table.is_member(connection, room_id):
            self.logger.debug(f"[join-skip] room={room_id} sid={connection} already a member")
            return None
        if len(self.table.members(room_id)) >= self.capacity:
            raise RoomFullError(room_id, self.capacity)

        try:
            self.notifier.subscribe(connection, room_id)
        except Exception as exc:
            raise RelayError(f"could not subscribe {connection} to room {room_id!r}: {exc}") from exc
        count = self.table.add(connection, room_id)
        role = self.symbols[count - 1]
        self._roles[(room_id, connection)] = role
        self.notifier.send_to_one(connection, START_GAME, role)
        self.logger.info(f"[join] room={room_id} sid={connection} role={role} members={count}")
        return role

    def leave(self, connection: str, room_id: str) -> bool:
        """Remove ``connection`` from ``room_id``; False if it was not there."""
        remaining = self.table.remove(connection, room_id)
        if remaining < 0:
            self.logger.debug(f"[leave-skip] room={room_id} sid={connection} not a member")
            return False
        self.notifier.unsubscribe(connection, room_id)
        role = self.role_of(connection, room_id)
        self._roles.pop((room_id, connection), None)
        if remaining == 0:
            self.logger.info(f"[room-closed] room={room_id} sid={connection} role={role}")
        else:
            self.notifier.send_to_set(self.table.members(room_id), PLAYER_LEFT)
            self.logger.info(f"[leave] room={room_id} sid={connection} role={role} remaining={remaining}")
        return True

    def disconnect(self, connection: str) -> int:
        """Leave every room ``connection`` is in; returns how many it left."""
        left = 0
        for room_id in self.table.rooms_of(connection):
            if self.leave(connection, room_id):
                left += 1
        return left

    def role_of(self, connection: str, room_id: str) -> Optional[str]:
        return self._roles.get((room_id, connection))
