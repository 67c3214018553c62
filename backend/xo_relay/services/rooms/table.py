from typing import Dict, List, Set, Tuple


class RoomTable:
    """Room id -> ordered member ids, with a reverse index per connection.

    The two mappings are only ever changed together through ``add`` and
    ``remove``. Neither keeps an entry whose collection is empty.
    """

    def __init__(self):
        self._members: Dict[str, List[str]] = {}
        self._memberships: Dict[str, Set[str]] = {}

    def members(self, room_id: str) -> Tuple[str, ...]:
        return tuple(self._members.get(room_id, ()))

    def rooms_of(self, connection: str) -> Tuple[str, ...]:
        return tuple(sorted(self._memberships.get(connection, ())))

    def is_member(self, connection: str, room_id: str) -> bool:
        return room_id in self._memberships.get(connection, ())

    def add(self, connection: str, room_id: str) -> int:
        """Append ``connection`` to the room and return the new member count."""
        members = self._members.setdefault(room_id, [])
        members.append(connection)
        self._memberships.setdefault(connection, set()).add(room_id)
        return len(members)

    def remove(self, connection: str, room_id: str) -> int:
        """Drop ``connection`` from the room and return the remaining count.

        Returns -1 when it was not a member.
        """
        if not self.is_member(connection, room_id):
            return -1
        members = self._members[room_id]
        members.remove(connection)
        rooms = self._memberships[connection]
        rooms.discard(room_id)
        if not rooms:
            del self._memberships[connection]
        if not members:
            del self._members[room_id]
            return 0
        return len(members)

    def snapshot(self) -> Dict[str, List[str]]:
        return {room_id: list(members) for room_id, members in self._members.items()}

    def __contains__(self, room_id) -> bool:
        return room_id in self._members

    def __len__(self) -> int:
        return len(self._members)
