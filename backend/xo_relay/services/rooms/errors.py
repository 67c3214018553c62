class RelayError(Exception):
    """Base class for errors raised by the room services."""


class RoomFullError(RelayError):
    def __init__(self, room_id: str, capacity: int):
        super().__init__(f"room {room_id!r} already has {capacity} members")
        self.room_id = room_id
        self.capacity = capacity


class ReservedRoomError(RelayError):
    """The room id is the session id of a live connection."""

    def __init__(self, room_id: str):
        super().__init__(f"room {room_id!r} is a connection's own session room")
        self.room_id = room_id
