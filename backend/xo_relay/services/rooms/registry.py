import time
from typing import Dict, Optional


class ConnectionRegistry:
    """Live transport sessions keyed by their server-assigned id."""

    def __init__(self):
        self._connected_at: Dict[str, float] = {}

    def register(self, connection: str) -> None:
        self._connected_at.setdefault(connection, time.time())

    def unregister(self, connection: str) -> bool:
        return self._connected_at.pop(connection, None) is not None

    def is_connected(self, connection: str) -> bool:
        return connection in self._connected_at

    def connected_since(self, connection: str) -> Optional[float]:
        return self._connected_at.get(connection)

    def __contains__(self, connection) -> bool:
        return self.is_connected(connection)

    def __len__(self) -> int:
        return len(self._connected_at)
