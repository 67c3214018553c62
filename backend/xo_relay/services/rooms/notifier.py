from typing import Iterable


class Notifier:
    """What the room services need from a transport.

    Sends are fire-and-forget; implementations must not wait for the
    client to acknowledge anything.
    """

    def send_to_one(self, connection: str, event: str, *args) -> None:
        raise NotImplementedError

    def send_to_set(self, connections: Iterable[str], event: str, *args) -> None:
        for connection in connections:
            self.send_to_one(connection, event, *args)

    def subscribe(self, connection: str, room_id: str) -> None:
        raise NotImplementedError

    def unsubscribe(self, connection: str, room_id: str) -> None:
        raise NotImplementedError


class SocketIONotifier(Notifier):
    """Notifier backed by a Flask-SocketIO server, bound to one namespace."""

    def __init__(self, socketio, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def send_to_one(self, connection, event, *args):
        self.socketio.emit(event, *args, to=connection, namespace=self.namespace)

    def subscribe(self, connection, room_id):
        self.socketio.server.enter_room(connection, room_id, namespace=self.namespace)

    def unsubscribe(self, connection, room_id):
        self.socketio.server.leave_room(connection, room_id, namespace=self.namespace)
