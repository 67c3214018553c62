import pytest

from xo_relay.services.rooms import RelayDispatcher, RoomTable


@pytest.fixture()
def table():
    room_table = RoomTable()
    room_table.add('x', 'room1')
    room_table.add('y', 'room1')
    return room_table


@pytest.fixture()
def relay(table, notifier):
    return RelayDispatcher(table, notifier)


def test_move_goes_to_everyone_but_the_sender(relay, notifier):
    board = ['X', None, None, None, None, None, None, None, None]

    assert relay.relay_move('x', 'room1', board) == ['y']
    assert notifier.received('y') == [('update-board', (board,))]
    assert notifier.received('x') == []


def test_outcome_reaches_every_member(relay, notifier):
    assert relay.relay_outcome('room1', 'O') == ['x', 'y']
    assert notifier.received('x') == [('game-over', ('O',))]
    assert notifier.received('y') == [('game-over', ('O',))]


def test_payload_is_forwarded_untouched(relay, notifier):
    payload = {'anything': [1, 2, {'nested': True}]}
    relay.relay_move('y', 'room1', payload)
    assert notifier.received('x')[0][1][0] is payload


def test_empty_room_is_a_no_op(relay, notifier):
    assert relay.relay_move('x', 'ghost', []) == []
    assert relay.relay_outcome('ghost', 'X') == []
    assert notifier.sent == []


def test_move_from_lone_member_delivers_nothing(notifier):
    table = RoomTable()
    table.add('x', 'solo')
    relay = RelayDispatcher(table, notifier)

    assert relay.relay_move('x', 'solo', []) == []
    assert notifier.sent == []
