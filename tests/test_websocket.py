from datetime import date

import pytest

from daily_wordle import create_app
from daily_wordle.config import TestingConfig
from daily_wordle.services.game_service import initialize_game_service
from daily_wordle.websocket.handlers import forward_signal

DAY = date(2024, 5, 1)


@pytest.fixture
def game_id(game_service):
    return game_service.create_session(DAY)


@pytest.fixture
def answer(bundled_source):
    return bundled_source.answer_for(DAY)


def events_named(received, name):
    return [message['args'][0] for message in received if message['name'] == name]


def press(socket_client, game_id, keys):
    for key in keys:
        socket_client.emit('key_press', {'game_id': game_id, 'key': key})


def test_join_game_sends_state(socket_client, game_id):
    socket_client.emit('join_game', {'game_id': game_id})
    states = events_named(socket_client.get_received(), 'game_state_update')
    assert states[-1]['state']['game_id'] == game_id


@pytest.mark.parametrize("payload", [{}, {'game_id': 'missing'}, None, {'game_id': ['x']}, {'game_id': 7}])
def test_join_requires_a_known_game(socket_client, payload):
    socket_client.emit('join_game', payload)
    errors = events_named(socket_client.get_received(), 'error')
    assert errors


def test_key_presses_broadcast_state(socket_client, game_id):
    socket_client.emit('join_game', {'game_id': game_id})
    socket_client.get_received()

    press(socket_client, game_id, ['c', 'r'])

    states = events_named(socket_client.get_received(), 'game_state_update')
    assert len(states) == 2
    assert [tile['char'] for tile in states[-1]['state']['rows'][0]][:2] == ['c', 'r']


def test_rejection_signals_reach_the_room(socket_client, game_id):
    socket_client.emit('join_game', {'game_id': game_id})
    socket_client.get_received()

    press(socket_client, game_id, ['z', 'z', 'z', 'z', 'z', 'Enter'])
    received = socket_client.get_received()

    assert events_named(received, 'guess_rejected') == [{
        'game_id': game_id, 'reason': 'unknown_word', 'message': 'Not in word list'
    }]
    assert {'game_id': game_id, 'shake': True} in events_named(received, 'shake_update')
    assert {'game_id': game_id, 'message': 'Not in word list'} in events_named(received, 'message_update')


def test_transient_feedback_clears_when_timer_fires(socket_client, game_id, timers):
    socket_client.emit('join_game', {'game_id': game_id})
    press(socket_client, game_id, ['a', 'Enter'])
    socket_client.get_received()

    for timer in timers:
        timer.fire()

    received = socket_client.get_received()
    assert {'game_id': game_id, 'message': None} in events_named(received, 'message_update')
    assert {'game_id': game_id, 'shake': False} in events_named(received, 'shake_update')


def test_winning_over_the_socket(socket_client, game_id, answer):
    socket_client.emit('join_game', {'game_id': game_id})
    socket_client.get_received()

    press(socket_client, game_id, list(answer) + ['Enter'])
    received = socket_client.get_received()

    accepted = events_named(received, 'guess_accepted')
    assert accepted == [{'game_id': game_id, 'word': answer, 'hints': ['correct'] * 5}]
    assert events_named(received, 'game_won')
    assert events_named(received, 'game_state_update')[-1]['state']['status'] == 'won'


def test_invalid_key_is_an_error(socket_client, game_id):
    socket_client.emit('join_game', {'game_id': game_id})
    socket_client.get_received()
    socket_client.emit('key_press', {'game_id': game_id, 'key': 'Shift'})
    assert events_named(socket_client.get_received(), 'error')


def test_leave_game_stops_broadcasts(socket_client, game_id):
    socket_client.emit('join_game', {'game_id': game_id})
    socket_client.emit('leave_game', {'game_id': game_id})
    socket_client.get_received()

    press(socket_client, game_id, ['c'])

    assert events_named(socket_client.get_received(), 'game_state_update') == []


def reject_once(client, game_id):
    client.emit('join_game', {'game_id': game_id})
    client.get_received()
    press(client, game_id, ['z', 'z', 'z', 'z', 'z', 'Enter'])
    return events_named(client.get_received(), 'guess_rejected')


def test_service_initialized_after_the_app_still_forwards(socket_client, bundled_source, timer_factory):
    service = initialize_game_service(bundled_source, timer_factory=timer_factory)
    game_id = service.create_session(DAY)

    assert forward_signal in service._listeners
    assert len(reject_once(socket_client, game_id)) == 1


def test_creating_the_app_twice_forwards_once(app, game_service):
    second_app, second_socketio = create_app(TestingConfig)
    client = second_socketio.test_client(second_app)
    game_id = game_service.create_session(DAY)

    assert game_service._listeners.count(forward_signal) == 1
    assert len(reject_once(client, game_id)) == 1
    client.disconnect()
