"""
WebSocket Event Handlers

Handles WebSocket events for real-time play: key presses in, game signals
and transient feedback out, one room per game.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..models.game import Key
from ..services.game_service import add_global_listener, get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger

_socketio = None


def game_room(game_id: str) -> str:
    return f"game_{game_id}"


def signal_payload(event: str, payload):
    """Convert an engine signal payload into JSON-ready event data."""
    if event == 'guess_rejected':
        return {'reason': payload.value, 'message': payload.message}
    if event in ('guess_accepted', 'game_won'):
        return {'word': payload.word, 'hints': [hint.value for hint in payload.hints]}
    if event == 'game_lost':
        return {'answer': payload}
    if event == 'message_update':
        return {'message': payload}
    if event == 'shake_update':
        return {'shake': payload}
    return {}


def broadcast_game_state_update(game_id: str, socketio):
    """Broadcast the current game state to everyone in the game room."""
    game_service = get_game_service()
    if not game_service:
        return
    state = game_service.get_game_state(game_id)
    if state is None:
        return
    socketio.emit('game_state_update', {
        'success': True,
        'state': asdict(state)
    }, room=game_room(game_id))


def forward_signal(game_id: str, event: str, payload) -> None:
    """Relay a game service signal to the game room of the active SocketIO."""
    if _socketio is None:
        return
    data = signal_payload(event, payload)
    data['game_id'] = game_id
    _socketio.emit(event, data, room=game_room(game_id))


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""
    global _socketio
    _socketio = socketio
    add_global_listener(forward_signal)

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None):
        """Join a game room for real-time updates."""
        game_id = data['game_id']
        join_room(game_room(game_id))

        game_logger.log_user_action(request, 'join_game', game_id)

        emit('game_state_update', {
            'success': True,
            'state': asdict(game_service.get_game_state(game_id))
        })

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a game room."""
        game_id = data.get('game_id') if isinstance(data, dict) else None
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return
        leave_room(game_room(game_id))
        game_logger.log_user_action(request, 'leave_game', game_id)

    @socketio.on('key_press')
    @websocket_game_required
    def handle_key_press(data, game_service=None):
        """Apply a key press and broadcast the new state to the room."""
        game_id = data['game_id']
        try:
            key = Key.parse(data.get('key'))
            if key is None:
                emit('error', {'error': 'Key must be a letter a-z, Enter, or Backspace'})
                return

            game_logger.log_user_action(request, 'key_press', game_id, key=key.label)

            guess = game_service.get_session(game_id).buffer
            result = game_service.press_key(game_id, key)

            if result is not None and result.accepted:
                state = game_service.get_game_state(game_id)
                if state.game_over:
                    event = 'game_won' if state.won else 'game_lost'
                    game_logger.log_game_event(
                        game_id, event, request.remote_addr,
                        rounds_used=state.current_round, final_guess=guess,
                        target_word=state.answer
                    )

            broadcast_game_state_update(game_id, socketio)

        except Exception as e:
            game_logger.log_error(request, e, 'key_press', game_id)
            emit('error', {'error': str(e)})
