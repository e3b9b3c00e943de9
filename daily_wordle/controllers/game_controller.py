"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..models.game import Key
from ..services.game_service import get_game_service
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger
from ..utils.helpers import normalize_guess, parse_game_date
from ..config.game_settings import WORD_LENGTH

game_bp = Blueprint('game', __name__)


def _log_outcome(game_id, state, result, guess):
    """Log a game event when the last request finished the game."""
    if result is None or not result.accepted or not state.game_over:
        return
    if state.won:
        game_logger.log_game_event(
            game_id, 'game_won', request.remote_addr,
            rounds_used=state.current_round, winning_guess=guess
        )
    else:
        game_logger.log_game_event(
            game_id, 'game_lost', request.remote_addr,
            rounds_used=state.current_round, target_word=state.answer,
            final_guess=guess
        )


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session playing the answer of the given (or current) day."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        data = request.get_json(silent=True) or {}

        try:
            day = parse_game_date(data.get('date'))
        except ValueError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 400

        # Log user action
        game_logger.log_user_action(request, 'new_game', extra_data={'date': data.get('date')})

        game_id = game_service.create_session(day)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=WORD_LENGTH, max_rounds=state.max_rounds
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')

        error_response = {
            'success': False,
            'error': str(e)
        }

        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_id, game_service=None):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_round=state.current_round, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_game
def press_key(game_id, game_service=None):
    """Apply one key press: a letter a-z, Enter, or Backspace."""
    try:
        data = request.get_json(silent=True) or {}
        key = Key.parse(data.get('key'))
        if key is None:
            error_response = {
                'success': False,
                'error': 'Key must be a letter a-z, Enter, or Backspace'
            }
            game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'key_press', game_id, key=key.label)

        guess = game_service.get_session(game_id).buffer
        result = game_service.press_key(game_id, key)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'state': asdict(state),
            'result': result.to_dict() if result else None
        }

        game_logger.log_server_response(
            request, 'key_press', True, response_data, game_id, key=key.label
        )
        _log_outcome(game_id, state, result, guess)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'key_press', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game
def make_guess(game_id, game_service=None):
    """Submit a whole word as a guess."""
    try:
        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = normalize_guess(data['guess'])
        if guess is None or len(guess) > WORD_LENGTH:
            error_response = {
                'success': False,
                'error': f'Guess must be at most {WORD_LENGTH} letters a-z'
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                attempted_guess=data['guess']
            )
            return jsonify(error_response), 400

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess)
        )

        result = game_service.submit_word(game_id, guess)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'state': asdict(state),
            'result': result.to_dict() if result else None
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, round=state.current_round, game_over=state.game_over
        )
        _log_outcome(game_id, state, result, guess)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game
def delete_game(game_id, game_service=None):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'answers': len(game_service.word_source.answers) if game_service else 0
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
