"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game, websocket_game_required
from .helpers import get_user_identity, normalize_guess, parse_game_date
from .game_logger import game_logger
from .transient import TransientSlot, UiFeedback

__all__ = [
    'require_game', 'websocket_game_required', 'get_user_identity', 'normalize_guess',
    'parse_game_date', 'game_logger', 'TransientSlot', 'UiFeedback'
]
