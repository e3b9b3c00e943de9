"""
Services Package

Contains all business logic and service classes.
"""

from .word_source import WordSource, get_word_source, initialize_word_source
from .game_service import (
    GameService, GameSession, evaluate_guess, merge_hint,
    add_global_listener, get_game_service, initialize_game_service
)

__all__ = [
    'WordSource', 'get_word_source', 'initialize_word_source',
    'GameService', 'GameSession', 'evaluate_guess', 'merge_hint',
    'add_global_listener', 'get_game_service', 'initialize_game_service'
]
