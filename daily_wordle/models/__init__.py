"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    BufferAction, EvaluatedGuess, GameState, GameStatus, Hint, Key,
    LetterResult, RejectionReason, SubmitResult, Tile
)

__all__ = [
    'BufferAction', 'EvaluatedGuess', 'GameState', 'GameStatus', 'Hint', 'Key',
    'LetterResult', 'RejectionReason', 'SubmitResult', 'Tile'
]
