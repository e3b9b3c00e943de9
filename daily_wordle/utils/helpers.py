"""
Helper Functions

Contains utility functions used throughout the application.
"""

from datetime import date
from typing import Dict, Optional


def get_user_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract user identity information from an HTTP or WebSocket request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None),  # Set for WebSocket requests
    }


def parse_game_date(value: Optional[str]) -> Optional[date]:
    """
    Parse an optional ISO date (YYYY-MM-DD) sent by a client.

    Raises:
        ValueError: If the value is present but not a valid ISO date
    """
    if value is None or value == '':
        return None
    if not isinstance(value, str):
        raise ValueError("Date must be a string in YYYY-MM-DD format")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD")


def normalize_guess(guess) -> Optional[str]:
    """Trim and lowercase a typed guess; None unless it is letters a-z only."""
    if not isinstance(guess, str):
        return None
    word = guess.strip().lower()
    if not word or not (word.isascii() and word.isalpha()):
        return None
    return word
