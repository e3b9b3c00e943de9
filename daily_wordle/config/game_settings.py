"""
Game Configuration Constants Module

This module defines the game rules and loads the two word lists the game
plays with: the curated answer list, whose order is the daily sequence, and
the extra words accepted as guesses but never chosen as answers.
"""

import json
import os
from typing import List, Final

# Core Game Configuration Constants
MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = 5
"""Number of letters in every guess and every answer."""

DATA_DIR: Final[str] = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'data'
)


def _load_word_list(file_name: str) -> List[str]:
    """
    Load a word list from a JSON array file in the data directory.

    Args:
        file_name: Name of the JSON file inside DATA_DIR

    Returns:
        List[str]: List of lowercase 5-letter words, in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, empty, or contains invalid words
    """
    json_file_path = os.path.join(DATA_DIR, file_name)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_name}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError(f"{file_name} must contain an array of words")

    if not word_list:
        raise ValueError(f"Word list {file_name} cannot be empty")

    words = [word.strip().lower() for word in word_list]

    for word in words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return words


# Curated answer list; index order is the daily sequence
ANSWER_LIST: Final[List[str]] = _load_word_list('answers.json')

# Words accepted as guesses in addition to the answers
ALLOWED_GUESSES: Final[List[str]] = _load_word_list('allowed_guesses.json')


def validate_word_list_integrity(answers: List[str] = None, allowed: List[str] = None) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only lowercase ASCII letters allowed
    3. Uniqueness validation: No duplicate answers

    Args:
        answers: Answer list to check, defaults to ANSWER_LIST
        allowed: Extra allowed guesses to check, defaults to ALLOWED_GUESSES

    Returns:
        bool: True if the word lists pass all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    answers = ANSWER_LIST if answers is None else answers
    allowed = ALLOWED_GUESSES if allowed is None else allowed

    if not answers:
        raise ValueError("Answer list cannot be empty")

    for label, words in (('answer', answers), ('allowed guess', allowed)):
        for index, word in enumerate(words):
            if len(word) != WORD_LENGTH:
                raise ValueError(f"{label} at index {index} '{word}' is not {WORD_LENGTH} characters long")

            if not (word.isascii() and word.isalpha() and word.islower()):
                raise ValueError(f"{label} at index {index} '{word}' must be lowercase letters a-z")

    if len(answers) != len(set(answers)):
        seen = set()
        duplicates = sorted({word for word in answers if word in seen or seen.add(word)})
        raise ValueError(f"Duplicate words found in answer list: {duplicates}")

    return True


if __name__ == "__main__":
    try:
        validate_word_list_integrity()
        print(f" Word list validation passed: {len(ANSWER_LIST)} answers, "
              f"{len(ALLOWED_GUESSES)} extra guesses")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
