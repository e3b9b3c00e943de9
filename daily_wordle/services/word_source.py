"""
Word Source

Supplies the answer list, the valid-guess dictionary, and the daily answer.
"""

from datetime import date, datetime
from typing import Iterable, Optional, Union

from ..config.app_config import Config
from ..config.game_settings import ANSWER_LIST, ALLOWED_GUESSES, validate_word_list_integrity


class WordSource:
    """
    Read-only word lists shared by every game session.

    The answer for a calendar day is found by counting days since a fixed
    epoch and indexing the answer list modulo its length, so every player
    gets the same word on the same day without any stored state.
    """

    def __init__(self, answers: Iterable[str], allowed_guesses: Iterable[str] = (),
                 epoch: Union[date, str] = date(2021, 6, 19)):
        answers = list(answers)
        allowed_guesses = list(allowed_guesses)
        validate_word_list_integrity(answers, allowed_guesses)

        self.answers = tuple(answers)
        self.valid_guesses = frozenset(answers) | frozenset(allowed_guesses)
        self.epoch = date.fromisoformat(epoch) if isinstance(epoch, str) else epoch

    @classmethod
    def from_settings(cls, epoch: Optional[str] = None) -> "WordSource":
        """Build the source from the bundled word lists and configured epoch."""
        return cls(ANSWER_LIST, ALLOWED_GUESSES, epoch or Config.WORD_EPOCH)

    def is_valid_guess(self, word: str) -> bool:
        return word in self.valid_guesses

    def day_index(self, day: Union[date, datetime]) -> int:
        """Days elapsed from the epoch to ``day``; negative before the epoch."""
        if isinstance(day, datetime):
            day = day.date()
        return (day - self.epoch).days

    def answer_for(self, day: Union[date, datetime]) -> str:
        """
        Returns the answer of the given calendar day.

        Python's modulo is non-negative for a positive divisor, so days before
        the epoch still map into the list.
        """
        return self.answers[self.day_index(day) % len(self.answers)]


# Global word source instance
_word_source = None


def get_word_source() -> Optional[WordSource]:
    """Get the global word source instance."""
    return _word_source


def initialize_word_source(epoch: Optional[str] = None) -> WordSource:
    """Initialize the global word source from the bundled word lists."""
    global _word_source
    _word_source = WordSource.from_settings(epoch)
    return _word_source
