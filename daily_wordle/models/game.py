"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple


class Hint(Enum):
    """Classification of one letter position relative to the answer."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def rank(self) -> int:
        return HINT_RANK[self]


HINT_RANK: Dict[Hint, int] = {
    Hint.ABSENT: 0,
    Hint.PRESENT: 1,
    Hint.CORRECT: 2,
}


class GameStatus(Enum):
    """Lifecycle of a session. WON and LOST are terminal."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class RejectionReason(Enum):
    """Why a submitted buffer was not accepted as a guess."""
    INCOMPLETE_GUESS = "incomplete_guess"
    UNKNOWN_WORD = "unknown_word"

    @property
    def message(self) -> str:
        return REJECTION_MESSAGES[self]


REJECTION_MESSAGES: Dict[RejectionReason, str] = {
    RejectionReason.INCOMPLETE_GUESS: "Not enough letters",
    RejectionReason.UNKNOWN_WORD: "Not in word list",
}


@dataclass(frozen=True)
class LetterResult:
    letter: str
    hint: Hint


@dataclass(frozen=True)
class EvaluatedGuess:
    """A submitted guess together with its per-position hints."""
    letters: Tuple[LetterResult, ...]

    @property
    def word(self) -> str:
        return ''.join(result.letter for result in self.letters)

    @property
    def hints(self) -> List[Hint]:
        return [result.hint for result in self.letters]

    @property
    def is_win(self) -> bool:
        return all(result.hint == Hint.CORRECT for result in self.letters)

    def __iter__(self) -> Iterator[Tuple[str, Hint]]:
        return iter((result.letter, result.hint) for result in self.letters)

    def __len__(self) -> int:
        return len(self.letters)


@dataclass(frozen=True)
class Tile:
    """One board cell: a letter (or ' ' when blank) and its hint once revealed."""
    char: str = ' '
    hint: Optional[Hint] = None

    @property
    def is_blank(self) -> bool:
        return self.char == ' '


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of submit(): either an evaluated guess or a rejection reason."""
    evaluated: Optional[EvaluatedGuess] = None
    rejection: Optional[RejectionReason] = None

    @property
    def accepted(self) -> bool:
        return self.evaluated is not None

    def to_dict(self) -> Dict:
        if self.accepted:
            return {
                'accepted': True,
                'word': self.evaluated.word,
                'hints': [hint.value for hint in self.evaluated.hints],
            }
        return {
            'accepted': False,
            'reason': self.rejection.value,
            'message': self.rejection.message,
        }


@dataclass(frozen=True)
class BufferAction:
    """An edit to the in-progress guess buffer."""
    kind: str
    letter: Optional[str] = None

    APPEND = "append"
    REMOVE_LAST = "remove_last"

    @classmethod
    def append(cls, letter: str) -> "BufferAction":
        return cls(cls.APPEND, letter)

    @classmethod
    def remove_last(cls) -> "BufferAction":
        return cls(cls.REMOVE_LAST)


@dataclass(frozen=True)
class Key:
    """A key press: a letter, Enter, or Backspace."""
    kind: str
    char: Optional[str] = None

    LETTER = "letter"
    ENTER = "Enter"
    BACKSPACE = "Backspace"

    @classmethod
    def letter(cls, char: str) -> "Key":
        return cls(cls.LETTER, char)

    @classmethod
    def enter(cls) -> "Key":
        return cls(cls.ENTER)

    @classmethod
    def backspace(cls) -> "Key":
        return cls(cls.BACKSPACE)

    @classmethod
    def parse(cls, text: str) -> Optional["Key"]:
        """Parse a key name as sent by a browser keyup event."""
        if not isinstance(text, str):
            return None
        if len(text) == 1 and 'a' <= text <= 'z':
            return cls.letter(text)
        if text == cls.ENTER:
            return cls.enter()
        if text == cls.BACKSPACE:
            return cls.backspace()
        return None

    @property
    def label(self) -> str:
        return self.char if self.kind == self.LETTER else self.kind


@dataclass
class GameState:
    """Client-facing game state snapshot."""
    game_id: str
    status: str
    current_round: int
    max_rounds: int
    game_over: bool
    won: bool
    guesses: List[str]
    rows: List[List[Dict[str, Optional[str]]]]
    letter_status: Dict[str, Optional[str]]
    keyboard: List[List[Dict[str, str]]]
    message: Optional[str] = None
    shake: bool = False
    answer: Optional[str] = None  # Only included once the game is lost
    date: Optional[str] = None
