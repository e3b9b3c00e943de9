"""
Game Service

Contains the core game logic: guess evaluation, the per-session state
machine, and the in-memory registry of active sessions.
"""

import threading
import uuid
from collections import Counter
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH
from ..models.game import (
    BufferAction, EvaluatedGuess, GameState, GameStatus, Hint, Key,
    LetterResult, RejectionReason, SubmitResult, Tile
)
from ..utils.presentation import keyboard_rows, serialize_rows
from ..utils.transient import UiFeedback
from .word_source import WordSource

ALPHABET = "abcdefghijklmnopqrstuvwxyz"

SessionListener = Callable[[str, Any], None]
ServiceListener = Callable[[str, str, Any], None]


def evaluate_guess(guess: str, answer: str) -> EvaluatedGuess:
    """
    Implements the two-pass Wordle evaluation algorithm.

    Exact matches are credited first; the remaining letters then draw from a
    per-letter tally of the answer so a letter is never credited more times
    than it occurs in the answer.
    """
    remaining = Counter(answer)
    hints: List[Optional[Hint]] = [None] * len(guess)

    # First pass: exact position matches
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            hints[i] = Hint.CORRECT
            remaining[g] -= 1

    # Second pass: present letters and misses
    for i, g in enumerate(guess):
        if hints[i] is not None:
            continue
        if remaining[g] > 0:
            hints[i] = Hint.PRESENT
            remaining[g] -= 1
        else:
            hints[i] = Hint.ABSENT

    return EvaluatedGuess(tuple(LetterResult(g, h) for g, h in zip(guess, hints)))


def merge_hint(current: Optional[Hint], observed: Hint) -> Hint:
    """Letter knowledge only ever moves up: ABSENT < PRESENT < CORRECT."""
    if current is None or observed.rank > current.rank:
        return observed
    return current


class GameSession:
    """
    One player's game against a fixed answer.

    Guesses are typed into a buffer and submitted; submitted guesses are
    evaluated, recorded, and folded into per-letter knowledge. The session
    ends permanently on the first win or after the last allowed guess.
    """

    def __init__(self, answer: str, word_source: WordSource,
                 game_id: Optional[str] = None, max_rounds: int = MAX_ROUNDS,
                 day: Optional[date] = None):
        self.game_id = game_id or str(uuid.uuid4())
        self.day = day
        self.max_rounds = max_rounds
        self._answer = answer
        self._word_source = word_source
        self._status = GameStatus.IN_PROGRESS
        self._guesses: List[EvaluatedGuess] = []
        self._buffer: List[str] = []
        self._knowledge: Dict[str, Optional[Hint]] = {letter: None for letter in ALPHABET}
        self._listeners: List[SessionListener] = []

    @classmethod
    def new_session(cls, today: date, word_source: WordSource, **kwargs) -> "GameSession":
        return cls(word_source.answer_for(today), word_source, day=today, **kwargs)

    # Read-only views

    @property
    def answer(self) -> str:
        return self._answer

    @property
    def guesses(self) -> List[EvaluatedGuess]:
        return list(self._guesses)

    @property
    def buffer(self) -> str:
        return ''.join(self._buffer)

    @property
    def is_over(self) -> bool:
        return self._status != GameStatus.IN_PROGRESS

    def status(self) -> GameStatus:
        return self._status

    def revealed_answer(self) -> Optional[str]:
        """The answer, exposed only once the game is lost."""
        if self._status == GameStatus.LOST:
            return self._answer
        return None

    def letter_knowledge(self) -> Dict[str, Optional[Hint]]:
        """A copy of the per-letter knowledge for keyboard coloring."""
        return dict(self._knowledge)

    def current_rows(self) -> List[List[Tile]]:
        """Six rows of five tiles: submitted guesses, the live buffer, then blanks."""
        rows = [[Tile(letter, hint) for letter, hint in guess] for guess in self._guesses]
        if len(rows) < self.max_rounds:
            live = [Tile(letter) for letter in self._buffer]
            rows.append(live + [Tile()] * (WORD_LENGTH - len(live)))
        while len(rows) < self.max_rounds:
            rows.append([Tile()] * WORD_LENGTH)
        return rows

    # Signals

    def subscribe(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: str, payload: Any = None) -> None:
        for listener in list(self._listeners):
            listener(event, payload)

    # Operations

    def edit_buffer(self, action: BufferAction) -> bool:
        """
        Applies a buffer edit. Returns False when the edit is a no-op: the
        game is over, the buffer is full on append, or empty on removal.
        """
        if self.is_over:
            return False

        if action.kind == BufferAction.APPEND:
            if len(self._buffer) >= WORD_LENGTH:
                return False
            self._buffer.append(action.letter)
            return True

        if action.kind == BufferAction.REMOVE_LAST:
            if not self._buffer:
                return False
            self._buffer.pop()
            return True

        raise ValueError(f"Unknown buffer action: {action.kind}")

    def append_letter(self, letter: str) -> bool:
        return self.edit_buffer(BufferAction.append(letter))

    def remove_last(self) -> bool:
        return self.edit_buffer(BufferAction.remove_last())

    def submit(self) -> Optional[SubmitResult]:
        """
        Evaluates the buffer as a guess.

        Returns:
            SubmitResult with the evaluated guess, or with a rejection reason
            when the buffer is short or not a known word (state unchanged).
            None once the game is over.
        """
        if self.is_over or len(self._guesses) >= self.max_rounds:
            return None

        if len(self._buffer) < WORD_LENGTH:
            return self._reject(RejectionReason.INCOMPLETE_GUESS)

        word = ''.join(self._buffer)
        if not self._word_source.is_valid_guess(word):
            return self._reject(RejectionReason.UNKNOWN_WORD)

        evaluated = evaluate_guess(word, self._answer)
        self._guesses.append(evaluated)
        self._buffer.clear()

        for letter, hint in evaluated:
            self._knowledge[letter] = merge_hint(self._knowledge[letter], hint)

        if evaluated.is_win:
            self._status = GameStatus.WON
        elif len(self._guesses) >= self.max_rounds:
            self._status = GameStatus.LOST

        self._emit('guess_accepted', evaluated)
        if self._status == GameStatus.WON:
            self._emit('game_won', evaluated)
        elif self._status == GameStatus.LOST:
            self._emit('game_lost', self._answer)

        return SubmitResult(evaluated=evaluated)

    def press(self, key: Key) -> Optional[SubmitResult]:
        """Dispatches a key press. Only Enter produces a result."""
        if key.kind == Key.LETTER:
            self.append_letter(key.char)
        elif key.kind == Key.BACKSPACE:
            self.remove_last()
        elif key.kind == Key.ENTER:
            return self.submit()
        return None

    def _reject(self, reason: RejectionReason) -> SubmitResult:
        self._emit('guess_rejected', reason)
        return SubmitResult(rejection=reason)


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Daily answer selection through the shared word source
    - Transient message/shake feedback per session
    - Fan-out of session signals to registered listeners (e.g. WebSocket rooms)
    """

    def __init__(self, word_source: WordSource,
                 message_timeout_ms: int = 1000,
                 shake_timeout_ms: int = 1000,
                 timer_factory: Callable[..., Any] = threading.Timer):
        self.word_source = word_source
        self.message_timeout_ms = message_timeout_ms
        self.shake_timeout_ms = shake_timeout_ms
        self.timer_factory = timer_factory
        self.games: Dict[str, GameSession] = {}
        self.feedback: Dict[str, UiFeedback] = {}
        self._listeners: List[ServiceListener] = []

    def add_listener(self, listener: ServiceListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: ServiceListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _broadcast(self, game_id: str, event: str, payload: Any = None) -> None:
        for listener in list(self._listeners):
            listener(game_id, event, payload)

    def create_session(self, today: Optional[date] = None) -> str:
        """
        Creates a new session playing the answer of ``today``.

        Returns:
            str: Unique game ID for this session
        """
        today = today or date.today()
        session = GameSession.new_session(today, self.word_source)
        game_id = session.game_id

        feedback = UiFeedback(
            on_message=lambda message: self._broadcast(game_id, 'message_update', message),
            on_shake=lambda shake: self._broadcast(game_id, 'shake_update', shake),
            message_timeout_ms=self.message_timeout_ms,
            shake_timeout_ms=self.shake_timeout_ms,
            timer_factory=self.timer_factory,
        )

        def on_signal(event: str, payload: Any) -> None:
            self._broadcast(game_id, event, payload)
            if event == 'guess_rejected':
                feedback.on_rejected(payload)
            elif event == 'game_won':
                feedback.on_won()
            elif event == 'game_lost':
                feedback.on_lost(payload)

        session.subscribe(on_signal)
        self.games[game_id] = session
        self.feedback[game_id] = feedback
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the
        answer unless the game is lost).
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        feedback = self.feedback[game_id]
        knowledge = session.letter_knowledge()
        status = session.status()

        return GameState(
            game_id=game_id,
            status=status.value,
            current_round=len(session.guesses),
            max_rounds=session.max_rounds,
            game_over=session.is_over,
            won=status == GameStatus.WON,
            guesses=[guess.word for guess in session.guesses],
            rows=serialize_rows(session.current_rows()),
            letter_status={letter: hint.value if hint else None for letter, hint in knowledge.items()},
            keyboard=keyboard_rows(knowledge),
            message=feedback.message.value,
            shake=feedback.shake.value,
            answer=session.revealed_answer(),
            date=session.day.isoformat() if session.day else None,
        )

    def press_key(self, game_id: str, key: Key) -> Optional[SubmitResult]:
        session = self.games[game_id]
        return session.press(key)

    def submit_word(self, game_id: str, word: str) -> Optional[SubmitResult]:
        """Replaces the buffer with ``word`` and submits it."""
        session = self.games[game_id]
        if session.is_over:
            return None
        while session.remove_last():
            pass
        for letter in word:
            session.append_letter(letter)
        return session.submit()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id not in self.games:
            return False
        self.feedback.pop(game_id).cancel()
        del self.games[game_id]
        return True


# Global service instance
_game_service = None
_global_listeners: List[ServiceListener] = []


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source: WordSource, **kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_source, **kwargs)
    for listener in _global_listeners:
        _game_service.add_listener(listener)
    return _game_service


def add_global_listener(listener: ServiceListener) -> None:
    """
    Attach a listener to the current game service and to every service
    initialized after it. Adding the same listener twice has no effect.
    """
    if listener not in _global_listeners:
        _global_listeners.append(listener)
    if _game_service is not None:
        _game_service.add_listener(listener)
