"""
Transient UI Feedback

Self-clearing values (the message banner and the row shake flag) backed by
cancellable one-shot timers.
"""

import threading
from typing import Any, Callable, Optional

from ..models.game import RejectionReason

WIN_MESSAGE = "You win!"


class TransientSlot:
    """
    Holds one value and at most one pending clear-timer.

    Showing a new value cancels the previous timer. Each timer carries the
    generation it was scheduled for and does nothing if a newer value has
    been shown since.
    """

    def __init__(self, on_change: Callable[[Any], None], empty: Any = None,
                 timer_factory: Callable[..., Any] = threading.Timer):
        self._on_change = on_change
        self._empty = empty
        self._timer_factory = timer_factory
        self._lock = threading.RLock()
        self._value = empty
        self._timer = None
        self._generation = 0

    @property
    def value(self) -> Any:
        return self._value

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def show(self, value: Any, delay_ms: Optional[int] = None) -> None:
        """Set ``value`` now and clear it after ``delay_ms`` unless preempted."""
        with self._lock:
            self._cancel_timer()
            self._generation += 1
            self._value = value
            self._on_change(value)
            if delay_ms is not None:
                timer = self._timer_factory(delay_ms / 1000.0, self._expire, args=(self._generation,))
                timer.daemon = True
                self._timer = timer
                timer.start()

    def clear(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._generation += 1
            if self._value != self._empty:
                self._value = self._empty
                self._on_change(self._empty)

    def cancel(self) -> None:
        """Drop the pending timer, keeping the current value."""
        with self._lock:
            self._cancel_timer()
            self._generation += 1

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _expire(self, generation: int) -> None:
        # Listeners are notified under the lock so they observe changes in
        # the same order as ``value``.
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
            self._value = self._empty
            self._on_change(self._empty)


class UiFeedback:
    """Message banner and shake flag of one game."""

    def __init__(self, on_message: Callable[[Optional[str]], None],
                 on_shake: Callable[[bool], None],
                 message_timeout_ms: int = 1000,
                 shake_timeout_ms: int = 1000,
                 timer_factory: Callable[..., Any] = threading.Timer):
        self.message_timeout_ms = message_timeout_ms
        self.shake_timeout_ms = shake_timeout_ms
        self.message = TransientSlot(on_message, None, timer_factory)
        self.shake = TransientSlot(on_shake, False, timer_factory)

    def on_rejected(self, reason: RejectionReason) -> None:
        self.shake.show(True, self.shake_timeout_ms)
        self.message.show(reason.message, self.message_timeout_ms)

    def on_won(self) -> None:
        self.message.show(WIN_MESSAGE)

    def on_lost(self, answer: str) -> None:
        self.message.show(answer.upper())

    def cancel(self) -> None:
        self.message.cancel()
        self.shake.cancel()
