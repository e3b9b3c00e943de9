import os
import tempfile
from datetime import date

import pytest

os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='daily_wordle_logs_'))

from daily_wordle import create_app  # noqa: E402
from daily_wordle.config import TestingConfig  # noqa: E402
from daily_wordle.services.game_service import GameSession, initialize_game_service  # noqa: E402
from daily_wordle.services.word_source import WordSource  # noqa: E402

SMALL_ANSWERS = ["speed", "crane", "lilac", "abbey", "robot"]
SMALL_ALLOWED = ["erase", "eerie", "enter", "adieu", "stony", "pious", "flung", "brick", "jumpy"]
SMALL_EPOCH = date(2024, 1, 1)


class ManualTimer:
    """threading.Timer stand-in that only fires when a test says so."""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.function(*self.args, **self.kwargs)

    def force_fire(self):
        """Run the callback even if cancelled, as a late-firing thread would."""
        self.function(*self.args, **self.kwargs)


@pytest.fixture
def timers():
    return []


@pytest.fixture
def timer_factory(timers):
    def factory(interval, function, args=None, kwargs=None):
        timer = ManualTimer(interval, function, args, kwargs)
        timers.append(timer)
        return timer
    return factory


@pytest.fixture
def small_source():
    return WordSource(SMALL_ANSWERS, SMALL_ALLOWED, SMALL_EPOCH)


@pytest.fixture
def make_session(small_source):
    def factory(answer="speed"):
        return GameSession(answer, small_source)
    return factory


@pytest.fixture(scope='session')
def bundled_source():
    return WordSource.from_settings('2021-06-19')


@pytest.fixture
def game_service(bundled_source, timer_factory):
    return initialize_game_service(bundled_source, timer_factory=timer_factory)


@pytest.fixture
def app(game_service):
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
