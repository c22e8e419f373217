from datetime import date

import pytest

from wordget.backend.core import WordgetGame
from wordget.backend.storage import MemoryStore

TODAY = date(2026, 10, 19)

ANSWERS = ["apple", "crane", "shade", "store", "grown", "great", "light", "paper", "eager", "sweet"]
EXTRA_GUESSES = ["abbey", "brink", "sames", "slate", "tulip", "lemon", "olive", "pecan", "plaid", "zebra",
                 "ample", "maple", "lapel", "bagel", "angel", "adieu"]

class RecordingMessenger:
    """Collects everything the backend reports."""
    def __init__(self):
        self.logs = []
        self.warnings = []

    def log(self, message):
        self.logs.append(message)

    def warn(self, message):
        self.warnings.append(message)

    def start_progress(self, total, desc=""):
        pass

    def update_progress(self, advance=1):
        pass

    def stop_progress(self):
        pass

@pytest.fixture
def messenger():
    return RecordingMessenger()

@pytest.fixture
def store():
    return MemoryStore()

@pytest.fixture
def make_game(store, messenger):
    """Builds an engine whose only answer is `target`, so the target is known."""
    def _make(target="apple", today=TODAY, **kwargs):
        kwargs.setdefault("store", store)
        kwargs.setdefault("messenger", messenger)
        return WordgetGame([target], ANSWERS + EXTRA_GUESSES, today_func=lambda: today, **kwargs)
    return _make

def type_word(game, word):
    for letter in word:
        game.add_letter(letter)

def play(game, word):
    type_word(game, word)
    return game.submit_guess()
