"""
Guess validation: length, dictionary membership and the hard mode rule.

Every rejection is raised as a subclass of `GuessRejected`. The engine
catches these and shows their message to the player; nothing else changes.
"""
from collections import Counter
from typing import Collection, Iterable, Mapping

from wordget.config import (
    WORD_LENGTH, GRAY,
    MSG_NOT_IN_DICTIONARY, MSG_HARD_MODE, MSG_WRONG_LENGTH
)
from wordget.backend.helpers import get_pattern

class GuessRejected(ValueError):
    """Base class for a guess the game refuses to accept."""
    reason = "rejected"

    def __init__(self, guess: str, message: str):
        self.guess = guess
        self.message = message
        super().__init__(message)

class GuessLengthError(GuessRejected):
    """Raised when the guess is not exactly five letters."""
    reason = "wrong length"

    def __init__(self, guess: str):
        super().__init__(guess, MSG_WRONG_LENGTH.format(length=WORD_LENGTH))

class InvalidWordError(GuessRejected):
    """Raised when the guessed word is in neither word list."""
    reason = "not in dictionary"

    def __init__(self, guess: str):
        super().__init__(guess, MSG_NOT_IN_DICTIONARY)

class HardModeError(GuessRejected):
    """Raised when a guess drops a revealed letter or a confirmed position."""
    reason = "must include revealed letters/positions"

    def __init__(self, guess: str, missing: str):
        self.missing = missing
        super().__init__(guess, MSG_HARD_MODE)

def confirmed_letter_counts(target: str, guesses: Iterable[str]) -> dict[str, int]:
    """
    For each letter, the largest number of copies any single previous guess
    proved to be in the target (greens plus yellows for that letter).
    """
    counts: dict[str, int] = {}
    for guess in guesses:
        pattern = get_pattern(guess, target)
        hits = Counter(letter for letter, mark in zip(guess, pattern) if mark != GRAY)
        for letter, n in hits.items():
            counts[letter] = max(counts.get(letter, 0), n)
    return counts

def target_letter_counts(target: str, revealed_letters: Iterable[str]) -> dict[str, int]:
    """How often each revealed letter really occurs in the target."""
    target_counts = Counter(target)
    return {letter: target_counts[letter] for letter in revealed_letters}

def check_hard_mode(guess: str,
                    revealed_letters: Collection[str],
                    correct_positions: Mapping[int, str],
                    required_counts: Mapping[str, int] | None = None) -> None:
    """Raises HardModeError unless the guess keeps everything revealed so far."""
    if not revealed_letters and not correct_positions:
        return

    required_counts = required_counts or {}
    guess_counts = Counter(guess)
    for letter in sorted(revealed_letters):
        if guess_counts[letter] < max(required_counts.get(letter, 1), 1):
            raise HardModeError(guess, missing=letter)

    for pos, letter in sorted(correct_positions.items()):
        if guess[pos] != letter:
            raise HardModeError(guess, missing=f"{letter}@{pos}")

def validate_guess(guess: str,
                   dictionary: Collection[str],
                   revealed_letters: Collection[str] = (),
                   correct_positions: Mapping[int, str] | None = None,
                   required_counts: Mapping[str, int] | None = None,
                   hard_mode: bool = True) -> str:
    """
    Checks a guess in order: length, dictionary membership, then the hard
    mode rule against what was revealed before this guess.
    Returns the normalised guess or raises a GuessRejected subclass.
    """
    guess_lower = guess.lower()
    if len(guess_lower) != WORD_LENGTH:
        raise GuessLengthError(guess_lower)
    if guess_lower not in dictionary:
        raise InvalidWordError(guess_lower)
    if hard_mode:
        check_hard_mode(guess_lower, revealed_letters, correct_positions or {}, required_counts)
    return guess_lower
