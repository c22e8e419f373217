from datetime import date
from typing import Callable, Sequence
import numpy as np
from numba import njit

MASK32 = np.uint64(0xFFFFFFFF)

@njit(cache=True)
def mulberry32(seed: np.int64) -> np.float64:
    """
    Maps an integer seed to a float in [0, 1).

    Every intermediate value is reduced to unsigned 32 bits and shifts are
    logical, so the result is reproducible across platforms:

        t = s + 0x6d2b79f5
        t = (t ^ (t >> 15)) * (t | 1)
        t = t + ((t ^ (t >> 7)) * (t | 61))
        result = (t ^ (t >> 14)) / 2**32
    """
    t = (np.uint64(seed) + np.uint64(0x6D2B79F5)) & MASK32
    t = ((t ^ (t >> np.uint64(15))) * (t | np.uint64(1))) & MASK32
    k = ((t ^ (t >> np.uint64(7))) * (t | np.uint64(61))) & MASK32
    t = (t + k) & MASK32
    t = t ^ (t >> np.uint64(14))
    return np.float64(t) / 4294967296.0

@njit(cache=True)
def browser_mulberry32(seed: np.int64) -> np.float64:
    """
    The Mulberry32 step as the browser game ships it. The third line
    xor-assigns instead of adding: t ^= t + (t ^ (t >> 7)) * (t | 61).
    Use it to reproduce the browser's daily words.
    """
    t = (np.uint64(seed) + np.uint64(0x6D2B79F5)) & MASK32
    t = ((t ^ (t >> np.uint64(15))) * (t | np.uint64(1))) & MASK32
    k = ((t ^ (t >> np.uint64(7))) * (t | np.uint64(61))) & MASK32
    t = (t ^ ((t + k) & MASK32)) & MASK32
    t = t ^ (t >> np.uint64(14))
    return np.float64(t) / 4294967296.0

WORD_HASHES: dict[str, Callable] = {
    "mulberry32": mulberry32,
    "browser": browser_mulberry32,
}

def date_seed(day: date) -> int:
    return day.year * 10000 + day.month * 100 + day.day

def game_seed(day: date, round_number: int) -> int:
    if round_number < 1:
        raise ValueError(f"Round numbers start at 1, got {round_number}.")
    return date_seed(day) * round_number

def select_index(day: date, round_number: int, nwords: int, hash_func: Callable = mulberry32) -> int:
    """Index into a word list of length `nwords` for the given day and round."""
    if nwords <= 0:
        raise ValueError("Cannot select a word from an empty answer list.")
    return int(np.floor(hash_func(game_seed(day, round_number)) * nwords))

def select_word(day: date, round_number: int, answers: Sequence[str], hash_func: Callable = mulberry32) -> str:
    """Returns the target word for a given calendar day and round of that day."""
    return str(answers[select_index(day, round_number, len(answers), hash_func)])
