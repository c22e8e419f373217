import os
from enum import Enum
import requests
import numpy as np

from wordget.config import (
    GREEN, YELLOW, GRAY, WORD_LENGTH,
    ANSWERS_FILE, ANSWERS_URL, VALID_GUESSES_FILE, VALID_GUESSES_URL
)
from wordget.config_loader import get_abs_path
from wordget.backend.messenger import UIMessenger, ConsoleMessenger

PATTERN_CHARS = {GREEN: "g", YELLOW: "y", GRAY: "-"}

class Classification(Enum):
    """Feedback for a single letter of a guess."""
    CORRECT = GREEN
    PRESENT = YELLOW
    ABSENT = GRAY

### SCORING ###
def get_pattern(guess: str, answer: str) -> list[int]:
    """Calculates the feedback pattern for a guess against the answer word."""
    pattern = [GRAY]*WORD_LENGTH
    letter_count = {}
    # Green pass
    for i in range(WORD_LENGTH):
        if answer[i] == guess[i]:
            pattern[i] = GREEN
        else:
            # Tally of answer letters not already claimed by a green
            letter_count[answer[i]] = letter_count.get(answer[i], 0) + 1

    # Yellow pass, left to right
    for i in range(WORD_LENGTH):
        if (pattern[i] != GREEN) and letter_count.get(guess[i], 0) > 0:
            pattern[i] = YELLOW
            letter_count[guess[i]] -= 1

    return pattern

def score(target: str, guess: str) -> list[Classification]:
    """Same as `get_pattern` but returns `Classification` members."""
    return [Classification(mark) for mark in get_pattern(guess.lower(), target.lower())]

def pattern_to_str(pattern: list[int]) -> str:
    return "".join(PATTERN_CHARS[mark] for mark in pattern)

### WORD LISTS ###
def is_playable_word(word: str) -> bool:
    return len(word) == WORD_LENGTH and word.isascii() and word.isalpha()

def get_words(savefile=VALID_GUESSES_FILE,
              url=VALID_GUESSES_URL,
              refetch: bool = False,
              save: bool = True,
              messenger: UIMessenger | None = None) -> np.ndarray:
    """
    Retrieves a word list of lowercase five letter words.
    It reads the local file if it exists, otherwise it fetches from the URL.
    """
    if messenger is None:
        messenger = ConsoleMessenger()
    savefile = get_abs_path(str(savefile))

    # --- Path 1: Reading from local file ---
    if not refetch and os.path.exists(savefile):
        messenger.log(f"Reading words from {savefile}")
        with open(savefile, 'r') as f:
            words = [
                line.strip().lower() for line in f
                if is_playable_word(line.strip())
            ]
            return np.array(words, dtype=str)

    # --- Path 2: Fetching from the web ---
    if not url:
        messenger.warn(f"No word list at {savefile} and no URL to fetch one from")
        return np.array([], dtype=str)

    messenger.log(f"Fetching words from {url}")
    try:
        response = requests.get(url, timeout=10)
        response.raise_for_status()

        all_words = response.text.splitlines()
        filtered_words = [
            word.strip().lower() for word in all_words
            if is_playable_word(word.strip())
        ]

        if save:
            messenger.log(f"Saving {len(filtered_words)} words to {savefile}")
            os.makedirs(os.path.dirname(savefile), exist_ok=True)
            with open(savefile, 'w') as f:
                f.write('\n'.join(filtered_words))

        return np.array(filtered_words, dtype=str)

    except requests.exceptions.RequestException as e:
        messenger.warn(f"Error downloading the word list: {e}")
        return np.array([], dtype=str)

def load_word_lists(config: dict, messenger: UIMessenger | None = None) -> tuple[np.ndarray, np.ndarray]:
    """
    Loads the answer list and the extra valid guesses described by the
    `answers` and `guesses` config sections. Extra guesses that also appear
    as answers are dropped so the two lists stay disjoint.
    """
    if messenger is None:
        messenger = ConsoleMessenger()

    messenger.start_progress(total=2, desc="Loading word lists")
    answer_cfg = config.get('answers', {})
    answers = get_words(savefile  = answer_cfg.get('savefile', ANSWERS_FILE),
                        url       = answer_cfg.get('url', ANSWERS_URL),
                        refetch   = answer_cfg.get('refetch', False),
                        save      = answer_cfg.get('save', True),
                        messenger = messenger)
    messenger.update_progress()

    guess_cfg = config.get('guesses', {})
    guesses = get_words(savefile  = guess_cfg.get('savefile', VALID_GUESSES_FILE),
                        url       = guess_cfg.get('url', VALID_GUESSES_URL),
                        refetch   = guess_cfg.get('refetch', False),
                        save      = guess_cfg.get('save', True),
                        messenger = messenger)
    messenger.update_progress()
    messenger.stop_progress()

    # Keeps the answer file's order, which the daily selection indexes into
    _, first_idx = np.unique(answers, return_index=True)
    answers = answers[np.sort(first_idx)]
    guesses = np.setdiff1d(guesses, answers)
    messenger.log(f"Loaded {len(answers)} answers and {len(guesses)} extra guesses")
    return answers, guesses
