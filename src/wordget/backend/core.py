import json
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum, auto
from typing import Any, Callable, Iterable

from wordget.config import (
    WORD_LENGTH, MAX_GUESSES, GREEN,
    STATE_KEY, STATS_KEY, LAST_ROUND_KEY,
    HARD_MODE_POLICIES, STREAK_POLICIES, WORD_HASH_NAMES,
    MSG_WON, MSG_LOST
)
from wordget.backend.helpers import Classification, get_pattern, pattern_to_str, is_playable_word
from wordget.backend.messenger import UIMessenger, ConsoleMessenger
from wordget.backend.selector import select_word, WORD_HASHES
from wordget.backend.stats import Stats, record_result
from wordget.backend.storage import KeyValueStore, MemoryStore
from wordget.backend.validator import (
    GuessRejected, validate_guess, confirmed_letter_counts, target_letter_counts
)

class GameStatus(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()

@dataclass
class Round:
    """Everything that belongs to a single puzzle."""
    target_word: str
    round_number: int = 1
    current_guess: str = ""
    guesses: list[str] = field(default_factory=list)
    current_row: int = 0
    revealed_letters: set[str] = field(default_factory=set)
    correct_positions: dict[int, str] = field(default_factory=dict)
    absent_letters: set[str] = field(default_factory=set)
    game_over: bool = False
    won: bool = False

    def to_snapshot(self, day: date) -> dict[str, Any]:
        return {
            "targetWord": self.target_word,
            "currentGuess": self.current_guess,
            "guesses": list(self.guesses),
            "gameOver": self.game_over,
            "won": self.won,
            "revealedLetters": sorted(self.revealed_letters),
            "correctPositions": {str(pos): letter for pos, letter in sorted(self.correct_positions.items())},
            "currentRow": self.current_row,
            "incorrectGuesses": sorted(self.absent_letters),
            "gameCount": self.round_number,
            "date": day.isoformat(),
        }

    @classmethod
    def from_snapshot(cls, data: dict[str, Any]) -> "Round":
        """Rebuilds a round from a snapshot. Raises ValueError if it does not hold together."""
        if not isinstance(data, dict):
            raise ValueError(f"Round snapshot must be an object, got {type(data).__name__}.")

        target = data["targetWord"]
        if not isinstance(target, str) or not is_playable_word(target):
            raise ValueError(f"Saved target word {target!r} is not a {WORD_LENGTH} letter word.")
        target = target.lower()

        guesses = [str(g).lower() for g in data.get("guesses") or []]
        if len(guesses) > MAX_GUESSES or not all(is_playable_word(g) for g in guesses):
            raise ValueError(f"Saved guesses {guesses!r} are not valid for a round.")

        correct_positions = {int(pos): str(letter) for pos, letter in (data.get("correctPositions") or {}).items()}
        for pos, letter in correct_positions.items():
            if not 0 <= pos < WORD_LENGTH or target[pos] != letter:
                raise ValueError(f"Saved correct position {pos}={letter!r} disagrees with the target.")

        round_number = int(data.get("gameCount", 1))
        if round_number < 1:
            raise ValueError(f"Saved round number {round_number} is not positive.")

        won = bool(data.get("won", False))
        game_over = bool(data.get("gameOver", False))
        if target in guesses[:-1] or won != (bool(guesses) and guesses[-1] == target):
            raise ValueError(f"Saved won flag {won} disagrees with the guesses.")
        if game_over != (won or len(guesses) == MAX_GUESSES):
            raise ValueError(f"Saved gameOver flag {game_over} disagrees with the guesses.")

        # A winning guess does not advance the row
        expected_row = len(guesses) - 1 if won else len(guesses)
        current_row = int(data.get("currentRow", expected_row))
        if current_row != expected_row:
            raise ValueError(f"Saved row {current_row} does not match {len(guesses)} guesses.")

        revealed_letters = set(data.get("revealedLetters") or [])
        if not revealed_letters <= set(target):
            raise ValueError(f"Saved revealed letters {sorted(revealed_letters)} are not all in the target.")

        current_guess = str(data.get("currentGuess") or "").lower()[:WORD_LENGTH]

        return cls(
            target_word=target,
            round_number=round_number,
            current_guess=current_guess,
            guesses=guesses,
            current_row=current_row,
            revealed_letters=revealed_letters,
            correct_positions=correct_positions,
            absent_letters=set(data.get("incorrectGuesses") or []),
            game_over=game_over,
            won=won,
        )

class WordgetGame:
    """
    The game engine. Owns one round and the lifetime stats, and persists both
    through a KeyValueStore.

    A UI drives it with `add_letter`, `delete_letter`, `submit_guess` and
    `reset_round`, then re-reads `state`, `stats` and `message`. Calls made in
    the wrong state are ignored.
    """
    def __init__(self,
                 answers: Iterable[str],
                 guesses: Iterable[str] = (),
                 store: KeyValueStore | None = None,
                 messenger: UIMessenger | None = None,
                 today_func: Callable[[], date] = date.today,
                 hard_mode: bool = True,
                 hard_mode_policy: str = "revealed_counts",
                 streak_policy: str = "calendar",
                 word_hash: str = "mulberry32"):

        self.answers = [str(word).lower() for word in answers]
        if not self.answers:
            raise ValueError("The answer list is empty, there is nothing to play.")
        if hard_mode_policy not in HARD_MODE_POLICIES:
            raise ValueError(f"Unknown hard mode policy '{hard_mode_policy}'. Expected one of {HARD_MODE_POLICIES}.")
        if streak_policy not in STREAK_POLICIES:
            raise ValueError(f"Unknown streak policy '{streak_policy}'. Expected one of {STREAK_POLICIES}.")
        if word_hash not in WORD_HASH_NAMES:
            raise ValueError(f"Unknown word hash '{word_hash}'. Expected one of {WORD_HASH_NAMES}.")

        self.dictionary = frozenset(self.answers) | frozenset(str(word).lower() for word in guesses)
        self.store = store if store is not None else MemoryStore()
        self.messenger = messenger if messenger is not None else ConsoleMessenger()
        self.today_func = today_func
        self.hard_mode = hard_mode
        self.hard_mode_policy = hard_mode_policy
        self.streak_policy = streak_policy
        self.word_hash = word_hash
        self.message = ""

        self.stats = self.load_stats()
        round_number = self.next_round_number()
        self.round = Round(target_word=self.pick_target(round_number),
                           round_number=round_number)
        self.load_state()

    @classmethod
    def from_config(cls, config: dict, answers, guesses, store=None, messenger=None, **kwargs) -> "WordgetGame":
        game_cfg = config.get('game', {})
        return cls(answers, guesses,
                   store=store,
                   messenger=messenger,
                   hard_mode=game_cfg.get('hard_mode', True),
                   hard_mode_policy=game_cfg.get('hard_mode_policy', "revealed_counts"),
                   streak_policy=game_cfg.get('streak_policy', "calendar"),
                   word_hash=game_cfg.get('word_hash', "mulberry32"),
                   **kwargs)

    # --- Read accessors ---

    @property
    def today(self) -> date:
        return self.today_func()

    @property
    def state(self) -> Round:
        return self.round

    @property
    def status(self) -> GameStatus:
        if self.round.won:
            return GameStatus.WON
        if self.round.game_over:
            return GameStatus.LOST
        return GameStatus.IN_PROGRESS

    def scored_guesses(self) -> list[tuple[str, list[int]]]:
        target = self.round.target_word
        return [(guess, get_pattern(guess, target)) for guess in self.round.guesses]

    def letter_states(self) -> dict[str, Classification]:
        """Best known feedback for every letter guessed so far, for keyboard colouring."""
        states = {}
        correct = set(self.round.correct_positions.values())
        for letter in self.round.absent_letters:
            states[letter] = Classification.ABSENT
        for letter in self.round.revealed_letters:
            states[letter] = Classification.CORRECT if letter in correct else Classification.PRESENT
        return states

    def get_game_state(self) -> dict[str, Any]:
        state = self.round
        return {
            'round_number': state.round_number,
            'guesses_played': list(state.guesses),
            'patterns_seen': [pattern for _, pattern in self.scored_guesses()],
            'current_guess': state.current_guess,
            'current_row': state.current_row,
            'solved': state.won,
            'failed': state.game_over and not state.won,
            'message': self.message,
            'win_count': self.stats.win_count,
            'streak_count': self.stats.streak_count,
        }

    # --- Operations ---

    def add_letter(self, letter: str) -> None:
        state = self.round
        if state.game_over or len(state.current_guess) >= WORD_LENGTH:
            return
        letter = letter.lower()
        if len(letter) != 1 or not ('a' <= letter <= 'z'):
            return
        state.current_guess += letter

    def delete_letter(self) -> None:
        state = self.round
        if state.game_over or not state.current_guess:
            return
        state.current_guess = state.current_guess[:-1]

    def submit_guess(self) -> bool:
        """
        Submits the current buffer. Returns True if the guess was accepted.
        A rejected guess only changes `message`.
        """
        state = self.round
        if state.game_over or len(state.current_guess) != WORD_LENGTH:
            return False

        try:
            guess = validate_guess(state.current_guess,
                                   self.dictionary,
                                   revealed_letters=state.revealed_letters,
                                   correct_positions=state.correct_positions,
                                   required_counts=self.required_letter_counts(),
                                   hard_mode=self.hard_mode)
        except GuessRejected as e:
            self.message = e.message
            self.messenger.log(f"Rejected '{e.guess}': {e.reason}")
            return False

        target = state.target_word
        pattern = get_pattern(guess, target)
        for pos, (letter, mark) in enumerate(zip(guess, pattern)):
            if mark == GREEN:
                state.correct_positions[pos] = letter
            if letter in target:
                state.revealed_letters.add(letter)
            else:
                state.absent_letters.add(letter)

        state.guesses.append(guess)
        state.current_guess = ""
        self.message = ""
        self.messenger.log(f"Row {len(state.guesses)}: '{guess}' scored {pattern_to_str(pattern)}")

        if guess == target:
            state.won = True
            state.game_over = True
            self.message = MSG_WON
            self._finish_round()
        else:
            state.current_row += 1
            if state.current_row >= MAX_GUESSES:
                state.game_over = True
                self.message = MSG_LOST.format(word=target)
                self._finish_round()

        self.save_state()
        return True

    def reset_round(self) -> bool:
        """Starts the next round of the day. Only allowed once the current round is over."""
        if not self.round.game_over:
            return False

        round_number = self.round.round_number + 1
        self.round = Round(target_word=self.pick_target(round_number),
                           round_number=round_number)
        self.message = ""
        self.save_state()
        return True

    def pick_target(self, round_number: int) -> str:
        return select_word(self.today, round_number, self.answers, WORD_HASHES[self.word_hash])

    def required_letter_counts(self) -> dict[str, int]:
        state = self.round
        if self.hard_mode_policy == "target_counts":
            return target_letter_counts(state.target_word, state.revealed_letters)
        return confirmed_letter_counts(state.target_word, state.guesses)

    def _finish_round(self) -> None:
        today = self.today
        self._write_json(LAST_ROUND_KEY, {"round": self.round.round_number, "date": today.isoformat()})
        self.stats = record_result(self.stats,
                                   won=self.round.won,
                                   today=today,
                                   yesterday=today - timedelta(days=1),
                                   policy=self.streak_policy)
        self._write_json(STATS_KEY, self.stats.to_dict())

    # --- Persistence ---

    def _read_json(self, key: str) -> Any:
        raw = self.store.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            self.messenger.warn(f"Ignoring malformed saved data under '{key}': {e}")
            return None

    def _write_json(self, key: str, value: Any) -> None:
        try:
            self.store.set(key, json.dumps(value))
        except OSError as e:
            self.messenger.warn(f"Failed to save '{key}': {e}")

    def load_stats(self) -> Stats:
        data = self._read_json(STATS_KEY)
        if data is None:
            return Stats()
        try:
            return Stats.from_dict(data)
        except ValueError as e:
            self.messenger.warn(f"Resetting stats: {e}")
            return Stats()

    def next_round_number(self) -> int:
        """Continues after the last round finished today, or starts at 1 on a new day."""
        data = self._read_json(LAST_ROUND_KEY)
        if not isinstance(data, dict):
            return 1
        last_round = data.get("round")
        if data.get("date") == self.today.isoformat() and type(last_round) is int and last_round >= 1:
            return last_round + 1
        return 1

    def load_state(self) -> bool:
        """Restores a snapshot saved earlier today. Returns True if one was restored."""
        data = self._read_json(STATE_KEY)
        if not isinstance(data, dict) or data.get("date") != self.today.isoformat():
            return False
        try:
            self.round = Round.from_snapshot(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            self.messenger.warn(f"Ignoring saved round: {e}")
            return False

        if self.round.game_over:
            self.message = MSG_WON if self.round.won else MSG_LOST.format(word=self.round.target_word)
        return True

    def save_state(self) -> None:
        self._write_json(STATE_KEY, self.round.to_snapshot(self.today))
