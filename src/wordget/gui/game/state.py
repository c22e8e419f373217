"""
Immutable snapshot of everything the game screen draws.

The screen rebuilds a `BoardState` from the engine after every call and
hands it to the widgets; widgets never read the engine themselves.
"""
from dataclasses import dataclass

from wordget.config import GREEN, YELLOW, GRAY, WORD_LENGTH, MAX_GUESSES, KEYBOARD_ROWS
from wordget.backend.core import WordgetGame, GameStatus
from wordget.backend.helpers import Classification

MARK_CLASSES = {GREEN: "correct", YELLOW: "present", GRAY: "absent"}
KEY_CLASSES = {
    Classification.CORRECT: "correct",
    Classification.PRESENT: "present",
    Classification.ABSENT: "absent",
}
TILE_CLASSES = ("empty", "filled", "correct", "present", "absent")
KEY_STATES = ("unused", "correct", "present", "absent")

@dataclass(frozen=True)
class Tile:
    letter: str = " "
    state: str = "empty"

@dataclass(frozen=True)
class BoardState:
    rows: tuple[tuple[Tile, ...], ...]
    keys: tuple[tuple[str, str], ...]
    status: GameStatus = GameStatus.IN_PROGRESS
    message: str = ""
    round_number: int = 1
    win_count: int = 0
    streak_count: int = 0
    last_played: str = ""
    hard_mode: bool = True

    @property
    def key_states(self) -> dict[str, str]:
        return dict(self.keys)

    @classmethod
    def from_game(cls, game: WordgetGame) -> "BoardState":
        state = game.state
        rows = []
        for guess, pattern in game.scored_guesses():
            rows.append(tuple(Tile(letter.upper(), MARK_CLASSES[mark]) for letter, mark in zip(guess, pattern)))

        if not state.game_over and len(rows) < MAX_GUESSES:
            typed = state.current_guess.upper()
            rows.append(tuple(
                Tile(typed[i], "filled") if i < len(typed) else Tile()
                for i in range(WORD_LENGTH)
            ))

        while len(rows) < MAX_GUESSES:
            rows.append(tuple(Tile() for _ in range(WORD_LENGTH)))

        letter_states = game.letter_states()
        keys = tuple(
            (letter, KEY_CLASSES[letter_states[letter]] if letter in letter_states else "unused")
            for row in KEYBOARD_ROWS for letter in row
        )

        return cls(
            rows=tuple(rows),
            keys=keys,
            status=game.status,
            message=game.message,
            round_number=state.round_number,
            win_count=game.stats.win_count,
            streak_count=game.stats.streak_count,
            last_played=game.stats.last_played_date,
            hard_mode=game.hard_mode,
        )
