"""
Defines the UI components for the Wordget game board.
"""
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.widgets import Static

from wordget.config import WORD_LENGTH, MAX_GUESSES
from wordget.gui.game.state import BoardState, TILE_CLASSES

class LetterSquare(Static):
    """A single tile; its colour comes from the `tile_state` class."""

    letter = reactive(" ")
    tile_state = reactive("empty")

    def __init__(self, row: int, col: int):
        super().__init__()
        self.row = row
        self.col = col

    def watch_tile_state(self, new_state: str) -> None:
        self.remove_class(*TILE_CLASSES)
        self.add_class(new_state)

    def on_mount(self) -> None:
        self.watch_tile_state(self.tile_state)

    def render(self) -> str:
        return self.letter

class WordleBoard(Container):
    """A 6x5 grid of letter squares. Holds no game logic."""
    BORDER_TITLE = "Board"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.grid: list[list[LetterSquare]] = [[] for _ in range(MAX_GUESSES)]

    def compose(self) -> ComposeResult:
        for row in range(MAX_GUESSES):
            for col in range(WORD_LENGTH):
                square = LetterSquare(row=row, col=col)
                self.grid[row].append(square)
                yield square

    def render_state(self, board_state: BoardState) -> None:
        """Copies the tiles of `board_state` onto the squares."""
        for row_idx, row in enumerate(board_state.rows):
            for col_idx, tile in enumerate(row):
                square = self.grid[row_idx][col_idx]
                square.letter = tile.letter
                square.tile_state = tile.state
