"""
On-screen keyboard. Keys never take focus so typed Enter/Backspace always
reach the game screen.
"""
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button

from wordget.config import KEYBOARD_ROWS
from wordget.gui.game.state import KEY_STATES

ENTER = "enter"
BACKSPACE = "backspace"

class KeyButton(Button):
    """A keyboard key. `name` carries the key it sends."""
    can_focus = False

    def set_key_state(self, key_state: str) -> None:
        self.remove_class(*KEY_STATES)
        self.add_class(key_state)

class Keyboard(Vertical):
    """Three rows of letter keys with Enter and Backspace on the last row."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.keys: dict[str, KeyButton] = {}

    def compose(self) -> ComposeResult:
        last = len(KEYBOARD_ROWS) - 1
        for idx, row in enumerate(KEYBOARD_ROWS):
            with Horizontal():
                if idx == last:
                    yield KeyButton("ENTER", name=ENTER, classes="wide")
                for letter in row:
                    key = KeyButton(letter.upper(), name=letter, id=f"key_{letter}", classes="unused")
                    self.keys[letter] = key
                    yield key
                if idx == last:
                    yield KeyButton("DEL", name=BACKSPACE, classes="wide")

    def render_state(self, key_states: dict[str, str]) -> None:
        for letter, key_state in key_states.items():
            if letter in self.keys:
                self.keys[letter].set_key_state(key_state)
