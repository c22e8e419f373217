from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static
from textual import events

from wordget.backend.core import WordgetGame, GameStatus
from wordget.backend.messenger import TextualMessenger
from wordget.config import WORD_LENGTH
from wordget.gui.game.state import BoardState
from wordget.gui.game.board_widget import WordleBoard
from wordget.gui.game.keyboard_widget import Keyboard, ENTER, BACKSPACE
from wordget.gui.game.sidebar_widget import Sidebar, StatsTable, HelpPanel

class GameScreen(Screen):
    """The main screen. Forwards input to the engine and re-renders from it."""

    CSS_PATH = "game_screen.tcss"
    AUTO_FOCUS = None
    BINDINGS = [("ctrl+n", "play_again", "Play Again")]

    def __init__(self, game_obj: WordgetGame):
        super().__init__()
        self.game_obj = game_obj

        # --- Single Source of Truth ---
        self.board_state = BoardState.from_game(game_obj)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="app_container"):
            yield Sidebar(id="sidebar_container")
            with Vertical(id="board_wrapper"):
                yield WordleBoard(id="wordle_board")
                yield Static(id="message")
                yield Keyboard(id="keyboard")
        yield Footer()

    def on_mount(self) -> None:
        self.game_obj.messenger = TextualMessenger(self)
        self.call_after_refresh(self.render_board)

    # --- Centralized Input Handlers ---

    def on_key(self, event: events.Key) -> None:
        if event.key == "enter":
            self.press_key(ENTER)
        elif event.key == "backspace":
            self.press_key(BACKSPACE)
        elif event.is_printable and event.character and event.character.isalpha():
            self.press_key(event.character)
        else:
            return
        event.stop()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.name:
            self.press_key(event.button.name)

    def press_key(self, key: str) -> None:
        """Routes one key, physical or on-screen, to the engine."""
        if key == ENTER:
            self._submit_guess()
        elif key == BACKSPACE:
            self.game_obj.delete_letter()
        else:
            self.game_obj.add_letter(key)
        self.render_board()

    def _submit_guess(self) -> None:
        game = self.game_obj
        if game.status != GameStatus.IN_PROGRESS or len(game.state.current_guess) != WORD_LENGTH:
            return

        if not game.submit_guess():
            self.app.notify(game.message, title="Invalid Guess", severity="error")
        elif game.status == GameStatus.WON:
            self.app.notify(game.message, title="Solved!")
        elif game.status == GameStatus.LOST:
            self.app.notify(game.message, title="Out of guesses", severity="warning")

    def action_play_again(self) -> None:
        if self.game_obj.reset_round():
            self.app.notify(f"Round {self.game_obj.state.round_number} of today", title="New Round")
            self.render_board()

    # --- Rendering ---

    def render_board(self) -> None:
        """Rebuilds the board state from the engine and pushes it to every widget."""
        self.board_state = BoardState.from_game(self.game_obj)
        state = self.board_state

        self.query_one(WordleBoard).render_state(state)
        self.query_one(Keyboard).render_state(state.key_states)
        self.query_one(StatsTable).render_state(state)
        self.query_one(HelpPanel).render_state(state)

        text = state.message
        if state.status != GameStatus.IN_PROGRESS:
            text = f"{text}\nPress Ctrl+N to play again."
        self.query_one("#message", Static).update(text)

    # --- Message Handlers for TextualMessenger ---

    def on_textual_messenger_log(self, message: TextualMessenger.Log) -> None:
        self.log(message.text)

    def on_textual_messenger_warning(self, message: TextualMessenger.Warning) -> None:
        self.app.notify(message.text, title="Warning", severity="warning")
