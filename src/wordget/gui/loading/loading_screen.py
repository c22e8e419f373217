"""
Defines the LoadingScreen for the Wordget application.

Word lists are read (or downloaded) and saved games restored in a worker
thread; progress comes back through a TextualMessenger.
"""

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Header, Footer, Static, RichLog
from textual.worker import Worker, WorkerState

from wordget.backend.core import WordgetGame
from wordget.backend.helpers import load_word_lists
from wordget.backend.messenger import TextualMessenger
from wordget.backend.storage import JsonFileStore, MemoryStore
from wordget.gui.game.game_screen import GameScreen
from wordget.gui.progress_widget import TitledProgressBar

class LoadingScreen(Screen):
    """A screen to display while the word lists and saved data load."""
    CSS_PATH = "loading_screen.tcss"

    def __init__(self, config: dict) -> None:
        super().__init__()
        self.config = config

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("Loading word lists...", id="loading_text")
        yield RichLog(id="log_output", highlight=True, markup=True)
        yield TitledProgressBar(title="Loading")
        yield Footer()

    def on_mount(self) -> None:
        self.run_worker(self.load_backend_data, thread=True)

    def load_backend_data(self) -> WordgetGame:
        """Executed by the worker. Returns the ready-to-play engine."""
        messenger = TextualMessenger(self)
        answers, guesses = load_word_lists(self.config, messenger)

        storage_path = self.config.get('storage', {}).get('path')
        if storage_path:
            store = JsonFileStore(storage_path, messenger)
        else:
            messenger.log("No storage path configured, progress will not be saved")
            store = MemoryStore()

        return WordgetGame.from_config(self.config, answers, guesses, store=store, messenger=messenger)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        log = self.query_one(RichLog)
        if event.state == WorkerState.SUCCESS:
            log.write("\n[bold green]Loading complete! Starting game...[/bold green]")
            game = event.worker.result
            self.set_timer(0.5, lambda: self.start_game(game))
        elif event.state == WorkerState.ERROR:
            log.write("\n[bold red]FATAL ERROR:[/bold red] Loading failed.")
            log.write(f"{event.worker.error}")

    def start_game(self, game: WordgetGame) -> None:
        self.app.switch_screen(GameScreen(game))

    # --- Message Handlers for TextualMessenger ---

    def on_textual_messenger_log(self, message: TextualMessenger.Log) -> None:
        self.query_one(RichLog).write(message.text)

    def on_textual_messenger_warning(self, message: TextualMessenger.Warning) -> None:
        self.query_one(RichLog).write(f"[bold yellow]Warning:[/bold yellow] {message.text}")

    def on_textual_messenger_progress_start(self, message: TextualMessenger.ProgressStart) -> None:
        self.query_one(TitledProgressBar).restart(message.total, message.description)
        self.query_one("#loading_text", Static).update(message.description)

    def on_textual_messenger_progress_update(self, message: TextualMessenger.ProgressUpdate) -> None:
        self.query_one(TitledProgressBar).advance(message.advance)

    def on_textual_messenger_progress_stop(self, message: TextualMessenger.ProgressStop) -> None:
        self.query_one(TitledProgressBar).finish()
