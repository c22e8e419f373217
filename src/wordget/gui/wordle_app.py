"""
Main application file for the Wordget terminal UI.

This script sets up the Textual application and manages the different screens.
"""
import sys

from textual.app import App
from wordget.backend.core import WordgetGame
from wordget.config import APP_COLORS
from wordget.config_loader import load_config, ConfigError
from wordget.gui.game.game_screen import GameScreen
from wordget.gui.startup.startup_screen import StartupScreen

class WordgetApp(App):
    """The main application class. Passing a ready engine skips straight to the board."""

    TITLE = "Wordget"
    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, config_data: dict | None = None, game: WordgetGame | None = None, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.config_data = config_data if config_data is not None else {}
        self.initial_game = game

    def get_theme_variable_defaults(self) -> dict[str, str]:
        return APP_COLORS

    def on_mount(self) -> None:
        if self.initial_game is not None:
            self.push_screen(GameScreen(self.initial_game))
        else:
            self.push_screen(StartupScreen())

def run_app(argv: list[str] | None = None) -> None:
    try:
        config = load_config(argv)
    except ConfigError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    app = WordgetApp(config_data=config)
    app.run()

if __name__ == "__main__":
    run_app()
