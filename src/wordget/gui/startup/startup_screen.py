from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Label
from textual import events
from textual_pyfiglet import FigletWidget

from wordget.config import APP_COLORS
from wordget.gui.loading.loading_screen import LoadingScreen

class StartupScreen(Screen):
    """The first screen the user sees. Dismissed by any key press."""
    CSS_PATH = "startup_screen.tcss"

    def compose(self) -> ComposeResult:
        yield Vertical(
            FigletWidget(
                "> Wordget",
                font="georgia11",
                justify="center",
                colors=[APP_COLORS['gradient-start'], APP_COLORS['gradient-end']],
                horizontal=True
            ),
            Label("Press any key to start", classes="subtitle"),
            id="startup_dialog",
        )

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self.app.switch_screen(LoadingScreen(self.app.config_data))
