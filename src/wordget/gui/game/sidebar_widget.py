"""
Defines the sidebar shown next to the board.

- StatsTable: lifetime wins and streak plus the current round.
- HelpPanel: the key bindings and what the tile colours mean.
- Sidebar: a container for both.
"""
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import DataTable, Static

from wordget.gui.game.state import BoardState

class StatsTable(Static):
    """A widget to display the persisted statistics."""

    BORDER_TITLE = "Stats"

    def compose(self) -> ComposeResult:
        table = DataTable(cursor_type='none', zebra_stripes=True)
        table.can_focus = False
        yield table

    def render_state(self, board_state: BoardState) -> None:
        table = self.query_one(DataTable)
        if not table.columns:
            table.add_columns("Statistic", "Value")
        table.clear()
        table.add_row("Wins", f"{board_state.win_count:,}")
        table.add_row("Streak", f"{board_state.streak_count:,}")
        table.add_row("Round today", f"{board_state.round_number}")
        table.add_row("Last played", board_state.last_played or "-")

def help_text(hard_mode: bool) -> str:
    rule = "Hard mode: revealed letters must be reused." if hard_mode else "Easy mode: any listed word is allowed."
    return (
        "Type a word and press Enter.\n"
        "[b #16ac55]Green[/]: right letter, right spot\n"
        "[b #bbaf30]Yellow[/]: in the word, wrong spot\n"
        "[b #808080]Gray[/]: not in the word\n\n"
        f"{rule}\n"
        "Ctrl+N starts the next round once\n"
        "this one is over."
    )

class HelpPanel(Static):
    BORDER_TITLE = "How to play"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(help_text(True), *args, **kwargs)

    def render_state(self, board_state: BoardState) -> None:
        self.update(help_text(board_state.hard_mode))

class Sidebar(Vertical):
    """The sidebar container widget."""

    def compose(self) -> ComposeResult:
        yield StatsTable()
        yield HelpPanel()
