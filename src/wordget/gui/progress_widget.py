"""
Defines a custom, titled progress bar component.
"""
from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import ProgressBar
from textual.color import Gradient

from wordget.config import APP_COLORS

class TitledProgressBar(Container):
    """A container that holds a ProgressBar and gives it a border title."""
    def __init__(self, title: str | None = None, total: int | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.border_title = title
        self._total = total

    def compose(self) -> ComposeResult:
        gradient = Gradient.from_colors(APP_COLORS['gradient-start'], APP_COLORS['gradient-end'])
        yield ProgressBar(total=self._total, id="progress", gradient=gradient, show_eta=False)

    @property
    def bar(self) -> ProgressBar:
        return self.query_one("#progress", ProgressBar)

    def restart(self, total: int, title: str) -> None:
        self.border_title = title
        self.bar.update(total=total, progress=0)

    def advance(self, amount: int = 1) -> None:
        self.bar.advance(amount)

    def finish(self) -> None:
        bar = self.bar
        if bar.total is not None:
            bar.update(progress=bar.total)
