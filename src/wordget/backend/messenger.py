"""
Defines a messenger system to report from the game backend to a UI.

This module provides a protocol (`UIMessenger`) and two implementations:
- ConsoleMessenger: For command-line output using print/tqdm.
- TextualMessenger: For posting messages to a Textual screen, from a worker
  thread or from the event loop itself.

The engine and the word list loaders never print directly; everything they
have to say goes through one of these.
"""

from __future__ import annotations

import sys
from typing import Protocol
from tqdm import tqdm

from textual.message import Message
from textual.message_pump import MessagePump


class UIMessenger(Protocol):
    """Defines the interface for sending updates from the backend."""

    def log(self, message: str) -> None:
        """Logs an informational message."""
        ...

    def warn(self, message: str) -> None:
        """Reports a recoverable problem (bad save data, failed download)."""
        ...

    def start_progress(self, total: int, desc: str = "") -> None:
        """Starts/resets a progress bar with a new total and description."""
        ...

    def update_progress(self, advance: int = 1) -> None:
        """Advances the progress bar by a given amount."""
        ...

    def stop_progress(self) -> None:
        """Stops and cleans up the current progress bar."""
        ...


class ConsoleMessenger:
    """A messenger that prints to the console and uses a tqdm progress bar."""
    def __init__(self, quiet: bool = False):
        self.pbar: tqdm | None = None
        self.quiet = quiet

    def log(self, message: str) -> None:
        """
        Prints a message. If a progress bar is active, uses its `write`
        method to avoid interfering with the bar's display.
        """
        if self.quiet:
            return
        if self.pbar:
            self.pbar.write(message)
        else:
            print(message)

    def warn(self, message: str) -> None:
        """Warnings go to stderr and ignore `quiet`."""
        if self.pbar:
            self.pbar.write(f"Warning: {message}", file=sys.stderr)
        else:
            print(f"Warning: {message}", file=sys.stderr)

    def start_progress(self, total: int, desc: str = "") -> None:
        if self.pbar:
            self.pbar.close()
        self.pbar = tqdm(total=total, desc=desc, disable=self.quiet)

    def update_progress(self, advance: int = 1) -> None:
        if self.pbar:
            self.pbar.update(advance)

    def stop_progress(self) -> None:
        if self.pbar:
            self.pbar.close()
            self.pbar = None


class TextualMessenger:
    """
    A messenger that posts messages to a Textual node.

    `post_message` is thread safe, so the same messenger serves the loading
    worker and the game screen's own event handlers.
    """

    class Log(Message):
        """Post a log message to the UI."""
        def __init__(self, text: str):
            self.text = text
            super().__init__()

    class Warning(Message):
        """Post a warning that the UI should surface to the player."""
        def __init__(self, text: str):
            self.text = text
            super().__init__()

    class ProgressStart(Message):
        """Reset and configure the progress bar for a new task."""
        def __init__(self, total: int, description: str):
            self.total = total
            self.description = description
            super().__init__()

    class ProgressUpdate(Message):
        """Advance the progress bar."""
        def __init__(self, advance: int = 1):
            self.advance = advance
            super().__init__()

    class ProgressStop(Message):
        """Signals that the current progress task is complete."""
        def __init__(self):
            super().__init__()

    def __init__(self, target: MessagePump):
        self._target = target

    def post_message(self, message: Message) -> None:
        self._target.post_message(message)

    def log(self, message: str) -> None:
        self.post_message(self.Log(message))

    def warn(self, message: str) -> None:
        self.post_message(self.Warning(message))

    def start_progress(self, total: int, desc: str = "") -> None:
        self.post_message(self.ProgressStart(total=total, description=desc))

    def update_progress(self, advance: int = 1) -> None:
        self.post_message(self.ProgressUpdate(advance=advance))

    def stop_progress(self) -> None:
        self.post_message(self.ProgressStop())
