"""
Key/value persistence for saved rounds and stats.

The engine only talks to the `KeyValueStore` protocol. `MemoryStore` keeps
everything in a dict, `JsonFileStore` mirrors it into one JSON file.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Protocol

from wordget.backend.messenger import UIMessenger, ConsoleMessenger


class KeyValueStore(Protocol):
    """Synchronous string storage addressed by string keys."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class MemoryStore:
    """A store that lives only as long as the process."""
    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileStore(MemoryStore):
    """
    A store backed by a single JSON object on disk. The whole file is
    rewritten on every change. A missing or unreadable file starts empty.
    """
    def __init__(self, path: str | Path, messenger: UIMessenger | None = None):
        self.path = Path(path).expanduser()
        self.messenger = messenger if messenger is not None else ConsoleMessenger()
        super().__init__(self._read())

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.messenger.warn(f"Could not read saved data from {self.path}, starting fresh: {e}")
            return {}

        if not isinstance(data, dict):
            self.messenger.warn(f"Saved data in {self.path} is not a JSON object, starting fresh")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, 'w') as f:
            json.dump(self.data, f, indent=2)
        os.replace(tmp_path, self.path)

    def set(self, key: str, value: str) -> None:
        super().set(key, value)
        self._write()

    def remove(self, key: str) -> None:
        super().remove(key)
        self._write()
