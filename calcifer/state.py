"""Session state kept between runs: open tabs, theme and zoom."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

_STATE_DIR = (".config", "calcifer")
_SAVE_FILE = "save.json"
_DEBUG_SAVE_FILE = "debug_save.json"


@dataclass
class AppState:
    """What is remembered of a session."""

    tabs: list[Path] = field(default_factory=list)
    theme: int = 0
    zoom: float = 0.0

    def to_json(self) -> str:
        """Compact JSON with the fields in declaration order."""
        data = {
            "tabs": [str(path) for path in self.tabs],
            "theme": self.theme,
            "zoom": float(self.zoom),
        }
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "AppState":
        """Parse state written by :meth:`to_json`; raises ``ValueError`` if invalid."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("state must be a JSON object")
        try:
            tabs = data["tabs"]
            theme = data["theme"]
            zoom = data["zoom"]
        except KeyError as err:
            raise ValueError(f"missing field {err}") from None
        if not isinstance(tabs, list) or not all(isinstance(t, str) for t in tabs):
            raise ValueError("'tabs' must be a list of paths")
        if not _is_int(theme) or theme < 0:
            raise ValueError("'theme' must be a non-negative integer")
        if not (_is_int(zoom) or isinstance(zoom, float)):
            raise ValueError("'zoom' must be a number")
        return cls([Path(t) for t in tabs], theme, float(zoom))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def save_state(state: AppState, file_path: Union[str, Path]) -> None:
    """Write ``state`` to ``file_path``, creating its directory if needed."""
    file_path = Path(file_path)
    serialized = state.to_json()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding="utf-8") as handle:
        handle.write(serialized)
    print(f"Saved state at {file_path}")


def load_state(file_path: Union[str, Path]) -> AppState:
    """Read state saved by :func:`save_state`.

    Raises ``OSError`` if the file cannot be read and ``ValueError`` if its
    content is not valid state.
    """
    with open(file_path, encoding="utf-8") as handle:
        text = handle.read()
    return AppState.from_json(text)


def save_path(debug: bool = False) -> Path:
    """Where the session state lives in the user's home directory."""
    name = _DEBUG_SAVE_FILE if debug else _SAVE_FILE
    return Path.home().joinpath(*_STATE_DIR, name)