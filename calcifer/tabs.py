"""Open documents shown as tabs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

_ERROR_TYPE = "reading file"
_DEFAULT_PATH = "untitled"


def read_file_contents(path: Union[str, Path]) -> str:
    """Read a file as text, or describe the failure as a comment line."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as err:
        return f"// Error {_ERROR_TYPE}: {err}"


def _format_file_path(path: Path, contents: str) -> Path:
    if f"Error {_ERROR_TYPE}" in contents:
        return Path(_DEFAULT_PATH)
    return path


def _load(path: Path) -> tuple[str, Path]:
    text = read_file_contents(path).replace(" " * 4, "\t")
    return text, _format_file_path(path, text)


@dataclass
class Tab:
    """A document open in the editor."""

    path: Path = field(default_factory=lambda: Path(_DEFAULT_PATH))
    code: str = "// Hello there, Master"
    language: str = "rs"
    saved: bool = False
    scroll_offset: float = 0.0
    last_cursor: Optional[Any] = None

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "Tab":
        """Open a file; a file that cannot be read becomes an untitled tab."""
        text, file_path = _load(Path(path))
        return cls(
            path=file_path,
            code=text,
            language=file_path.suffix[1:],
            saved=True,
        )

    def name(self) -> str:
        name = self.path.name
        if not name or name == "..":
            return _DEFAULT_PATH
        return name

    def refresh(self) -> None:
        """Reload the contents from disk, discarding changes."""
        text, file_path = _load(self.path)
        self.code = text
        self.path = file_path
        self.saved = True