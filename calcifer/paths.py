"""Helpers for showing paths and picking a syntax from a file extension."""

from __future__ import annotations

import math
import sys
from pathlib import PurePath
from typing import Optional, Union

from calcifer.syntax import Syntax

DISPLAY_PATH_DEPTH = 3
PROJECT_EXTENSION = "project"

_MAX_INDEX = float(sys.maxsize)


def format_path(path: Union[str, PurePath]) -> str:
    """The last few components of ``path`` as a prompt, e.g. ``a/b/c>``."""
    pure = PurePath(path)
    skipped = {"/", ".", pure.anchor}
    tail = pure.parts[-DISPLAY_PATH_DEPTH:]
    shown = [part for part in tail if part and part not in skipped]
    return "/".join(shown) + ">"


def to_syntax(language: str) -> Syntax:
    """The highlighting rules for a file extension; shell rules otherwise."""
    factories = {
        "py": Syntax.python,
        "rs": Syntax.rust,
        "js": Syntax.javascript,
        "dr": Syntax.pendragon,
    }
    return factories.get(language, Syntax.shell)()


def floor_index(value: float) -> Optional[int]:
    """Round ``value`` down to an index, or ``None`` if it cannot be one."""
    if math.isnan(value) or value < 0.0 or value > _MAX_INDEX:
        return None
    return math.floor(value)