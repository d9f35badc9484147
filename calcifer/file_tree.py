"""The directory tree shown in the side panel."""

from __future__ import annotations

import dataclasses
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union


def _generate_unique_id(path: Path) -> str:
    now = int(time.time())
    return f"{path}#{hash((now,))}"


def _has_file_name(path: Path) -> bool:
    return path.name not in ("", "..")


@dataclass
class FileEntry:
    """A file, or a directory with its (possibly unread) contents."""

    name: str
    path: Path
    folder_content: Optional[list["FileEntry"]] = None
    content_checked: bool = True
    id: str = ""

    @classmethod
    def new_entry(cls, name: str, path: Union[str, Path]) -> "FileEntry":
        """A leaf: a plain file or an error message."""
        path = Path(path)
        return cls(name, path, None, True, _generate_unique_id(path))

    @classmethod
    def end_of_branch(cls, name: str, path: Union[str, Path]) -> "FileEntry":
        """A directory whose contents have not been read yet."""
        path = Path(path)
        return cls(name, path, [], False, _generate_unique_id(path))


def get_file_path_id(path: Union[str, Path]) -> str:
    """The key under which a directory is remembered as opened."""
    return f"#{path}"


def update_file_tree(file: FileEntry, opened_dirs: Iterable[str]) -> FileEntry:
    """Read the contents of every opened directory that has not been read yet."""
    opened = set(opened_dirs)
    if get_file_path_id(file.path) not in opened:
        return file
    if not file.content_checked:
        return update_file_tree(generate_folder_entry(file.path), opened)
    if file.folder_content is None:
        return file
    return dataclasses.replace(
        file,
        folder_content=[update_file_tree(entry, opened) for entry in file.folder_content],
        content_checked=True,
        id=_generate_unique_id(file.path),
    )


def _generate_entry(path: Path) -> Optional[FileEntry]:
    if not _has_file_name(path) or path.name.startswith("."):
        return None
    if path.is_dir():
        return FileEntry.end_of_branch(path.name, path)
    return FileEntry.new_entry(path.name, path)


def generate_folder_entry(path: Union[str, Path]) -> FileEntry:
    """Read one level of a directory: directories first, then files, by path."""
    path = Path(path)
    if not _has_file_name(path):
        return FileEntry.new_entry("Error reading directory name", path)
    try:
        with os.scandir(path) as entries:
            children = [Path(entry.path) for entry in entries]
    except OSError as err:
        return FileEntry.new_entry(f"Error reading directory: {err}", path)

    children.sort(key=lambda child: (not child.is_dir(), child))
    content = [entry for entry in map(_generate_entry, children) if entry is not None]
    return FileEntry(path.name, path, content, True, _generate_unique_id(path))