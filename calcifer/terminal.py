"""Shell commands run from the integrated terminal panel."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Optional

from calcifer.paths import format_path

_READ_SIZE = 65536


def remove_line_break(text: str) -> str:
    """Strip trailing line breaks, including Windows-style ones."""
    while text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


@dataclass
class Line:
    """One line of command output."""

    text: str
    is_error: bool = False

    @classmethod
    def output(cls, text: str) -> "Line":
        return cls(remove_line_break(text), False)

    @classmethod
    def error(cls, text: str) -> "Line":
        return cls(remove_line_break(text), True)


def execute(command: str) -> subprocess.Popen:
    """Start ``command`` in ``sh`` with non-blocking output pipes.

    Raises ``OSError`` when the shell cannot be started.
    """
    process = subprocess.Popen(
        ["sh", "-c", command],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    for stream in (process.stdout, process.stderr):
        os.set_blocking(stream.fileno(), False)
    return process


class _StreamReader:
    """Collects complete lines from a non-blocking pipe."""

    def __init__(self, stream: IO[bytes]) -> None:
        self._stream = stream
        self._pending = b""
        self._closed = False

    def read_lines(self, final: bool) -> list[str]:
        if self._closed:
            return []
        fd = self._stream.fileno()
        while True:
            try:
                chunk = os.read(fd, _READ_SIZE)
            except BlockingIOError:
                break
            if not chunk:
                break
            self._pending += chunk
        *complete, self._pending = self._pending.split(b"\n")
        lines = [raw.decode("utf-8", errors="replace") for raw in complete]
        if final:
            if self._pending:
                lines.append(self._pending.decode("utf-8", errors="replace"))
                self._pending = b""
            self._stream.close()
            self._closed = True
        return lines


class CommandEntry:
    """A command typed in the terminal, with the output gathered so far."""

    def __init__(self, env: str, command: str) -> None:
        self.env = env
        self.command = command
        self.result: list[Line] = []
        self.finished = False
        self.process: Optional[subprocess.Popen] = None
        self._stdout: Optional[_StreamReader] = None
        self._stderr: Optional[_StreamReader] = None
        try:
            self.process = execute(command)
        except OSError as err:
            self.result.append(Line.error(f"failed to get results: {err}"))
        else:
            self._stdout = _StreamReader(self.process.stdout)
            self._stderr = _StreamReader(self.process.stderr)

    def update(self) -> None:
        """Gather newly available output and notice when the command ends."""
        if self.process is None or self.finished:
            return
        exited = self.process.poll() is not None
        self.result.extend(Line.output(text) for text in self._stdout.read_lines(exited))
        self.result.extend(Line.error(text) for text in self._stderr.read_lines(exited))
        if exited:
            self.finished = True

    def error_text(self) -> str:
        """All error lines, each ending with a line break."""
        return "".join(f"{line.text}\n" for line in self.result if line.is_error)


def _current_dir() -> Path:
    try:
        return Path.cwd()
    except OSError:
        return Path("/")


def _substitute(env: str, shown_command: str, run_command: str) -> CommandEntry:
    entry = CommandEntry(env, run_command)
    entry.command = shown_command
    return entry


def send_command(command: str) -> CommandEntry:
    """Run ``command``; ``cd`` is handled here by changing the working directory."""
    env = format_path(_current_dir())

    if len(command) < 2 or command[:2] != "cd":
        return CommandEntry(env, command)

    if len(command) < 4:
        return _substitute(env, command, "echo Invalid cd, should provide path >&2")

    target = command[3:].replace("~", str(Path.home()))

    if target == "/":
        return _substitute(env, command, "echo Root access denied >&2")

    try:
        os.chdir(target)
    except OSError:
        return _substitute(env, command, f"echo Could not find path : {target} >&2")
    return _substitute(env, command, f"echo Moved to : {target}")