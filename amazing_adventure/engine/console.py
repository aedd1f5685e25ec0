"""
Console adapters implementing the GameConsole protocol.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

import click


class TerminalConsole:
    """Reads from stdin and writes through click.echo"""

    def __init__(self, stdin: TextIO | None = None):
        self._stdin = stdin if stdin is not None else sys.stdin

    def write(self, text: str) -> None:
        click.echo(text)

    def prompt(self, text: str) -> None:
        click.echo(text, nl=False)

    def read_line(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise EOFError("stdin closed")
        return line.rstrip("\r\n")


class ScriptedConsole:
    """Replays a fixed list of input lines and records all output.

    Used by tests and by ``--script`` runs. Raises EOFError once the
    script is exhausted.
    """

    def __init__(self, lines: Iterable[str], echo: bool = False):
        self._lines = list(lines)
        self._position = 0
        self.echo = echo
        self.output: list[str] = []

    def write(self, text: str) -> None:
        self.output.append(text)
        if self.echo:
            click.echo(text)

    def prompt(self, text: str) -> None:
        if self.echo:
            click.echo(text, nl=False)

    def read_line(self) -> str:
        if self._position >= len(self._lines):
            raise EOFError("script exhausted")
        line = self._lines[self._position]
        self._position += 1
        if self.echo:
            click.echo(line)
        return line

    @property
    def transcript(self) -> str:
        return "\n".join(self.output)
