"""Indent-aware text buffer for generated source."""

from __future__ import annotations

import io
from collections.abc import Iterator
from contextlib import contextmanager

from .errors import GeneratorDefect

INDENT = "    "


class SourceWriter:
    """Accumulates generated lines.

    Output can be suppressed so a pass runs only for its side effects,
    e.g. collecting declared names before the real output pass.
    """

    def __init__(self) -> None:
        self._buffer = io.StringIO()
        self._depth = 0
        self.write_output = True

    @property
    def depth(self) -> int:
        return self._depth

    def p(self, *values: object) -> None:
        """Write one line made of the given values at the current indent."""
        if not self.write_output:
            return
        line = "".join(_format(value) for value in values)
        if line:
            self._buffer.write(INDENT * self._depth)
            self._buffer.write(line)
        self._buffer.write("\n")

    def doc(self, text: str) -> None:
        """Write a docstring holding the given description."""
        text = text.strip().replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
        lines = text.splitlines()
        if not lines:
            return
        if len(lines) == 1:
            self.p('"""', _close_quote(lines[0]), '"""')
            return
        self.p('"""', lines[0])
        for line in lines[1:]:
            self.p(line.rstrip())
        self.p('"""')

    def indent(self) -> None:
        self._depth += 1

    def dedent(self) -> None:
        if self._depth > 0:
            self._depth -= 1

    @contextmanager
    def indented(self) -> Iterator[None]:
        self.indent()
        try:
            yield
        finally:
            self.dedent()

    @contextmanager
    def suppressed(self) -> Iterator[None]:
        previous = self.write_output
        self.write_output = False
        try:
            yield
        finally:
            self.write_output = previous

    def getvalue(self) -> str:
        return self._buffer.getvalue()


def _format(value: object) -> str:
    # bool before int: bool is an int subclass
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    raise GeneratorDefect(f"unknown type in printer: {type(value).__name__}")


def _close_quote(line: str) -> str:
    # a trailing quote would merge with the closing triple quote
    if line.endswith('"'):
        return line + " "
    return line
