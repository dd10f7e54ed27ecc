# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Indentation-aware text accumulator used by every renderer."""

from __future__ import annotations

# ###############
# Public Interface
# ###############

INDENT_WIDTH = 4


class CodeEmitter:
    """Accumulates rendered source lines while tracking the indent level.

    The emitter never raises: de-indenting at level zero is a no-op, and
    :meth:`result` may be called any number of times while appending
    continues.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._level = 0

    @property
    def level(self) -> int:
        """The current indent level (never negative)."""
        return self._level

    def indent(self) -> None:
        """Increase the indent level by one."""
        self._level += 1

    def de_indent(self) -> None:
        """Decrease the indent level by one, stopping at zero."""
        if self._level > 0:
            self._level -= 1

    def append_line(self, text: str) -> None:
        """Append *text* as one line, prefixed by the current indentation."""
        self._lines.append(" " * (self._level * INDENT_WIDTH) + text + "\n")

    def blank_line(self) -> None:
        """Append an empty line, ignoring the current indentation."""
        self._lines.append("\n")

    def result(self) -> str:
        """Return everything accumulated so far."""
        return "".join(self._lines)
