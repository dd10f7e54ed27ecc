# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the indentation-aware code emitter."""

from declgen.codegen import INDENT_WIDTH, CodeEmitter


def test_empty_emitter_has_empty_result() -> None:
    assert CodeEmitter().result() == ""


def test_lines_are_indented_by_four_spaces_per_level() -> None:
    emitter = CodeEmitter()
    emitter.append_line("a")
    emitter.indent()
    emitter.append_line("b")
    emitter.indent()
    emitter.append_line("c")
    assert emitter.result() == "a\n    b\n        c\n"
    assert INDENT_WIDTH == 4


def test_de_indent_below_zero_is_ignored() -> None:
    emitter = CodeEmitter()
    emitter.indent()
    emitter.append_line("x")
    emitter.de_indent()
    emitter.de_indent()
    emitter.append_line("y")
    assert emitter.result() == "    x\ny\n"
    assert emitter.level == 0


def test_blank_line_ignores_indentation() -> None:
    emitter = CodeEmitter()
    emitter.indent()
    emitter.blank_line()
    assert emitter.result() == "\n"


def test_result_does_not_drain() -> None:
    emitter = CodeEmitter()
    emitter.append_line("first")
    assert emitter.result() == "first\n"
    emitter.append_line("second")
    assert emitter.result() == "first\nsecond\n"
