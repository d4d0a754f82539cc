# topmark:header:start
#
#   project      : PrintfKit
#   file         : test_cursor.py
#   file_relpath : tests/engine/test_cursor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the argument cursor."""

from __future__ import annotations

from printfkit.core.result import Err, Ok
from printfkit.engine.cursor import ArgCursor, MissingArgument


def test_next_arg_advances() -> None:
    cursor = ArgCursor(["a", "b"])
    assert cursor.next_arg() == Ok("a")
    assert cursor.next_arg() == Ok("b")
    assert cursor.next_arg() == Err(MissingArgument(2))
    assert cursor.next_index == 2


def test_arg_at_without_attach_keeps_position() -> None:
    cursor = ArgCursor(["a", "b", "c"])
    assert cursor.arg_at(2) == Ok("c")
    assert cursor.next_index == 0
    assert cursor.reordered is True


def test_arg_at_with_attach_moves_cursor_after_index() -> None:
    cursor = ArgCursor(["a", "b", "c"])
    assert cursor.arg_at(0, attach=True) == Ok("a")
    assert cursor.next_arg() == Ok("b")


def test_arg_at_out_of_range_is_missing_and_clamps() -> None:
    cursor = ArgCursor(["a"])
    assert cursor.arg_at(5, attach=True) == Err(MissingArgument(5))
    assert cursor.next_index == 1
    assert 0 <= cursor.next_index <= len(cursor.args)


def test_unused_lists_unread_arguments() -> None:
    cursor = ArgCursor([1, 2, 3, 4])
    cursor.next_arg()
    cursor.arg_at(2)
    assert cursor.unused() == [2, 4]


def test_skip_consumes_sequential_or_explicit() -> None:
    cursor = ArgCursor(["a", "b", "c"])
    cursor.skip()
    assert cursor.next_index == 1
    cursor.skip(2)
    assert cursor.next_index == 3
    assert cursor.unused() == ["b"]


def test_arguments_may_be_read_many_times() -> None:
    cursor = ArgCursor(["x"])
    assert cursor.arg_at(0) == Ok("x")
    assert cursor.arg_at(0) == Ok("x")
    assert cursor.next_arg() == Ok("x")
