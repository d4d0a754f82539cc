# topmark:header:start
#
#   project      : PrintfKit
#   file         : cursor.py
#   file_relpath : src/printfkit/engine/cursor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Argument cursor: which argument a directive reads.

Sequential directives read the argument at the cursor and advance it. An
explicit ``[n]`` on the directive itself jumps the cursor: subsequent sequential
directives continue after argument ``n``. ``*[n]`` width and precision specs
read argument ``n`` without moving the cursor.

Reading past the end never raises `IndexError`; it returns
``Err(MissingArgument(index))``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from printfkit.core.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Sequence

    from printfkit.core.result import Result


@dataclass(frozen=True)
class MissingArgument:
    """No argument exists at ``index`` (0-based)."""

    index: int


class ArgCursor:
    """Per-render view over the argument list.

    Attributes:
        args (tuple[object, ...]): The arguments, read-only.
        next_index (int): Position read by the next sequential directive.
        reordered (bool): True once any explicit index was used.
    """

    def __init__(self, args: Sequence[object]) -> None:
        self.args: tuple[object, ...] = tuple(args)
        self.next_index: int = 0
        self.reordered: bool = False
        self._used: set[int] = set()

    def next_arg(self) -> Result[object, MissingArgument]:
        """Read the argument at the cursor and advance by one."""
        index: int = self.next_index
        if index >= len(self.args):
            return Err(MissingArgument(index))
        self.next_index = index + 1
        self._used.add(index)
        return Ok(self.args[index])

    def arg_at(self, index: int, *, attach: bool = False) -> Result[object, MissingArgument]:
        """Read the argument at an absolute position.

        Args:
            index (int): 0-based position.
            attach (bool): True when the directive formats this argument itself;
                the cursor then continues after ``index``.

        Returns:
            Result[object, MissingArgument]: The argument, or the missing position.
        """
        self.reordered = True
        if attach:
            self.next_index = min(index + 1, len(self.args))
        if index < 0 or index >= len(self.args):
            return Err(MissingArgument(index))
        self._used.add(index)
        return Ok(self.args[index])

    def skip(self, explicit_index: int | None = None) -> None:
        """Consume the argument a failed directive would have formatted."""
        if explicit_index is None:
            self.next_arg()
        else:
            self.arg_at(explicit_index, attach=True)

    def unused(self) -> list[object]:
        """Return the arguments never read, in order."""
        return [a for i, a in enumerate(self.args) if i not in self._used]
