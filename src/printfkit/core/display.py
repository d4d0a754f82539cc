# topmark:header:start
#
#   project      : PrintfKit
#   file         : display.py
#   file_relpath : src/printfkit/core/display.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Display capability and byte-sink protocols.

A value participates in the `%?` verb by implementing `Display`: a single
`fmt()` method that renders the value into a byte sink and reports the outcome
as a [`Result`][printfkit.core.result.Result]. Any binary file object
(`io.BytesIO`, `sys.stdout.buffer`, ...) satisfies `WriterSync`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

from printfkit.core.result import Err, Ok

if TYPE_CHECKING:
    from printfkit.core.option import Option

FmtResult = Union[Ok[None], Err[Exception]]
"""Outcome of `Display.fmt()`."""


@runtime_checkable
class WriterSync(Protocol):
    """Synchronous byte sink: accepts a byte sequence, may raise."""

    def write(self, data: bytes, /) -> int | None:
        """Write ``data`` to the sink."""
        ...


@runtime_checkable
class Display(Protocol):
    """Capability to render a value into a byte sink."""

    def fmt(self, f: WriterSync) -> FmtResult:
        """Render ``self`` into ``f``."""
        ...


@runtime_checkable
class Rerror(Display, Protocol):
    """Displayable error that exposes its cause and stack."""

    def source(self) -> Option[Rerror]:
        """Return the underlying error, if any."""
        ...

    def stack(self) -> Option[str]:
        """Return a textual stack trace, if one was captured."""
        ...
