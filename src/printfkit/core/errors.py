# topmark:header:start
#
#   project      : PrintfKit
#   file         : errors.py
#   file_relpath : src/printfkit/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception hierarchy for PrintfKit.

Template problems never raise: the engine renders them as inline error tokens
(see [`printfkit.engine.tokens`][]). The exceptions below cover the remaining
failure channels:

- `Panic`: raised by [`printfkit.core.panic.panic`][] and by misuse of the
  option/result containers (unwrapping an absent or failed value).
- `PolicyConfigError`: a configuration file could not be read or validated.
"""

from __future__ import annotations

import traceback
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from printfkit.core.display import Rerror, WriterSync
    from printfkit.core.option import Option
    from printfkit.core.result import Result


class PrintfkitError(Exception):
    """Base class for all PrintfKit errors."""


class PolicyConfigError(PrintfkitError):
    """A policy configuration source is missing, malformed or invalid."""


class Panic(PrintfkitError):
    """Unrecoverable abort carrying a diagnostic message or an arbitrary value.

    `Panic` also implements the `Rerror` protocol so it can be rendered through
    the `%?` verb and walked as an error chain.

    Attributes:
        value (object): The payload passed to `panic()`. For string payloads this is
            the formatted message.
    """

    value: object

    def __init__(self, value: object) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return str(self.value)

    def fmt(self, f: WriterSync) -> Result[None, Exception]:
        """Write the panic message to ``f``.

        Args:
            f (WriterSync): Byte sink receiving the UTF-8 encoded message.

        Returns:
            Result[None, Exception]: ``Ok(None)`` on success, ``Err(exc)`` if the sink
            raised.
        """
        from printfkit.core.result import Err, Ok

        try:
            f.write(str(self).encode("utf-8"))
        except Exception as exc:
            return Err(exc)
        return Ok(None)

    def source(self) -> Option[Rerror]:
        """Return the chained cause when it is itself displayable."""
        from printfkit.core.display import Rerror
        from printfkit.core.option import Nothing, Some

        cause: BaseException | None = self.__cause__ or self.__context__
        if isinstance(cause, Rerror):
            return Some(cause)
        return Nothing()

    def stack(self) -> Option[str]:
        """Return the formatted traceback once the panic has been raised."""
        from printfkit.core.option import Nothing, Some

        if self.__traceback__ is None:
            return Nothing()
        return Some("".join(traceback.format_tb(self.__traceback__)))
