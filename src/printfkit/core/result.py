# topmark:header:start
#
#   project      : PrintfKit
#   file         : result.py
#   file_relpath : src/printfkit/core/result.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fallible-result container: `Ok` or `Err`.

`Result[T, E]` is a closed sum of two frozen dataclasses. Each variant
implements every combinator for itself, so there is no shared flag to inspect
and callers can use structural pattern matching:

```python
match outcome:
    case Ok(value):
        ...
    case Err(error):
        ...
```

Unwrapping the wrong variant is a programming error and raises
[`Panic`][printfkit.core.errors.Panic]; an `Err` carrying an exception re-raises
that exception instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar, Union

from printfkit.core.errors import Panic

if TYPE_CHECKING:
    from collections.abc import Callable

    from printfkit.core.option import Option

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


def _abort(payload: object) -> NoReturn:
    """Raise ``payload`` itself when it is an exception, else wrap it in `Panic`."""
    if isinstance(payload, BaseException):
        raise payload
    raise Panic(payload)


@dataclass(frozen=True, repr=False)
class Ok(Generic[T]):
    """Successful outcome holding ``value``."""

    value: T = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        return predicate(self.value)

    def expect(self, message: str) -> T:
        return self.value

    def expect_err(self, message: str) -> NoReturn:
        raise Panic(message)

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        _abort(self.value)

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fallback: Callable[[Any], T]) -> T:
        return self.value

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        return other

    def and_then(self, callback: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return callback(self.value)

    def or_(self, other: Result[T, F]) -> Ok[T]:
        return self

    def or_else(self, callback: Callable[[Any], Result[T, F]]) -> Ok[T]:
        return self

    def map(self, callback: Callable[[T], U]) -> Ok[U]:
        return Ok(callback(self.value))

    def map_err(self, callback: Callable[[Any], F]) -> Ok[T]:
        return self

    def ok(self) -> Option[T]:
        from printfkit.core.option import Some

        return Some(self.value)

    def err(self) -> Option[Any]:
        from printfkit.core.option import Nothing

        return Nothing()


@dataclass(frozen=True, repr=False)
class Err(Generic[E]):
    """Failed outcome holding ``error``."""

    error: E = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def is_ok_and(self, predicate: Callable[[Any], bool]) -> bool:
        return False

    def expect(self, message: str) -> NoReturn:
        raise Panic(message)

    def expect_err(self, message: str) -> E:
        return self.error

    def unwrap(self) -> NoReturn:
        _abort(self.error)

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fallback: Callable[[E], T]) -> T:
        return fallback(self.error)

    def and_(self, other: Result[U, E]) -> Err[E]:
        return self

    def and_then(self, callback: Callable[[Any], Result[U, E]]) -> Err[E]:
        return self

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        return other

    def or_else(self, callback: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return callback(self.error)

    def map(self, callback: Callable[[Any], U]) -> Err[E]:
        return self

    def map_err(self, callback: Callable[[E], F]) -> Err[F]:
        return Err(callback(self.error))

    def ok(self) -> Option[Any]:
        from printfkit.core.option import Nothing

        return Nothing()

    def err(self) -> Option[E]:
        from printfkit.core.option import Some

        return Some(self.error)


Result = Union[Ok[T], Err[E]]
"""Either `Ok[T]` or `Err[E]`."""
