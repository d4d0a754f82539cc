# topmark:header:start
#
#   project      : PrintfKit
#   file         : option.py
#   file_relpath : src/printfkit/core/option.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Optional-value container: `Some` or `Nothing`.

Like [`printfkit.core.result`][], `Option[T]` is a closed sum of two frozen
dataclasses. Both variants are immutable values, so the container offers the
query and combinator methods only:

```python
from printfkit.core.option import Nothing, Some

assert Some(2).map(lambda v: v * 2) == Some(4)
assert Nothing().unwrap_or(7) == 7
```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar, Union

from printfkit.core.errors import Panic
from printfkit.core.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from printfkit.core.result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")

UNWRAP_NOTHING_MESSAGE: str = "Option does not contain a value!"


@dataclass(frozen=True, repr=False)
class Some(Generic[T]):
    """Present value."""

    value: T = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> bool:
        return True

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        return predicate(self.value)

    def is_none(self) -> bool:
        return False

    def expect(self, message: str) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fallback: Callable[[], T]) -> T:
        return self.value

    def map(self, callback: Callable[[T], Any]) -> Option[Any]:
        """Apply ``callback`` to the value.

        A callback that itself returns an option is not wrapped a second time.
        """
        mapped = callback(self.value)
        if isinstance(mapped, (Some, Nothing)):
            return mapped
        return Some(mapped)

    def map_or(self, default: U, callback: Callable[[T], U]) -> U:
        return callback(self.value)

    def map_or_else(self, fallback: Callable[[], U], callback: Callable[[T], U]) -> U:
        return callback(self.value)

    def ok_or(self, error: E) -> Result[T, E]:
        return Ok(self.value)

    def ok_or_else(self, error: Callable[[], E]) -> Result[T, E]:
        return Ok(self.value)

    def and_(self, other: Option[U]) -> Option[U]:
        return other

    def and_then(self, callback: Callable[[T], Option[U]]) -> Option[U]:
        return callback(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        if predicate(self.value):
            return self
        return Nothing()

    def or_(self, other: Option[T]) -> Some[T]:
        return self

    def or_else(self, callback: Callable[[], Option[T]]) -> Some[T]:
        return self

    def xor(self, other: Option[T]) -> Option[T]:
        if isinstance(other, Some):
            return Nothing()
        return self

    def contains(self, value: object) -> bool:
        return bool(self.value == value)

    def flatten(self) -> Option[Any]:
        if isinstance(self.value, (Some, Nothing)):
            return self.value
        return self


@dataclass(frozen=True, repr=False)
class Nothing:
    """Absent value."""

    def __repr__(self) -> str:
        return "Nothing"

    def is_some(self) -> bool:
        return False

    def is_some_and(self, predicate: Callable[[Any], bool]) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def expect(self, message: str) -> NoReturn:
        raise Panic(message)

    def unwrap(self) -> NoReturn:
        raise Panic(UNWRAP_NOTHING_MESSAGE)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fallback: Callable[[], T]) -> T:
        return fallback()

    def map(self, callback: Callable[[Any], Any]) -> Nothing:
        return self

    def map_or(self, default: U, callback: Callable[[Any], U]) -> U:
        return default

    def map_or_else(self, fallback: Callable[[], U], callback: Callable[[Any], U]) -> U:
        return fallback()

    def ok_or(self, error: E) -> Result[Any, E]:
        return Err(error)

    def ok_or_else(self, error: Callable[[], E]) -> Result[Any, E]:
        return Err(error())

    def and_(self, other: Option[U]) -> Nothing:
        return self

    def and_then(self, callback: Callable[[Any], Option[U]]) -> Nothing:
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> Nothing:
        return self

    def or_(self, other: Option[T]) -> Option[T]:
        return other

    def or_else(self, callback: Callable[[], Option[T]]) -> Option[T]:
        return callback()

    def xor(self, other: Option[T]) -> Option[T]:
        if isinstance(other, Some):
            return other
        return self

    def contains(self, value: object) -> bool:
        return False

    def flatten(self) -> Nothing:
        return self


Option = Union[Some[T], Nothing]
"""Either `Some[T]` or `Nothing`."""
