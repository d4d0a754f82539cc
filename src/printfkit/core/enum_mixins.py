# topmark:header:start
#
#   project      : PrintfKit
#   file         : enum_mixins.py
#   file_relpath : src/printfkit/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enum with a stable machine key plus a human label and parse aliases.

`KeyedStrEnum` members are declared as ``(key, label[, aliases])`` tuples:

```python
from printfkit.core.enum_mixins import KeyedStrEnum

class Unit(KeyedStrEnum):
    BYTES = ("bytes", "Count UTF-8 bytes")
    CHARS = ("chars", "Count characters", ("characters",))

assert Unit("chars") is Unit.CHARS
assert Unit.parse("Characters") is Unit.CHARS
assert Unit.keys() == ("bytes", "chars")
```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Fold case and treat '-' and ' ' like '_'."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """`str` enum whose value is its key; label and aliases are attributes.

    Attributes:
        label (str): Human-readable description, shown by listing commands.
        aliases (tuple[str, ...]): Extra spellings accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Build a member from its ``(key, label, aliases)`` declaration.

        Args:
            key (str): Machine key, also the member value.
            label (str): Human-readable description.
            aliases (Iterable[str]): Alternative spellings for `parse()`.

        Returns:
            _KS: The new member.
        """
        member: _KS = str.__new__(cls, key)
        member._value_ = key
        member.label = label
        member.aliases = tuple(aliases)
        return member

    def __str__(self) -> str:
        return str(self.value)

    @property
    def key(self) -> str:
        """The machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        """Return the keys of all members, in declaration order."""
        return tuple(m.key for m in cls)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Look up a member by key, name or alias.

        Keys are compared exactly first, since they may be case-sensitive
        single characters. Names and aliases are then compared after folding
        case and mapping '-' and ' ' to '_'.

        Args:
            raw (str | None): User-supplied token.

        Returns:
            _KS | None: The member, or ``None`` when nothing matches.
        """
        if raw is None:
            return None
        exact: _KS | None = cls._value2member_map_.get(raw)  # type: ignore[assignment]
        if exact is not None:
            return exact
        wanted: str = _norm_token(raw)
        for member in cls:
            spellings: tuple[str, ...] = (member.name, *member.aliases)
            if any(_norm_token(s) == wanted for s in spellings):
                return member
        return None
