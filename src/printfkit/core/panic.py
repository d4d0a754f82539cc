# topmark:header:start
#
#   project      : PrintfKit
#   file         : panic.py
#   file_relpath : src/printfkit/core/panic.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Abort with a formatted message or an arbitrary value.

```python
from printfkit import panic

panic("expected %d items, got %d", 3, 2)   # raises Panic("expected 3 items, got 2")
panic(ValueError("bad input"))             # raises the ValueError itself
panic(123)                                 # raises Panic(123)
```
"""

from __future__ import annotations

from typing import NoReturn

from printfkit.core.errors import Panic
from printfkit.engine.assembler import sprintf


def panic(value: object, *args: object) -> NoReturn:
    """Raise ``value``.

    Args:
        value (object): A format string (rendered with ``args`` and raised as
            `Panic`), an exception (raised as is) or any other value (wrapped in
            `Panic`).
        *args (object): Arguments for the format string.

    Raises:
        Panic: For string and non-exception payloads.
        BaseException: ``value`` itself when it is an exception.
    """
    if isinstance(value, str):
        raise Panic(sprintf(value, args))
    if isinstance(value, BaseException):
        raise value
    raise Panic(value)
