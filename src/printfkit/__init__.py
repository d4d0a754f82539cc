# topmark:header:start
#
#   project      : PrintfKit
#   file         : __init__.py
#   file_relpath : src/printfkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrintfKit: printf-style string formatting with in-band error reporting.

```python
import printfkit

printfkit.format("%[2]s %[1]s", "World", "Hello")   # 'Hello World'
printfkit.format("%05d|%-6s|%x", -42, "ab", 255)     # '-0042|ab    |0xff'
printfkit.format("%d")                               # "%!(MISSING 'd')"
```

Alongside the engine the package ships the value types it is built on:
`Some`/`Nothing` (optional values), `Ok`/`Err` (fallible results), the `Display`
protocol used by the ``%?`` verb and `panic()`.
"""

from __future__ import annotations

from printfkit.config.policy import DEFAULT_POLICY, FormatPolicy, HexPrecisionUnit
from printfkit.core.display import Display, FmtResult, Rerror, WriterSync
from printfkit.core.errors import Panic, PolicyConfigError, PrintfkitError
from printfkit.core.option import Nothing, Option, Some
from printfkit.core.panic import panic
from printfkit.core.result import Err, Ok, Result
from printfkit.engine.assembler import Rendering
from printfkit.ops import format, render, write  # noqa: A004

__all__ = [
    "DEFAULT_POLICY",
    "Display",
    "Err",
    "FmtResult",
    "FormatPolicy",
    "HexPrecisionUnit",
    "Nothing",
    "Ok",
    "Option",
    "Panic",
    "PolicyConfigError",
    "PrintfkitError",
    "Rendering",
    "Result",
    "Rerror",
    "Some",
    "WriterSync",
    "format",
    "panic",
    "render",
    "write",
]
