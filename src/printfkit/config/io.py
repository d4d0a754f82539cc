# topmark:header:start
#
#   project      : PrintfKit
#   file         : io.py
#   file_relpath : src/printfkit/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render `FormatPolicy` TOML sources.

Two on-disk sources are recognized:

- ``printfkit.toml``: policy keys at the top level of the document.
- ``pyproject.toml``: policy keys under ``[tool.printfkit]``.

Parsing and rendering are done with `tomlkit`. Validation errors raise
[`PolicyConfigError`][printfkit.core.errors.PolicyConfigError]; unknown keys are
logged and ignored.
"""

from __future__ import annotations

from dataclasses import fields, replace
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from printfkit.config.logging import get_logger
from printfkit.config.policy import DEFAULT_POLICY, FormatPolicy, HexPrecisionUnit
from printfkit.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_TABLE
from printfkit.core.errors import PolicyConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from printfkit.config.logging import PrintfkitLogger

TomlTable = dict[str, Any]

logger: PrintfkitLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``printfkit.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        PolicyConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise PolicyConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise PolicyConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_policy_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the policy table of a parsed document, or ``None`` if it has none.

    ``pyproject.toml`` keeps the policy under ``[tool.printfkit]``; any other file
    is treated as a dedicated config file whose top level is the policy.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool")
    if not isinstance(tool, dict):
        return None
    table: Any = cast("dict[str, Any]", tool).get(PYPROJECT_TOOL_TABLE)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def discover_config(directory: Path) -> Path | None:
    """Find the policy source for ``directory``.

    ``printfkit.toml`` wins over ``pyproject.toml``; the latter only counts when it
    carries a ``[tool.printfkit]`` table. The search does not walk up the tree.

    Args:
        directory (Path): Directory to search.

    Returns:
        Path | None: The config file to use, or ``None`` when there is none.
    """
    candidate: Path = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        logger.debug("Discovered config file %s", candidate)
        return candidate

    pyproject: Path = directory / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        try:
            table = extract_policy_table(pyproject, load_toml_dict(pyproject))
        except PolicyConfigError as e:
            logger.warning("Ignoring unreadable %s: %s", pyproject, e)
            return None
        if table is not None:
            logger.debug("Discovered [tool.%s] in %s", PYPROJECT_TOOL_TABLE, pyproject)
            return pyproject

    logger.debug("No config file found in %s", directory)
    return None


def _coerce_field(name: str, expected: object, value: object) -> object:
    """Validate one policy value against the type of its default."""
    if isinstance(expected, HexPrecisionUnit):
        unit: HexPrecisionUnit | None = (
            HexPrecisionUnit.parse(value) if isinstance(value, str) else None
        )
        if unit is None:
            allowed: str = ", ".join(HexPrecisionUnit.keys())
            raise PolicyConfigError(f"'{name}' must be one of: {allowed} (got {value!r})")
        return unit
    if isinstance(expected, bool):
        if not isinstance(value, bool):
            raise PolicyConfigError(f"'{name}' must be a boolean (got {value!r})")
        return value
    if isinstance(expected, int):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise PolicyConfigError(f"'{name}' must be a non-negative integer (got {value!r})")
        return value
    if not isinstance(value, str):
        raise PolicyConfigError(f"'{name}' must be a string (got {value!r})")
    return value


def policy_from_dict(
    table: Mapping[str, Any],
    *,
    base: FormatPolicy = DEFAULT_POLICY,
) -> FormatPolicy:
    """Build a `FormatPolicy` from a TOML table layered over ``base``.

    Args:
        table (Mapping[str, Any]): Policy keys and values.
        base (FormatPolicy): Policy providing the values of absent keys.

    Returns:
        FormatPolicy: The resulting policy.

    Raises:
        PolicyConfigError: If a known key carries a value of the wrong type.
    """
    known: dict[str, object] = {f.name: getattr(base, f.name) for f in fields(base)}
    changes: dict[str, Any] = {}
    for key, value in table.items():
        if key not in known:
            logger.warning("Ignoring unknown policy key '%s'", key)
            continue
        changes[key] = _coerce_field(key, known[key], value)
    return replace(base, **changes)


def load_policy(path: Path | None) -> FormatPolicy:
    """Load the policy stored at ``path`` (defaults when ``path`` is ``None``).

    Args:
        path (Path | None): ``printfkit.toml`` or ``pyproject.toml`` to read.

    Returns:
        FormatPolicy: The effective policy.

    Raises:
        PolicyConfigError: If the file cannot be read or validated.
    """
    if path is None:
        return DEFAULT_POLICY
    table: TomlTable | None = extract_policy_table(path, load_toml_dict(path))
    if table is None:
        logger.info("%s has no [tool.%s] table; using defaults", path, PYPROJECT_TOOL_TABLE)
        return DEFAULT_POLICY
    policy: FormatPolicy = policy_from_dict(table)
    logger.debug("Loaded policy from %s: %s", path, policy)
    return policy


def policy_to_toml(policy: FormatPolicy, *, for_pyproject: bool = False) -> str:
    """Render ``policy`` as a TOML document.

    Args:
        policy (FormatPolicy): Policy to render.
        for_pyproject (bool): If True, nest the keys under ``[tool.printfkit]``.

    Returns:
        str: TOML document text.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    if for_pyproject:
        tool = tomlkit.table(is_super_table=True)
        section = tomlkit.table()
        for key, value in policy.to_dict().items():
            section.add(key, value)
        tool.add(PYPROJECT_TOOL_TABLE, section)
        doc.add("tool", tool)
    else:
        for key, value in policy.to_dict().items():
            doc.add(key, value)
    return tomlkit.dumps(doc)
