# topmark:header:start
#
#   project      : PrintfKit
#   file         : test_format_command.py
#   file_relpath : tests/cli/test_format_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `format` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from printfkit.cli.commands.format import interpret_escapes, parse_typed_argument
from printfkit.cli.errors import PrintfkitUsageError
from printfkit.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@parametrize(
    "raw, value",
    [
        ("255", 255),
        ("1.5", 1.5),
        ("true", True),
        ("null", None),
        ("[1, 2]", [1, 2]),
        ('"42"', "42"),
        ("hello", "hello"),
        ("", ""),
    ],
)
def test_parse_typed_argument(raw: str, value: object) -> None:
    assert parse_typed_argument(raw) == value


@parametrize(
    "raw, expected",
    [
        ("a\\tb", "a\tb"),
        ("line\\n", "line\n"),
        ("\\x41\\u00e9", "A\xe9"),
        ("caf\xe9 \u20ac", "caf\xe9 \u20ac"),
    ],
)
def test_interpret_escapes(raw: str, expected: str) -> None:
    assert interpret_escapes(raw) == expected


def test_interpret_escapes_rejects_malformed() -> None:
    with pytest.raises(PrintfkitUsageError):
        interpret_escapes("bad \\x4")


@mark_cli
def test_format_typed_arguments() -> None:
    result: Result = run_cli(["format", "Hello %s, you are %d", "World", "42"])
    assert_SUCCESS(result)
    assert result.output == "Hello World, you are 42"


@mark_cli
def test_format_raw_arguments() -> None:
    result: Result = run_cli(["format", "--raw", "%d", "42"])
    assert_SUCCESS(result)
    assert result.output == "%!(BAD TYPE 'd' str)"


@mark_cli
def test_format_spreads_json_array() -> None:
    result: Result = run_cli(["format", "%<3d", "[1, 2]"])
    assert_SUCCESS(result)
    assert result.output == "[   1,   2 ]"


@mark_cli
def test_format_newline_and_escapes() -> None:
    result: Result = run_cli(["format", "-n", "a\\tb"])
    assert_SUCCESS(result)
    assert result.output == "a\tb\n"

    result = run_cli(["format", "--no-escapes", "a\\tb"])
    assert_SUCCESS(result)
    assert result.output == "a\\tb"


@mark_cli
def test_format_writes_utf8() -> None:
    result: Result = run_cli(["format", "%c%s", "128512", "\xe9"])
    assert_SUCCESS(result)
    assert result.stdout_bytes == "\U0001f600\xe9".encode()


@mark_cli
def test_format_tokens_do_not_fail_by_default() -> None:
    result: Result = run_cli(["format", "%d"])
    assert_SUCCESS(result)
    assert result.output == "%!(MISSING 'd')"


@mark_cli
def test_format_strict_exit_code() -> None:
    result: Result = run_cli(["format", "--strict", "%h", "1"])
    assert result.exit_code == ExitCode.FORMAT_ERROR
    assert "%!(BAD VERB 'h')" in result.output
    assert "1 error token(s)" in result.output


@mark_cli
def test_format_verbose_lists_tokens() -> None:
    result: Result = run_cli(["-v", "format", "%d %s", "1"])
    assert_SUCCESS(result)
    assert "error token: %!(MISSING 's')" in result.output


@mark_cli
def test_format_bad_escape_is_usage_error() -> None:
    result: Result = run_cli(["format", "\\x4"])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "Invalid escape sequence" in result.output


@mark_cli
def test_format_uses_discovered_config(tmp_path: Path) -> None:
    (tmp_path / "printfkit.toml").write_text('hex_precision_unit = "chars"\n', encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["format", "%.1x", "\xe9!"])
    assert_SUCCESS(result)
    assert result.output == "c3a9"


@mark_cli
def test_format_uses_pyproject_table(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.printfkit]\nreport_extra_args = false\n", encoding="utf-8"
    )
    result: Result = run_cli_in(tmp_path, ["format", "%s", "a", "b"])
    assert_SUCCESS(result)
    assert result.output == "a"


@mark_cli
def test_format_explicit_config(tmp_path: Path, isolation: Path) -> None:
    config: Path = tmp_path / "custom.toml"
    config.write_text('spread_open = "("\nspread_close = ")"\n', encoding="utf-8")
    result: Result = run_cli(["format", "--config", str(config), "%<d", "[1, 2]"])
    assert_SUCCESS(result)
    assert result.output == "(1, 2)"


@mark_cli
def test_format_invalid_config_exit_code(tmp_path: Path) -> None:
    (tmp_path / "printfkit.toml").write_text("report_extra_args = 3\n", encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["format", "%s", "x"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "must be a boolean" in result.output


@mark_cli
def test_format_missing_config_exit_code(isolation: Path) -> None:
    result: Result = run_cli(["format", "--config", "absent.toml", "x"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
