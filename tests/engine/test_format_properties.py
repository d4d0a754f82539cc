# topmark:header:start
#
#   project      : PrintfKit
#   file         : test_format_properties.py
#   file_relpath : tests/engine/test_format_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the format engine.

Generated templates and arguments are checked for:
1) literal-only templates render as themselves with ``%%`` collapsed,
2) well-formed templates with one matching argument per directive render
   without error tokens, deterministically,
3) a single directive never renders narrower than its requested width,
4) arbitrary directive-like noise renders to a string without raising.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from printfkit import format, render
from printfkit.engine.assembler import Rendering
from tests.strategies_printfkit import (
    DirectiveCase,
    s_directive,
    s_literal_template,
    s_template_with_args,
)

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(max_examples=200, deadline=None)
@given(template=s_literal_template())
def test_literal_template_is_identity(template: str) -> None:
    assert format(template) == template.replace("%%", "%")


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=200,
)
@given(sample=s_template_with_args())
def test_well_formed_templates_render_cleanly(sample: tuple[str, tuple[object, ...]]) -> None:
    template, args = sample
    first: Rendering = render(template, *args)
    assert first.ok, first.text
    assert render(template, *args) == first


@settings(deadline=None, max_examples=200)
@given(case=s_directive())
def test_width_is_a_minimum(case: DirectiveCase) -> None:
    text: str = format(case.text, case.argument)
    if case.width is not None:
        assert len(text) >= case.width


@settings(deadline=None, max_examples=100)
@given(value=st.integers(), width=st.integers(min_value=1, max_value=40))
def test_left_and_right_alignment_agree(value: int, width: int) -> None:
    right: str = format(f"%{width}d", value)
    left: str = format(f"%-{width}d", value)
    assert right.strip() == left.strip() == str(value)


@settings(deadline=None, max_examples=200)
@given(
    template=st.text(alphabet="%[]*.-+# <0123456789dxofsv", max_size=40),
    args=st.lists(st.integers(min_value=-(10**8), max_value=10**8), max_size=4),
)
def test_any_template_renders(template: str, args: list[int]) -> None:
    assert isinstance(format(template, *args), str)
