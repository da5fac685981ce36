"""Tests for identifier escaping."""

from __future__ import annotations

import pytest

from jsbind.elements import Variable, VarList
from jsbind.sanitize import GO_KEYWORDS, capitalize, is_capitalized, sanitize_name


def test_reserved_name_gets_suffix() -> None:
    assert sanitize_name("type") == "type_"
    assert Variable("type").sanitized() == Variable("type_")


def test_sanitizing_twice_is_a_no_op() -> None:
    once = VarList([Variable("type"), Variable("range"), Variable("x")]).sanitized()
    twice = once.sanitized()
    assert [var.name for var in twice] == ["type_", "range_", "x"]
    assert twice == once


@pytest.mark.parametrize("keyword", sorted(GO_KEYWORDS))
def test_every_go_keyword_is_escaped(keyword: str) -> None:
    assert sanitize_name(keyword) == keyword + "_"


def test_plain_names_are_untouched() -> None:
    assert sanitize_name("value") == "value"
    assert sanitize_name("Type") == "Type"


def test_sanitized_list_keeps_order_and_types() -> None:
    params = VarList([Variable("b", "string"), Variable("func"), Variable("a")])
    assert params.sanitized() == [
        Variable("b", "string"),
        Variable("func_"),
        Variable("a"),
    ]


def test_capitalize_only_touches_first_character() -> None:
    assert capitalize("fooBar") == "FooBar"
    assert capitalize("") == ""
    assert is_capitalized("Foo")
    assert not is_capitalized("foo")
    assert is_capitalized("$")
