"""Unit tests for host value decoding."""
from __future__ import annotations

import enum

import pytest

from prqlbind.schema.dialect import Dialect
from prqlbind.schema.values import (
    DecodeError,
    decode_bool,
    decode_optional_symbol,
    decode_symbol,
)


class Color(enum.Enum):
    RED = "red"
    ONE = 1


@pytest.mark.parametrize("value", [True, False])
def test_bool_accepts_booleans(value):
    assert decode_bool(value) is value


@pytest.mark.parametrize("value", [1, 0, "true", "false", None, 1.0, []])
def test_bool_rejects_non_booleans(value):
    with pytest.raises(DecodeError) as exc_info:
        decode_bool(value)
    assert exc_info.value.expected == "boolean"
    assert exc_info.value.value == value


def test_symbol_accepts_strings_and_string_enums():
    assert decode_symbol("postgres") == "postgres"
    assert decode_symbol(Color.RED) == "red"
    assert decode_symbol(Dialect.SQLITE) == "sqlite"


@pytest.mark.parametrize("value", [None, 3, True, Color.ONE, b"postgres"])
def test_symbol_rejects_other_values(value):
    with pytest.raises(DecodeError):
        decode_symbol(value)


def test_optional_symbol():
    assert decode_optional_symbol(None) is None
    assert decode_optional_symbol("duck_db") == "duck_db"
    with pytest.raises(DecodeError):
        decode_optional_symbol(42)
