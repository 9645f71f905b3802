"""Tests for scalar literal parsing."""

import struct
from datetime import timedelta

import pytest

from envbind.options import is_false, is_true, parse_bool
from envbind.parsing import parse_duration, parse_float, parse_int, parse_uint


@pytest.mark.parametrize(
    "value, expected",
    [
        ("42", 42),
        ("-42", -42),
        ("+7", 7),
        ("0", 0),
        ("0x1F", 31),
        ("0o17", 15),
        ("010", 8),
        ("0b101", 5),
        ("1_000", 1000),
    ],
)
def test_parse_int(value, expected):
    assert parse_int(value) == expected


@pytest.mark.parametrize(
    "value", ["", "abc", " 1", "1 ", "-", "08", "0x", "1.5", "0x 1", "0b 1", "\u0661\u0662"]
)
def test_parse_int_invalid_syntax(value):
    with pytest.raises(ValueError, match="invalid syntax"):
        parse_int(value)


def test_parse_int_bit_width():
    assert parse_int("127", bits=8) == 127
    assert parse_int("-128", bits=8) == -128
    with pytest.raises(ValueError, match="out of range"):
        parse_int("128", bits=8)
    with pytest.raises(ValueError, match="out of range"):
        parse_int("9223372036854775808")


def test_parse_uint():
    assert parse_uint("255", bits=8) == 255
    with pytest.raises(ValueError, match="out of range"):
        parse_uint("256", bits=8)
    with pytest.raises(ValueError, match="invalid syntax"):
        parse_uint("-1")


def test_parse_float():
    assert parse_float("3.5") == 3.5
    assert parse_float("1e3") == 1000.0
    with pytest.raises(ValueError):
        parse_float("three")
    with pytest.raises(ValueError):
        parse_float("")


def test_parse_float32_rounds_and_checks_range():
    assert parse_float("0.1", bits=32) == struct.unpack("f", struct.pack("f", 0.1))[0]
    with pytest.raises(ValueError, match="out of range"):
        parse_float("1e39", bits=32)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1h30m", timedelta(seconds=5400)),
        ("300ms", timedelta(milliseconds=300)),
        ("-1.5h", -timedelta(hours=1.5)),
        ("+2s", timedelta(seconds=2)),
        ("0", timedelta(0)),
        ("1.5µs", timedelta(microseconds=1)),
        ("2h45m30.5s", timedelta(hours=2, minutes=45, seconds=30.5)),
        ("1500ns", timedelta(microseconds=1)),
    ],
)
def test_parse_duration(value, expected):
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", ["", "-", "1", "1x", ".s", "h", "1h30"])
def test_parse_duration_invalid(value):
    with pytest.raises(ValueError):
        parse_duration(value)


def test_parse_bool_literals():
    for literal in ("1", "t", "T", "TRUE", "true", "True"):
        assert parse_bool(literal) is True
    for literal in ("0", "f", "F", "FALSE", "false", "False"):
        assert parse_bool(literal) is False
    with pytest.raises(ValueError):
        parse_bool("yes")


def test_tag_truthiness():
    assert is_true("true") and is_true(True)
    assert is_false("false") and is_false(False)
    assert not is_true(None) and not is_false(None)
    assert not is_true("maybe") and not is_false("maybe")
