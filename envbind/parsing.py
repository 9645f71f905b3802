"""Scalar literal parsers for integers, floats and durations."""

import re
import struct
from datetime import timedelta
from typing import Tuple

_FLOAT32_MAX = 3.4028234663852886e38

_NANOSECOND = 1
_MICROSECOND = 1000 * _NANOSECOND
_MILLISECOND = 1000 * _MICROSECOND
_SECOND = 1000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE

_DURATION_UNITS = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND,
    "µs": _MICROSECOND,  # micro sign
    "μs": _MICROSECOND,  # greek mu
    "ms": _MILLISECOND,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}
_DURATION_PART = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")
_MAX_DURATION = (1 << 63) - 1


def _syntax_error(value: str) -> ValueError:
    return ValueError(f'parsing "{value}": invalid syntax')


def _range_error(value: str) -> ValueError:
    return ValueError(f'parsing "{value}": value out of range')


def _split_base(digits: str) -> Tuple[str, int]:
    lowered = digits[:2].lower()
    if lowered == "0x":
        return digits[2:], 16
    if lowered == "0o":
        return digits[2:], 8
    if lowered == "0b":
        return digits[2:], 2
    if len(digits) > 1 and digits[0] == "0":
        return digits[1:], 8
    return digits, 10


def _parse_magnitude(value: str, digits: str) -> int:
    if not digits or digits != digits.strip():
        raise _syntax_error(value)
    body, base = _split_base(digits)
    if not body or body[0] in "+-_" or body != body.strip() or not body.isascii():
        raise _syntax_error(value)
    try:
        return int(body, base)
    except ValueError:
        raise _syntax_error(value) from None


def parse_int(value: str, bits: int = 64) -> int:
    """Parse a signed integer with base prefix detection.

    ``0x``, ``0o`` and ``0b`` prefixes select the base, a leading ``0``
    selects octal, underscores may separate digits.

    Args:
        value: Literal to parse.
        bits: Bit width the result must fit in.

    Returns:
        Parsed integer.

    Raises:
        ValueError: On invalid syntax or when the value is out of range.
    """
    negative = value[:1] == "-"
    digits = value[1:] if value[:1] in "+-" and value else value
    magnitude = _parse_magnitude(value, digits)
    result = -magnitude if negative else magnitude
    limit = 1 << (bits - 1)
    if not -limit <= result < limit:
        raise _range_error(value)
    return result


def parse_uint(value: str, bits: int = 64) -> int:
    """Parse an unsigned integer; signs are rejected.

    Raises:
        ValueError: On invalid syntax or when the value is out of range.
    """
    result = _parse_magnitude(value, value)
    if result >= 1 << bits:
        raise _range_error(value)
    return result


def parse_float(value: str, bits: int = 64) -> float:
    """Parse a float, rounding to single precision when ``bits`` is 32.

    Raises:
        ValueError: On invalid syntax or when the value is out of range.
    """
    if not value or value != value.strip():
        raise _syntax_error(value)
    try:
        result = float(value)
    except ValueError:
        raise _syntax_error(value) from None
    if bits == 32:
        if abs(result) > _FLOAT32_MAX and abs(result) != float("inf"):
            raise _range_error(value)
        result = struct.unpack("f", struct.pack("f", result))[0]
    return result


def parse_duration(value: str) -> timedelta:
    """Parse a duration string such as ``"300ms"``, ``"-1.5h"`` or ``"2h45m"``.

    A duration is a possibly signed sequence of decimal numbers, each with an
    optional fraction and a unit suffix. Valid units are ``ns``, ``us``
    (or ``µs``), ``ms``, ``s``, ``m`` and ``h``. Resolution below one
    microsecond is truncated.

    Args:
        value: Duration literal.

    Returns:
        Equivalent ``timedelta``.

    Raises:
        ValueError: If the literal is malformed or overflows.
    """
    rest = value
    negative = False
    if rest[:1] in ("-", "+") and rest:
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f"invalid duration {value!r}")

    total = 0
    while rest:
        match = _DURATION_PART.match(rest)
        whole, fraction, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not fraction:
            raise ValueError(f"invalid duration {value!r}")
        if not unit:
            raise ValueError(f"missing unit in duration {value!r}")
        if unit not in _DURATION_UNITS:
            # the unit runs until the next number
            raise ValueError(f"unknown unit {unit!r} in duration {value!r}")
        scale = _DURATION_UNITS[unit]
        total += int(whole or "0") * scale
        if fraction:
            total += int(fraction) * scale // 10 ** len(fraction)
        if total > _MAX_DURATION:
            raise ValueError(f"invalid duration {value!r}")
        rest = rest[match.end():]

    micro = total // _MICROSECOND
    return timedelta(microseconds=-micro if negative else micro)
