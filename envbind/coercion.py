"""String to value coercion for declared field types."""

import logging
import typing
from datetime import timedelta
from enum import Enum
from pathlib import PurePath
from typing import Any, Dict, List, Optional

from .capabilities import has_capability, hook_for
from .errors import InvalidMapEntryError
from .options import parse_bool
from .parsing import parse_duration, parse_float, parse_int, parse_uint
from .shapes import (
    MAPPING_ORIGINS,
    SEQUENCE_ORIGINS,
    Uint8,
    int_bits,
    is_dataclass_type,
    unwrap_optional,
    zero_instance,
    zero_value,
)

logger = logging.getLogger(__name__)

_NO_HOOK = object()


def coerce(value: str, tp: Any, current: Any = None) -> Any:
    """Convert a raw environment string into a value of the declared type.

    Self-conversion hooks on the type win over the built-in rules. Types
    without a rule are returned unchanged as ``current``.

    Args:
        value: Raw string.
        tp: Declared type.
        current: Value currently held by the destination.

    Returns:
        The converted value.

    Raises:
        ValueError: If the string cannot be converted.
    """
    target, optional = unwrap_optional(tp)
    if optional:
        return coerce(value, target, current)

    hooked = _coerce_with_hook(value, tp, current)
    if hooked is not _NO_HOOK:
        return hooked

    origin = typing.get_origin(tp)
    if origin is not None:
        args = typing.get_args(tp)
        if origin in MAPPING_ORIGINS:
            key_type, value_type = args if len(args) == 2 else (str, str)
            return _coerce_mapping(value, key_type, value_type)
        if origin in SEQUENCE_ORIGINS:
            if origin is tuple:
                if len(args) == 2 and args[1] is Ellipsis:
                    return tuple(_coerce_sequence(value, args[0]))
                logger.debug("Fixed size tuple %r is not supported", tp)
                return current
            return _coerce_sequence(value, args[0] if args else str)
        logger.debug("No coercion rule for %r", tp)
        return current

    if not isinstance(tp, type):
        logger.debug("No coercion rule for %r", tp)
        return current
    if issubclass(tp, Enum):
        return _coerce_enum(value, tp)
    if issubclass(tp, bool):
        return parse_bool(value)
    if issubclass(tp, timedelta):
        return parse_duration(value)
    if issubclass(tp, int):
        bits, unsigned = int_bits(tp)
        parsed = parse_uint(value, bits) if unsigned else parse_int(value, bits)
        return tp(parsed)
    if issubclass(tp, float):
        return tp(parse_float(value, getattr(tp, "bits", 64)))
    if issubclass(tp, str):
        return tp(value)
    if issubclass(tp, (bytes, bytearray)):
        return tp(value.encode("utf-8"))
    if issubclass(tp, PurePath):
        return tp(value)
    if tp in (list, tuple):
        return tp(_coerce_sequence(value, str))
    if tp is dict:
        return _coerce_mapping(value, str, str)

    logger.debug("No coercion rule for %s", tp.__qualname__)
    return current


def _coerce_with_hook(value: str, tp: Any, current: Any) -> Any:
    if not has_capability(tp):
        return _NO_HOOK
    if isinstance(current, tp):
        instance = current
    else:
        instance = zero_instance(tp) if is_dataclass_type(tp) else tp()
    hook_for(tp, instance)(value)
    return instance


def _coerce_sequence(value: str, item_type: Any) -> List[Any]:
    if item_type is Uint8:
        return [Uint8(b) for b in value.encode("utf-8")]
    if not value.strip():
        return []
    return [coerce(item, item_type, zero_value(item_type)) for item in value.split(",")]


def _coerce_mapping(value: str, key_type: Any, value_type: Any) -> Dict[Any, Any]:
    result: Dict[Any, Any] = {}
    if not value.strip():
        return result
    for pair in value.split(","):
        parts = pair.split(":")
        if len(parts) != 2:
            raise InvalidMapEntryError(pair)
        key = coerce(parts[0], key_type, zero_value(key_type))
        result[key] = coerce(parts[1], value_type, zero_value(value_type))
    return result


def _coerce_enum(value: str, tp: type) -> Optional[Enum]:
    if value in tp.__members__:
        return tp[value]
    for member in tp:
        if str(member.value) == value:
            return member
    raise ValueError(f"{value!r} is not a valid {tp.__qualname__}")
