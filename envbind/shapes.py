"""Declared type inspection: sized numbers, optional unwrapping and zero values."""

import dataclasses
import typing
import types
from collections import abc
from datetime import timedelta
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


class Int8(int):
    bits = 8


class Int16(int):
    bits = 16


class Int32(int):
    bits = 32


class Int64(int):
    bits = 64


class Uint(int):
    bits = 64
    unsigned = True


class Uint8(Uint):
    bits = 8


class Uint16(Uint):
    bits = 16


class Uint32(Uint):
    bits = 32


class Uint64(Uint):
    bits = 64


class Float32(float):
    bits = 32


SEQUENCE_ORIGINS = (list, tuple, abc.Sequence, abc.MutableSequence)
MAPPING_ORIGINS = (dict, abc.Mapping, abc.MutableMapping)
_UNION_ORIGINS = (Union, getattr(types, "UnionType", Union))


def int_bits(tp: type) -> Tuple[int, bool]:
    """Return ``(bit width, unsigned)`` for an integer type; plain ``int`` is 64-bit signed."""
    return getattr(tp, "bits", 64), getattr(tp, "unsigned", False)


def unwrap_optional(tp: Any) -> Tuple[Any, bool]:
    """Split ``Optional[X]`` into ``(X, True)``; other types give ``(tp, False)``."""
    if typing.get_origin(tp) in _UNION_ORIGINS:
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(args) == 1 and len(typing.get_args(tp)) == 2:
            return args[0], True
    return tp, False


def strip_annotated(tp: Any) -> Any:
    """Drop ``Annotated`` extras from a type."""
    while typing.get_origin(tp) is typing.Annotated:
        tp = typing.get_args(tp)[0]
    return tp


def is_dataclass_type(tp: Any) -> bool:
    return isinstance(tp, type) and dataclasses.is_dataclass(tp)


def type_hints(cls: type) -> Dict[str, Any]:
    """Resolve the field annotations of a dataclass."""
    return {
        name: strip_annotated(hint)
        for name, hint in typing.get_type_hints(cls, include_extras=True).items()
    }


def shape_name(tp: Any) -> str:
    """Readable name of a declared type for error messages."""
    if isinstance(tp, type) and not typing.get_args(tp):
        return tp.__qualname__
    return repr(tp).replace("typing.", "")


def zero_value(tp: Any, _seen: Optional[frozenset] = None) -> Any:
    """Build the zero value of a declared type.

    Args:
        tp: Declared type.

    Returns:
        The zero value, ``None`` when the type has none.
    """
    tp = strip_annotated(tp)
    inner, optional = unwrap_optional(tp)
    if optional:
        return None
    origin = typing.get_origin(tp)
    if origin is not None:
        if origin in MAPPING_ORIGINS:
            return {}
        if origin is tuple:
            return ()
        if origin in SEQUENCE_ORIGINS:
            return []
        return None
    if not isinstance(tp, type):
        return None
    if is_dataclass_type(tp):
        return zero_instance(tp, _seen)
    if issubclass(tp, Enum):
        return None
    if issubclass(tp, bool):
        return False
    if issubclass(tp, timedelta):
        return timedelta(0)
    if issubclass(tp, (int, float, str, bytes, bytearray, list, tuple, dict)):
        return tp()
    try:
        return tp()
    except TypeError:
        return None


def zero_instance(cls: type, _seen: Optional[frozenset] = None) -> Any:
    """Instantiate a dataclass, filling init fields that have no default with zero values.

    Args:
        cls: Dataclass type.

    Returns:
        New instance, or ``None`` if ``cls`` refers to itself through a
        required field.
    """
    seen = _seen or frozenset()
    if cls in seen:
        return None
    seen = seen | {cls}
    hints = type_hints(cls)
    kwargs = {}
    for field in dataclasses.fields(cls):
        if not field.init:
            continue
        if (
            field.default is not dataclasses.MISSING
            or field.default_factory is not dataclasses.MISSING
        ):
            continue
        kwargs[field.name] = zero_value(hints.get(field.name, Any), seen)
    return cls(**kwargs)
