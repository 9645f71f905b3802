"""Binding options and boolean tag parsing."""

from typing import Any

from pydantic import BaseModel, ConfigDict

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class Options(BaseModel):
    """Options that change default parsing.

    Attributes:
        split_words: Split camel-cased field names into underscore separated keys.
        required: Treat every field as required unless tagged ``required=False``.
        parallel: Resolve fields concurrently and report all errors together.
    """

    model_config = ConfigDict(frozen=True)

    split_words: bool = False
    required: bool = False
    parallel: bool = False


def parse_bool(value: str) -> bool:
    """Parse a boolean literal.

    Accepts ``1 t T TRUE true True`` and ``0 f F FALSE false False``.

    Args:
        value: Literal to parse.

    Returns:
        Parsed boolean.

    Raises:
        ValueError: If the literal is not recognised.
    """
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    raise ValueError(f'parsing "{value}": invalid syntax')


def is_true(tag: Any) -> bool:
    """Check whether a metadata tag is set to true."""
    if isinstance(tag, bool):
        return tag
    if not isinstance(tag, str):
        return False
    try:
        return parse_bool(tag)
    except ValueError:
        return False


def is_false(tag: Any) -> bool:
    """Check whether a metadata tag is explicitly set to false.

    Unset or unparsable tags are neither true nor false.
    """
    if isinstance(tag, bool):
        return not tag
    if not isinstance(tag, str):
        return False
    try:
        return not parse_bool(tag)
    except ValueError:
        return False
