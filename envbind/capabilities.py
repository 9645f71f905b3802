"""Self-conversion hooks a field type may implement.

Hooks are checked in this order: ``Decoder``, ``Setter``, ``TextUnmarshaler``,
``BinaryUnmarshaler``. Each hook mutates the instance it is called on; a
raised exception is reported as a parse error for the field.

Example:
    class LogLevel:
        def __init__(self):
            self.level = logging.INFO

        def set(self, value: str) -> None:
            self.level = logging.getLevelName(value.upper())
"""

import dataclasses
from typing import Any, Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class Decoder(Protocol):
    """Same semantics as ``Setter`` with higher precedence."""

    def decode(self, value: str) -> None:
        ...


@runtime_checkable
class Setter(Protocol):
    """Types that can set themselves from a string."""

    def set(self, value: str) -> None:
        ...


@runtime_checkable
class TextUnmarshaler(Protocol):
    """Types that parse themselves from text."""

    def unmarshal_text(self, text: bytes) -> None:
        ...


@runtime_checkable
class BinaryUnmarshaler(Protocol):
    """Types that parse themselves from raw bytes."""

    def unmarshal_binary(self, data: bytes) -> None:
        ...


def _encoded(method: Callable[[bytes], Any]) -> Callable[[str], Any]:
    return lambda value: method(value.encode("utf-8"))


_HOOKS = (
    (Decoder, "decode"),
    (Setter, "set"),
    (TextUnmarshaler, "unmarshal_text"),
    (BinaryUnmarshaler, "unmarshal_binary"),
)


def _hook_name(tp: Any) -> Optional[str]:
    # Dataclass fields with defaults are class attributes, not hooks.
    if not isinstance(tp, type) or tp.__module__ == "builtins":
        return None
    fields = {f.name for f in dataclasses.fields(tp)} if dataclasses.is_dataclass(tp) else set()
    for proto, name in _HOOKS:
        if name in fields or not callable(getattr(tp, name, None)):
            continue
        if issubclass(tp, proto):
            return name
    return None


def hook_for(tp: Any, instance: Any) -> Optional[Callable[[str], Any]]:
    """Return the bound self-conversion hook of ``instance``.

    Args:
        tp: Declared type of the field.
        instance: Object to bind the hook to.

    Returns:
        A callable taking the raw string, or ``None`` if ``tp`` has no hook.
    """
    name = _hook_name(tp)
    if name is None:
        return None
    method = getattr(instance, name)
    if name in ("unmarshal_text", "unmarshal_binary"):
        return _encoded(method)
    return method


def has_capability(tp: Any) -> bool:
    """Check whether a type takes over its own conversion.

    Builtin types never do, ``bytes.decode`` is not a hook.
    """
    return _hook_name(tp) is not None
