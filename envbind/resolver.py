"""Value resolution: environment lookup, defaults, required policy and coercion."""

import logging
from typing import Optional

from .coercion import coerce
from .discovery import BindingDescriptor
from .errors import ParseError, RequiredValueMissingError
from .options import Options
from .sources import EnvSource

logger = logging.getLogger(__name__)


def lookup_value(info: BindingDescriptor, source: EnvSource) -> Optional[str]:
    """Look up the primary key, then the ``envconfig`` key."""
    value = source.lookup(info.key)
    if value is None and info.alt:
        value = source.lookup(info.alt)
    return value


def resolve(info: BindingDescriptor, options: Options, source: EnvSource) -> None:
    """Resolve one descriptor and write the converted value to its field.

    Args:
        info: Descriptor to resolve.
        options: Binding options.
        source: Environment to read from.

    Raises:
        RequiredValueMissingError: If a required variable is unset without default.
        ParseError: If the value cannot be converted to the field's type.
    """
    value = lookup_value(info, source)
    if value is None:
        if not info.default:
            if info.is_required(options):
                raise RequiredValueMissingError(info.alt or info.key)
            logger.debug("Skipping %s, %s is not set", info.name, info.key)
            return
        value = info.default

    try:
        converted = coerce(value, info.field.shape, info.field.get())
    except Exception as e:
        raise ParseError(
            key_name=info.key,
            field_name=info.name,
            type_name=info.field.type_name,
            value=value,
            err=e,
        ) from e
    info.field.set(converted)
