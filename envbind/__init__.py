"""
envbind - Bind Environment Variables to Dataclasses

This package populates dataclass instances from environment variables. Field
names become upper-cased keys, optionally prefixed and split into words;
field metadata declares defaults, required variables, key overrides and
ignored fields. Values are converted to the declared field types, including
nested dataclasses, sequences, mappings, durations and user types that
convert themselves.

Example Usage:
    from dataclasses import dataclass

    from envbind import process, var

    @dataclass
    class Specification:
        debug: bool = False
        port: int = var(default="8080", value=0)
        user: str = var(required=True, value="")

    spec = Specification()
    process("myapp", spec)  # MYAPP_DEBUG, MYAPP_PORT, MYAPP_USER
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from .capabilities import BinaryUnmarshaler, Decoder, Setter, TextUnmarshaler
from .discovery import BindingDescriptor, discover, var
from .errors import (
    EnvBindError,
    InvalidMapEntryError,
    InvalidSpecificationError,
    MultipleErrors,
    ParseError,
    RequiredValueMissingError,
    UnknownVariableError,
)
from .options import Options
from .processor import (
    check_disallowed,
    check_disallowed_with_options,
    must_process,
    must_process_with_options,
    process,
    process_with_options,
)
from .shapes import (
    Float32,
    Int8,
    Int16,
    Int32,
    Int64,
    Uint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
)
from .sources import DotEnvSource, EnvSource, MappingSource, OsEnvironSource
from .usage import VariableDoc, describe

try:
    __version__ = version("envbind")
except PackageNotFoundError:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "BinaryUnmarshaler",
    "BindingDescriptor",
    "Decoder",
    "DotEnvSource",
    "EnvBindError",
    "EnvSource",
    "Float32",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "InvalidMapEntryError",
    "InvalidSpecificationError",
    "MappingSource",
    "MultipleErrors",
    "Options",
    "OsEnvironSource",
    "ParseError",
    "RequiredValueMissingError",
    "Setter",
    "TextUnmarshaler",
    "Uint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "UnknownVariableError",
    "VariableDoc",
    "check_disallowed",
    "check_disallowed_with_options",
    "describe",
    "discover",
    "must_process",
    "must_process_with_options",
    "process",
    "process_with_options",
    "var",
]
