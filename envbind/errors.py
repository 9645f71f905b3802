"""Error types raised while binding environment variables."""

from typing import List, Optional


class EnvBindError(Exception):
    """Base binding error."""
    pass


class InvalidSpecificationError(EnvBindError):
    """Specification is not a dataclass instance."""

    def __init__(self, message: str = "specification must be a dataclass instance"):
        super().__init__(message)


class RequiredValueMissingError(EnvBindError):
    """Required key has no value and no default."""

    def __init__(self, key: str):
        super().__init__(f"required key {key} missing value")
        self.key = key


class InvalidMapEntryError(EnvBindError, ValueError):
    """Map item is not a single ``key:value`` pair."""

    def __init__(self, pair: str):
        super().__init__(f"invalid map item: {pair!r}")
        self.pair = pair


class ParseError(EnvBindError):
    """An environment value cannot be converted to the field's type.

    Attributes:
        key_name: Environment key the value was read from.
        field_name: Name of the dataclass field.
        type_name: Readable name of the field's declared type.
        value: Raw string value.
        err: Underlying conversion error.
    """

    def __init__(
        self,
        key_name: str,
        field_name: str,
        type_name: str,
        value: str,
        err: Optional[BaseException] = None,
    ):
        super().__init__(
            f"envbind.process: assigning {key_name} to {field_name}: "
            f"converting '{value}' to type {type_name}. details: {err}"
        )
        self.key_name = key_name
        self.field_name = field_name
        self.type_name = type_name
        self.value = value
        self.err = err


class MultipleErrors(EnvBindError):
    """Errors collected from a parallel binding pass."""

    def __init__(self, errors: List[BaseException]):
        super().__init__(f"multiple errors: [{', '.join(str(e) for e in errors)}]")
        self.errors = list(errors)


class UnknownVariableError(EnvBindError):
    """Prefixed environment variable does not match any known key."""

    def __init__(self, key: str):
        super().__init__(f"unknown environment variable {key}")
        self.key = key
