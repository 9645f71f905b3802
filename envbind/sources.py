"""Environment sources the binder reads from.

A source answers ``lookup(key)`` with the value or ``None`` when the key is
absent (an empty string is a present, empty value), and ``list_all()`` with
every variable as ``KEY=VALUE``.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Protocol, Union, runtime_checkable

from dotenv import dotenv_values

logger = logging.getLogger(__name__)


@runtime_checkable
class EnvSource(Protocol):
    """Read-only view of an environment."""

    def lookup(self, key: str) -> Optional[str]:
        ...

    def list_all(self) -> List[str]:
        ...


class MappingSource:
    """Environment backed by an in-memory mapping."""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values: Dict[str, str] = dict(values or {})

    def lookup(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def list_all(self) -> List[str]:
        return [f"{key}={value}" for key, value in self._values.items()]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._values)} variables)"


class OsEnvironSource:
    """The process environment, read live on every lookup."""

    def lookup(self, key: str) -> Optional[str]:
        return os.environ.get(key)

    def list_all(self) -> List[str]:
        return [f"{key}={value}" for key, value in os.environ.items()]


class DotEnvSource(MappingSource):
    """Variables from a ``.env`` file layered with the process environment.

    By default the process environment wins over the file, the same way
    ``load_dotenv`` leaves existing variables alone.
    """

    def __init__(
        self,
        path: Union[str, Path] = ".env",
        environ: Optional[Mapping[str, str]] = None,
        override: bool = False,
    ):
        """Initialize source.

        Args:
            path: Path of the ``.env`` file. A missing file contributes nothing.
            environ: Base environment. Defaults to ``os.environ``.
            override: Let the file win over the base environment.
        """
        self.path = Path(path)
        base = dict(os.environ if environ is None else environ)
        file_values: Dict[str, str] = {}
        if self.path.exists():
            # keys declared without a value load as None and are skipped
            file_values = {
                key: value
                for key, value in dotenv_values(self.path).items()
                if value is not None
            }
            logger.debug("Loaded %d variables from %s", len(file_values), self.path)
        else:
            logger.debug("No env file at %s", self.path)

        merged = {**base, **file_values} if override else {**file_values, **base}
        super().__init__(merged)


def default_source(env_file: Optional[Union[str, Path]] = None) -> EnvSource:
    """Return the process environment, layered over ``env_file`` when given."""
    if env_file:
        return DotEnvSource(env_file)
    return OsEnvironSource()
