"""
Configuration for the envbind command line tool.

Settings are read from ``ENVBIND_*`` variables with the binder itself;
command line flags override them.

Environment Variables:
    ENVBIND_LOG_LEVEL: Logging level (default: WARNING)
    ENVBIND_ENV_FILE: Optional ``.env`` file layered under the process environment
    ENVBIND_SPLIT_WORDS: Default for ``--split-words``
    ENVBIND_REQUIRED: Default for ``--required``
    ENVBIND_PARALLEL: Default for ``--parallel``
"""

from dataclasses import dataclass
from typing import Optional

from .discovery import var
from .options import Options
from .processor import process
from .sources import EnvSource

ENV_PREFIX = "ENVBIND"


@dataclass
class Settings:
    """Command line tool settings."""

    log_level: str = var(default="WARNING", desc="Logging level", value="WARNING")
    env_file: Optional[str] = var(desc="Env file read before the environment", value=None)
    split_words: bool = var(desc="Split camel-cased field names", value=False)
    required: bool = var(desc="Require every variable", value=False)
    parallel: bool = var(desc="Resolve variables concurrently", value=False)

    def options(self) -> Options:
        return Options(
            split_words=self.split_words,
            required=self.required,
            parallel=self.parallel,
        )


def load_settings(source: Optional[EnvSource] = None) -> Settings:
    """Load tool settings from the environment.

    Raises:
        EnvBindError: If a setting cannot be parsed.
    """
    settings = Settings()
    process(ENV_PREFIX, settings, source=source)
    return settings
