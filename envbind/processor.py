"""Entry points binding environment variables into dataclass instances.

Example Usage:
    from dataclasses import dataclass
    from datetime import timedelta

    from envbind import process, var

    @dataclass
    class Settings:
        port: int = var(default="8080", value=0)
        debug: bool = False
        timeout: timedelta = var(default="30s", value=timedelta(0))
        users: list = var(desc="comma separated user names", factory=list)

    settings = Settings()
    process("app", settings)  # reads APP_PORT, APP_DEBUG, APP_TIMEOUT, APP_USERS
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, List, Optional

from .discovery import BindingDescriptor, discover
from .errors import EnvBindError, MultipleErrors, UnknownVariableError
from .options import Options
from .resolver import resolve
from .sources import EnvSource, OsEnvironSource

logger = logging.getLogger(__name__)


def process(prefix: str, spec: Any, source: Optional[EnvSource] = None) -> None:
    """Populate ``spec`` from environment variables.

    Args:
        prefix: Key prefix, may be empty.
        spec: Dataclass instance to populate.
        source: Environment to read from. Defaults to the process environment.

    Raises:
        EnvBindError: If the specification is invalid or a field cannot be bound.
    """
    process_with_options(prefix, spec, Options(), source=source)


def process_with_options(
    prefix: str,
    spec: Any,
    options: Options,
    source: Optional[EnvSource] = None,
) -> None:
    """Like ``process`` with explicit options.

    Sequential passes stop at the first failing field. Parallel passes try
    every field and raise ``MultipleErrors`` with all failures in the order
    they completed.
    """
    if source is None:
        source = OsEnvironSource()
    infos = discover(prefix, spec, options)

    if options.parallel:
        _process_parallel(infos, options, source)
        return

    for info in infos:
        resolve(info, options, source)


def _process_parallel(
    infos: List[BindingDescriptor], options: Options, source: EnvSource
) -> None:
    if not infos:
        return
    errors: List[BaseException] = []
    with ThreadPoolExecutor(max_workers=min(32, len(infos))) as executor:
        futures = [executor.submit(resolve, info, options, source) for info in infos]
        for future in as_completed(futures):
            error = future.exception()
            if error is not None:
                errors.append(error)
    if errors:
        raise MultipleErrors(errors)


def must_process(prefix: str, spec: Any, source: Optional[EnvSource] = None) -> None:
    """Same as ``process`` but terminates the process on failure."""
    must_process_with_options(prefix, spec, Options(), source=source)


def must_process_with_options(
    prefix: str,
    spec: Any,
    options: Options,
    source: Optional[EnvSource] = None,
) -> None:
    """Like ``must_process`` with explicit options.

    Raises:
        SystemExit: With status 1 if binding fails.
    """
    try:
        process_with_options(prefix, spec, options, source=source)
    except EnvBindError as e:
        logger.critical(f"Failed to load configuration: {e}")
        raise SystemExit(1) from e


def check_disallowed(prefix: str, spec: Any, source: Optional[EnvSource] = None) -> None:
    """Check that no prefixed environment variable is unknown to ``spec``.

    With an empty prefix every variable in the environment must be known,
    so this is mostly meaningful with a prefix.

    Raises:
        UnknownVariableError: For the first unknown variable.
    """
    check_disallowed_with_options(prefix, spec, Options(), source=source)


def check_disallowed_with_options(
    prefix: str,
    spec: Any,
    options: Options,
    source: Optional[EnvSource] = None,
) -> None:
    """Like ``check_disallowed`` with explicit options."""
    if source is None:
        source = OsEnvironSource()
    known = {info.key for info in discover(prefix, spec, options)}

    if prefix:
        prefix = prefix.upper() + "_"

    for entry in source.list_all():
        if not entry.startswith(prefix):
            continue
        key = entry.split("=", 1)[0]
        if key not in known:
            raise UnknownVariableError(key)
