"""Resolve ``module:ClassName`` command line targets."""

import dataclasses
import importlib
from typing import Any

import click

from ..shapes import zero_instance


def load_target(target: str) -> Any:
    """Import a dataclass and return an instance of it to bind.

    Args:
        target: ``module:attribute`` path. The attribute may be a dataclass,
            instantiated with zero values, or a dataclass instance.

    Returns:
        Dataclass instance.

    Raises:
        click.BadParameter: If the target cannot be imported or is not a dataclass.
    """
    module_name, _, attr = target.partition(":")
    if not module_name or not attr:
        raise click.BadParameter(f"expected module:ClassName, got {target!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import {module_name}: {e}") from e

    obj = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise click.BadParameter(f"{module_name} has no attribute {attr}") from e

    if not dataclasses.is_dataclass(obj):
        raise click.BadParameter(f"{target} is not a dataclass")
    if isinstance(obj, type):
        return zero_instance(obj)
    return obj
