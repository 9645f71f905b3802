"""Usage reports listing the variables a structure reads."""

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console
from rich.table import Table

from .discovery import discover
from .options import Options


@dataclass
class VariableDoc:
    """One documented environment variable."""

    key: str
    alt: str
    field: str
    type_name: str
    default: str
    required: bool
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def describe(prefix: str, spec: Any, options: Optional[Options] = None) -> List[VariableDoc]:
    """Describe every variable ``spec`` binds.

    Args:
        prefix: Key prefix, may be empty.
        spec: Dataclass instance.
        options: Binding options.

    Returns:
        Variable documentation in discovery order.
    """
    options = options or Options()
    return [
        VariableDoc(
            key=info.key,
            alt=info.alt,
            field=info.name,
            type_name=info.field.type_name,
            default=info.default,
            required=info.is_required(options),
            description=str(info.tags.get("desc") or ""),
        )
        for info in discover(prefix, spec, options)
    ]


def render_table(docs: List[VariableDoc], console: Optional[Console] = None) -> None:
    """Print variable documentation as a table."""
    console = console or Console()
    table = Table(
        title="Environment Variables",
        show_header=True,
        header_style="bold magenta",
    )

    table.add_column("Key", justify="left", style="cyan", no_wrap=True)
    table.add_column("Type", justify="left", style="green")
    table.add_column("Default", justify="left")
    table.add_column("Required", justify="center")
    table.add_column("Description", justify="left")

    for doc in docs:
        key = f"{doc.key} ({doc.alt})" if doc.alt and doc.alt != doc.key else doc.key
        table.add_row(
            key,
            doc.type_name,
            doc.default,
            "yes" if doc.required else "",
            doc.description,
        )

    console.print(table)


def render_json(docs: List[VariableDoc]) -> str:
    return json.dumps([doc.to_dict() for doc in docs], indent=2)


def render_yaml(docs: List[VariableDoc]) -> str:
    return yaml.safe_dump([doc.to_dict() for doc in docs], sort_keys=False)
