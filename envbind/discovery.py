"""Field discovery: walks a dataclass instance and derives a lookup key per field.

Nested dataclasses are flattened into their own fields. A named nested field
prefixes its children with its own key, a field tagged ``embedded`` passes
the outer prefix through unchanged:

    @dataclass
    class Database:
        host: str = "localhost"

    @dataclass
    class Spec:
        db: Database = field(default_factory=Database)       # APP_DB_HOST
        base: Database = var(embedded=True, factory=Database)  # APP_HOST

Unset dataclass fields are allocated with zero values so they can be
populated; a type already being walked is left unset, which keeps
self-referencing structures finite.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from .capabilities import has_capability
from .errors import InvalidSpecificationError
from .naming import derive_key
from .options import Options, is_false, is_true
from .shapes import is_dataclass_type, shape_name, type_hints, unwrap_optional, zero_instance

logger = logging.getLogger(__name__)


def var(
    *,
    envconfig: Optional[str] = None,
    default: Optional[str] = None,
    required: Optional[bool] = None,
    ignored: Optional[bool] = None,
    split_words: Optional[bool] = None,
    desc: Optional[str] = None,
    embedded: Optional[bool] = None,
    value: Any = dataclasses.MISSING,
    factory: Any = dataclasses.MISSING,
    **kwargs: Any,
) -> Any:
    """Declare a dataclass field with binding metadata.

    ``default`` is the environment default string; the Python-side default
    of the attribute is ``value`` (or ``factory``).

    Args:
        envconfig: Key override, replaces the field name.
        default: Value used when the variable is unset.
        required: Fail when the variable is unset and has no default.
        ignored: Skip the field.
        split_words: Per-field override of word splitting.
        desc: Description shown in usage reports.
        embedded: Pass the outer prefix to nested fields.
        value: Python default of the attribute.
        factory: Python default factory of the attribute.
        **kwargs: Extra ``dataclasses.field`` arguments.

    Returns:
        A ``dataclasses.Field``.
    """
    tags = {
        "envconfig": envconfig,
        "default": default,
        "required": required,
        "ignored": ignored,
        "split_words": split_words,
        "desc": desc,
        "embedded": embedded,
    }
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata.update({name: tag for name, tag in tags.items() if tag is not None})
    return dataclasses.field(
        default=value, default_factory=factory, metadata=metadata, **kwargs
    )


@dataclass
class FieldRef:
    """Write-through handle to one attribute of a live dataclass instance."""

    owner: Any
    attr: str
    shape: Any

    def get(self) -> Any:
        return getattr(self.owner, self.attr)

    def set(self, value: Any) -> None:
        # frozen dataclasses are written the way their own __init__ does
        object.__setattr__(self.owner, self.attr, value)

    @property
    def type_name(self) -> str:
        return shape_name(self.shape)


@dataclass
class BindingDescriptor:
    """A discovered field with its lookup keys and metadata.

    Attributes:
        name: Declared field name.
        key: Fully qualified lookup key.
        alt: Upper-cased ``envconfig`` override, empty when unset.
        tags: Field metadata.
        field: Destination of the resolved value.
    """

    name: str
    key: str
    alt: str
    tags: Mapping[str, Any]
    field: FieldRef

    @property
    def default(self) -> str:
        default = self.tags.get("default")
        return "" if default is None else str(default)

    def is_required(self, options: Options) -> bool:
        required = self.tags.get("required")
        return is_true(required) or (options.required and not is_false(required))


def discover(prefix: str, spec: Any, options: Optional[Options] = None) -> List[BindingDescriptor]:
    """Gather binding descriptors for every bindable field of ``spec``.

    Args:
        prefix: Prefix of every key, may be empty.
        spec: Dataclass instance to bind.
        options: Binding options.

    Returns:
        Descriptors in field declaration order.

    Raises:
        InvalidSpecificationError: If ``spec`` is not a dataclass instance, its
            field types cannot be resolved, or a nested value refers back to
            an enclosing instance.
    """
    if spec is None or isinstance(spec, type) or not dataclasses.is_dataclass(spec):
        raise InvalidSpecificationError()
    infos = _gather(
        prefix, spec, options or Options(), frozenset({type(spec)}), frozenset({id(spec)})
    )
    logger.debug("Discovered %d variables on %s", len(infos), type(spec).__qualname__)
    return infos


def _gather(
    prefix: str,
    spec: Any,
    options: Options,
    lineage: FrozenSet[type],
    path: FrozenSet[int],
) -> List[BindingDescriptor]:
    try:
        hints: Dict[str, Any] = type_hints(type(spec))
    except (NameError, TypeError) as e:
        raise InvalidSpecificationError(
            f"cannot resolve field types of {type(spec).__qualname__}: {e}"
        ) from e

    infos: List[BindingDescriptor] = []
    for f in dataclasses.fields(spec):
        if f.name.startswith("_") or is_true(f.metadata.get("ignored")):
            continue

        shape = hints.get(f.name, f.type)
        target, _ = unwrap_optional(shape)
        ref = FieldRef(owner=spec, attr=f.name, shape=shape)
        value = ref.get()
        if value is None and is_dataclass_type(target) and target not in lineage:
            value = zero_instance(target)
            ref.set(value)

        split_tag = f.metadata.get("split_words")
        split = is_true(split_tag) or (options.split_words and not is_false(split_tag))
        alt = str(f.metadata.get("envconfig") or "").upper()
        info = BindingDescriptor(
            name=f.name,
            key=derive_key(f.name, prefix=prefix, alt=alt, split=split),
            alt=alt,
            tags=f.metadata,
            field=ref,
        )

        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            if not has_capability(type(value)):
                if id(value) in path:
                    raise InvalidSpecificationError(
                        f"field {f.name} refers back to an enclosing structure"
                    )
                inner_prefix = prefix if is_true(f.metadata.get("embedded")) else info.key
                infos.extend(
                    _gather(
                        inner_prefix,
                        value,
                        options,
                        lineage | {type(value)},
                        path | {id(value)},
                    )
                )
                continue

        infos.append(info)
    return infos
