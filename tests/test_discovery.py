"""Tests for field discovery and key derivation."""

from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from envbind.discovery import discover, var
from envbind.processor import process
from envbind.errors import InvalidSpecificationError
from envbind.options import Options


@dataclass
class Database:
    host: str = "localhost"
    port: int = 5432


@dataclass
class Embedded:
    enabled: bool = False
    embedded_port: int = var(desc="Port of the embedded server", value=0)


@dataclass
class Specification:
    port: int = 0
    user_name: str = ""
    MultiWordVar: str = ""
    NoSplit: str = var(split_words=False, value="")
    AutoSplit: str = var(split_words=True, value="")
    manual_override: str = var(envconfig="manual_override_1", value="")
    ignored_field: str = var(ignored=True, value="")
    _private: str = ""
    database: Database = field(default_factory=Database)
    embedded: Embedded = var(embedded=True, factory=Embedded)
    replica: Optional[Database] = None
    timeout_ptr: Optional[int] = None


@dataclass
class Node:
    name: str = ""
    next: Optional["Node"] = None


@dataclass
class Address:
    value: str = ""

    def set(self, raw: str) -> None:
        self.value = raw


@dataclass
class WithAddress:
    address: Address = field(default_factory=Address)


@dataclass
class Base:
    shared: str = ""


@dataclass
class Derived(Base):
    own: str = ""


@dataclass
class StringAnnotations:
    count: "int" = 0
    names: "List[str]" = field(default_factory=list)


def keys(infos):
    return [info.key for info in infos]


@pytest.mark.parametrize("spec", [None, Specification, {"port": 1}, object(), 42])
def test_invalid_specification(spec):
    with pytest.raises(InvalidSpecificationError):
        discover("app", spec)


def test_keys_in_declaration_order():
    infos = discover("app", Specification())
    assert keys(infos) == [
        "APP_PORT",
        "APP_USER_NAME",
        "APP_MULTIWORDVAR",
        "APP_NOSPLIT",
        "APP_AUTO_SPLIT",
        "APP_MANUAL_OVERRIDE_1",
        "APP_DATABASE_HOST",
        "APP_DATABASE_PORT",
        "APP_ENABLED",
        "APP_EMBEDDED_PORT",
        "APP_REPLICA_HOST",
        "APP_REPLICA_PORT",
        "APP_TIMEOUT_PTR",
    ]


def test_global_split_words_respects_field_override():
    infos = discover("app", Specification(), Options(split_words=True))
    found = keys(infos)
    assert "APP_MULTI_WORD_VAR" in found
    assert "APP_NOSPLIT" in found


def test_empty_prefix():
    assert keys(discover("", Database())) == ["HOST", "PORT"]


def test_alt_key_is_recorded_upper_cased():
    infos = {info.name: info for info in discover("app", Specification())}
    assert infos["manual_override"].alt == "MANUAL_OVERRIDE_1"
    assert infos["port"].alt == ""


def test_nested_optional_dataclass_is_allocated():
    spec = Specification()
    discover("app", spec)
    assert spec.replica == Database()


def test_optional_scalar_is_left_unset():
    spec = Specification()
    infos = {info.name: info for info in discover("app", spec)}
    assert spec.timeout_ptr is None
    assert infos["timeout_ptr"].field.get() is None


def test_descriptors_write_through_to_nested_instances():
    spec = Specification()
    infos = {info.key: info for info in discover("app", spec)}
    infos["APP_DATABASE_HOST"].field.set("db.internal")
    assert spec.database.host == "db.internal"


def test_inherited_fields_share_the_prefix():
    assert keys(discover("app", Derived())) == ["APP_SHARED", "APP_OWN"]


def test_self_reference_is_not_allocated():
    node = Node()
    assert keys(discover("app", node)) == ["APP_NAME", "APP_NEXT"]
    assert node.next is None


def test_existing_chain_is_walked():
    node = Node(name="a", next=Node(name="b"))
    assert keys(discover("app", node)) == ["APP_NAME", "APP_NEXT_NAME", "APP_NEXT_NEXT"]


def test_reference_cycle_is_rejected():
    node = Node(name="a")
    node.next = node
    with pytest.raises(InvalidSpecificationError):
        discover("app", node)


def test_dataclass_with_hook_is_a_leaf():
    infos = discover("app", WithAddress())
    assert keys(infos) == ["APP_ADDRESS"]


def test_string_annotations_are_resolved():
    infos = {info.name: info for info in discover("app", StringAnnotations())}
    assert infos["count"].field.shape is int
    assert infos["names"].field.shape == List[str]


def test_var_keeps_extra_metadata():
    @dataclass
    class Tagged:
        value: str = var(default="x", metadata={"owner": "ops"}, value="")

    info = discover("", Tagged())[0]
    assert info.tags["owner"] == "ops"
    assert info.default == "x"


def test_required_policy():
    @dataclass
    class Policy:
        plain: str = ""
        forced: str = var(required=True, value="")
        relaxed: str = var(required="false", value="")

    infos = {info.name: info for info in discover("", Policy())}
    assert not infos["plain"].is_required(Options())
    assert infos["plain"].is_required(Options(required=True))
    assert infos["forced"].is_required(Options())
    assert not infos["relaxed"].is_required(Options(required=True))


@dataclass
class Cache:
    size: int = 0
    set: bool = False


@dataclass
class WithCache:
    cache: Cache = field(default_factory=Cache)


def test_fields_named_like_hooks_are_walked(make_source):
    spec = WithCache()
    infos = discover("app", spec)
    assert keys(infos) == ["APP_CACHE_SIZE", "APP_CACHE_SET"]

    process("app", spec, source=make_source(APP_CACHE_SIZE="5", APP_CACHE_SET="true"))
    assert spec.cache == Cache(size=5, set=True)
