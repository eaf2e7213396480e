"""Map GraphQL leaf types to (storage, wire) Python annotations.

The storage type is what a data holder keeps; the wire type is what a
resolver method hands to the execution engine. Both the declaration emitter
and the resolver body emitter read this table, never their own copies.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import GeneratorDefect
from .naming import resolver_name

# Introspection kinds
SCALAR = "SCALAR"
OBJECT = "OBJECT"
INTERFACE = "INTERFACE"
UNION = "UNION"
ENUM = "ENUM"
INPUT_OBJECT = "INPUT_OBJECT"
LIST = "LIST"
NON_NULL = "NON_NULL"

# Boxed wire types defined in the header of every generated module
ID_WIRE = "ID"
TIME_WIRE = "Time"
TIME_SCALAR = "Time"

# Builtin/reserved names that are never declared
KNOWN_TYPES: frozenset[str] = frozenset({
    "__Directive",
    "__DirectiveLocation",
    "__EnumValue",
    "__Field",
    "__InputValue",
    "__Schema",
    "__Type",
    "__TypeKind",
    "LIST",
    "String",
    "Float",
    "ID",
    "Int",
    "Boolean",
    TIME_SCALAR,
})

# Storage types held by value: a data holder never wraps them in Optional
PRIMITIVE_TYPES: frozenset[str] = frozenset({"str", "int", "float", "bool", "Any"})


@dataclass(frozen=True)
class Leaf:
    """A resolved named type."""

    name: str
    kind: str
    storage: str
    wire: str

    @property
    def is_primitive(self) -> bool:
        """Held by value and handed over unboxed."""
        return self.storage in PRIMITIVE_TYPES and self.wire == self.storage


# Named scalars with a fixed mapping: name -> (storage, wire)
LEAF_TYPES: dict[str, tuple[str, str]] = {
    "String": ("str", "str"),
    "Int": ("int", "int"),
    "Float": ("float", "float"),
    "Boolean": ("bool", "bool"),
    "ID": ("str", ID_WIRE),
    TIME_SCALAR: ("datetime.datetime", TIME_WIRE),
}


def map_leaf(name: str, kind: str) -> Leaf:
    """Resolve a named type reference to its storage and wire types."""
    if name in LEAF_TYPES:
        storage, wire = LEAF_TYPES[name]
        return Leaf(name, kind, storage, wire)
    if kind == ENUM:
        return Leaf(name, kind, "str", "str")
    if kind in (OBJECT, INTERFACE, UNION):
        return Leaf(name, kind, name, resolver_name(name))
    if kind == INPUT_OBJECT:
        return Leaf(name, kind, name, name)
    if kind == SCALAR:
        return Leaf(name, kind, "Any", "Any")
    raise GeneratorDefect(f"unknown type kind {kind!r} for leaf {name!r}")
