"""Normalize introspection type references into nested type levels.

An introspection type reference is a chain of wrappers ending in a named
type, e.g. for `[Person!]!`:

    {"kind": "NON_NULL", "ofType":
        {"kind": "LIST", "ofType":
            {"kind": "NON_NULL", "ofType":
                {"kind": "OBJECT", "name": "Person"}}}}

NON_NULL marks the current level; LIST opens a new level for its element.
The result for the example is two levels, both non-nullable, the inner one
ending in the Person leaf.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import GeneratorDefect, SchemaError
from .leaves import LIST, NON_NULL, Leaf, map_leaf


class Mode(Enum):
    """Which annotation to render for a type."""

    STORAGE = "storage"
    INPUT = "input"
    WIRE = "wire"


@dataclass(frozen=True)
class TypeLevel:
    """One level of a normalized type: a list of `element` or a `leaf`."""

    nullable: bool
    element: TypeLevel | None = None
    leaf: Leaf | None = None

    @property
    def is_list(self) -> bool:
        return self.element is not None

    @property
    def depth(self) -> int:
        """Number of list levels above the leaf."""
        return sum(1 for level in self.levels() if level.is_list)

    @property
    def leaf_type(self) -> Leaf:
        for level in self.levels():
            if level.leaf is not None:
                return level.leaf
        raise GeneratorDefect("type level chain does not end in a leaf")

    def levels(self) -> Iterator[TypeLevel]:
        """Yield this level and every nested element level, outermost first."""
        level: TypeLevel | None = self
        while level is not None:
            yield level
            level = level.element


def normalize(ref: dict[str, Any] | None, nullable: bool = True) -> TypeLevel:
    """Normalize an introspection type reference."""
    if not ref:
        raise SchemaError("type reference is truncated or missing")

    kind = ref["kind"]
    if kind == NON_NULL:
        return normalize(ref.get("ofType"), nullable=False)
    if kind == LIST:
        return TypeLevel(nullable=nullable, element=normalize(ref.get("ofType")))
    return TypeLevel(nullable=nullable, leaf=map_leaf(ref["name"], kind))


def storage_is_optional(level: TypeLevel) -> bool:
    """Whether a data holder keeps this level as Optional.

    Lists are never Optional (an empty list stands for an absent one) and
    primitives are held by value. Resolver bodies guard exactly the levels
    for which this returns True.
    """
    if not level.nullable or level.is_list:
        return False
    return not level.leaf_type.is_primitive


def _is_optional(level: TypeLevel, mode: Mode) -> bool:
    if mode is Mode.STORAGE:
        return storage_is_optional(level)
    return level.nullable


def render_type(level: TypeLevel, mode: Mode) -> str:
    """Render the Python annotation of a normalized type."""
    if level.element is not None:
        annotation = f"List[{render_type(level.element, mode)}]"
    else:
        leaf = level.leaf_type
        annotation = leaf.wire if mode is Mode.WIRE else leaf.storage

    if _is_optional(level, mode) and annotation != "Any":
        annotation = f"Optional[{annotation}]"
    return annotation
