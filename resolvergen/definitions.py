"""Build type and field definitions from introspection entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .leaves import INPUT_OBJECT, UNION
from .naming import args_name, python_name
from .normalizer import TypeLevel, normalize


@dataclass(frozen=True)
class FieldDef:
    """A field, argument or input field of a schema type."""

    name: str
    attr: str
    description: str
    type: TypeLevel
    parent: str = ""
    args: tuple[FieldDef, ...] = ()

    @property
    def args_name(self) -> str:
        return args_name(self.name)


@dataclass(frozen=True)
class TypeDef:
    """A named schema type with its fields in declaration order."""

    name: str
    kind: str
    description: str
    fields: tuple[FieldDef, ...] = ()
    possible_types: tuple[str, ...] = ()


def _new_field(entry: dict[str, Any], parent: str = "") -> FieldDef:
    args = tuple(_new_field(arg) for arg in entry.get("args") or ())
    return FieldDef(
        name=entry["name"],
        attr=python_name(entry["name"]),
        description=entry.get("description") or "",
        type=normalize(entry["type"]),
        parent=parent,
        args=args,
    )


def new_type(entry: dict[str, Any]) -> TypeDef:
    """Build a TypeDef from one `__schema.types` entry.

    Unions carry possible types instead of fields and input objects carry
    input fields, which become plain fields without arguments.
    """
    name = entry["name"]
    kind = entry["kind"]

    if kind == INPUT_OBJECT:
        raw_fields = entry.get("inputFields") or ()
    elif kind == UNION:
        raw_fields = ()
    else:
        raw_fields = entry.get("fields") or ()

    return TypeDef(
        name=name,
        kind=kind,
        description=entry.get("description") or "",
        fields=tuple(_new_field(f, parent=name) for f in raw_fields),
        possible_types=tuple(t["name"] for t in entry.get("possibleTypes") or ()),
    )
