"""Generate forwarding method bodies for resolver wrappers.

A resolver method returns the data holder's value converted to its wire
type ("boxing"):

  ID       -> ID(value)
  Time     -> Time(value)
  str/int  -> value
  objects  -> FolderResolver(value)

Values that the data holder keeps as Optional are guarded so an absent
value stays absent. Lists are rebuilt element by element, each element
boxed with its own nullability.
"""

from __future__ import annotations

from .definitions import FieldDef
from .leaves import ID_WIRE, TIME_WIRE
from .naming import HOLDER_ATTR
from .normalizer import Mode, TypeLevel, render_type, storage_is_optional
from .writer import SourceWriter

HOLDER_REF = f"self.{HOLDER_ATTR}"


def _loop_var(depth: int) -> str:
    return "itm" if depth == 0 else f"itm{depth}"


def box(expr: str, level: TypeLevel, depth: int = 0) -> str:
    """Return the expression converting `expr` from storage to wire form."""
    if level.element is not None:
        var = _loop_var(depth)
        item = box(var, level.element, depth + 1)
        if item == var:
            return f"list({expr})"
        return f"[{item} for {var} in {expr}]"

    leaf = level.leaf_type
    if leaf.wire == ID_WIRE:
        boxed = f"{ID_WIRE}({expr})"
    elif leaf.wire == TIME_WIRE:
        boxed = f"{TIME_WIRE}({expr})"
    elif leaf.is_primitive:
        return expr
    else:
        boxed = f"{leaf.wire}({expr})"

    if storage_is_optional(level):
        return f"{boxed} if {expr} is not None else None"
    return boxed


def gen_resolver(w: SourceWriter, fld: FieldDef) -> None:
    """Write the forwarding method for a field without arguments."""
    w.p("def ", fld.attr, "(self) -> ", render_type(fld.type, Mode.WIRE), ":")
    with w.indented():
        if fld.description:
            w.doc(fld.description)
        w.p("return ", box(f"{HOLDER_REF}.{fld.attr}", fld.type))
