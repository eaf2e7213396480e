"""Emit Python declarations for each kind of schema type.

  OBJECT        data holder dataclass, resolver wrapper, forwarding methods
  INTERFACE     abstract class with one method per field, resolver wrapper
  UNION         storage alias, resolver wrapper with one result slot and
                one to_<type>() accessor per possible type
  INPUT_OBJECT  plain dataclass
  ENUM, SCALAR  nothing; referenced inline through their storage type

Fields with arguments get an argument struct, emitted once per synthesized
name within a run. Their resolver methods are written by hand.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .definitions import FieldDef, TypeDef
from .errors import GeneratorDefect
from .leaves import ENUM, INPUT_OBJECT, INTERFACE, KNOWN_TYPES, OBJECT, SCALAR, UNION
from .naming import HOLDER_ATTR, accessor_name, resolver_name
from .normalizer import Mode, render_type
from .resolvers import gen_resolver
from .writer import SourceWriter

logger = logging.getLogger(__name__)

ROOT_RESOLVER = "GqlResolver"


@dataclass
class GenerationRun:
    """State owned by one generation run."""

    writer: SourceWriter = field(default_factory=SourceWriter)
    root_types: frozenset[str] = frozenset()
    emitted_args: set[str] = field(default_factory=set)
    declared: list[str] = field(default_factory=list)
    argument_types: dict[str, str] = field(default_factory=dict)
    input_types: list[str] = field(default_factory=list)
    object_types: list[str] = field(default_factory=list)
    root_fields: dict[str, FieldDef] = field(default_factory=dict)

    def declare(self, name: str) -> None:
        if name not in self.declared:
            self.declared.append(name)

    def warn(self, msg: str, *args: object) -> None:
        # the suppressed pass would report everything twice
        if self.writer.write_output:
            logger.warning(msg, *args)


def _end_declaration(w: SourceWriter) -> None:
    w.p()
    w.p()


def _write_attributes(w: SourceWriter, fields: Iterable[FieldDef], mode: Mode) -> None:
    written = False
    for fld in fields:
        w.p(fld.attr, ": ", render_type(fld.type, mode))
        written = True
    if not written:
        w.p("pass")


def _class_header(w: SourceWriter, line: str, description: str) -> None:
    w.p(line)
    w.indent()
    if description:
        w.doc(description)
        w.p()


def _signature(fld: FieldDef) -> str:
    params = "self"
    if fld.args:
        params += f", args: {fld.args_name}"
    return f"{fld.attr}({params}) -> {render_type(fld.type, Mode.WIRE)}"


def gen_struct(run: GenerationRun, name: str, description: str,
               fields: Iterable[FieldDef], mode: Mode) -> None:
    """Write a dataclass with one attribute per field."""
    w = run.writer
    w.p("@dataclass")
    _class_header(w, f"class {name}:", description)
    _write_attributes(w, fields, mode)
    w.dedent()
    _end_declaration(w)
    run.declare(name)


def gen_resolver_struct(run: GenerationRun, t: TypeDef,
                        methods: Iterable[FieldDef] = ()) -> None:
    """Write the resolver wrapper holding a reference to the data holder."""
    w = run.writer
    name = resolver_name(t.name)
    w.p("@dataclass")
    _class_header(w, f"class {name}:", "")
    w.p(HOLDER_ATTR, ": ", t.name)
    for fld in methods:
        w.p()
        if fld.args:
            w.p("# ", _signature(fld), " is resolved by hand")
            continue
        gen_resolver(w, fld)
    w.dedent()
    _end_declaration(w)
    run.declare(name)


def gen_args(run: GenerationRun, fld: FieldDef) -> None:
    """Write the argument struct of a field unless one with its name exists."""
    name = fld.args_name
    if name in run.emitted_args:
        return
    run.emitted_args.add(name)
    run.argument_types[fld.name] = name
    gen_struct(run, name, "", fld.args, Mode.INPUT)


def _gen_field_args(run: GenerationRun, fields: Iterable[FieldDef]) -> None:
    for fld in fields:
        if fld.args:
            gen_args(run, fld)


def gen_object(run: GenerationRun, t: TypeDef) -> None:
    if t.name in run.root_types:
        for fld in t.fields:
            if fld.name in run.root_fields:
                run.warn("root field %s is declared twice, keeping the first", fld.name)
                continue
            run.root_fields[fld.name] = fld
        _gen_field_args(run, t.fields)
        return

    gen_struct(run, t.name, t.description, t.fields, Mode.STORAGE)
    gen_resolver_struct(run, t, t.fields)
    run.object_types.append(t.name)
    _gen_field_args(run, t.fields)


def gen_abstract(run: GenerationRun, name: str, description: str,
                 fields: Iterable[FieldDef]) -> None:
    """Write an abstract class with one method per field."""
    w = run.writer
    _class_header(w, f"class {name}(ABC):", description)
    first = True
    for fld in fields:
        if not first:
            w.p()
        first = False
        w.p("@abstractmethod")
        w.p("def ", _signature(fld), ":")
        with w.indented():
            if fld.description:
                w.doc(fld.description)
            else:
                w.p("...")
    if first:
        w.p("pass")
    w.dedent()
    _end_declaration(w)
    run.declare(name)


def gen_interface(run: GenerationRun, t: TypeDef) -> None:
    gen_abstract(run, t.name, t.description, t.fields)
    gen_resolver_struct(run, t)
    _gen_field_args(run, t.fields)


def gen_union(run: GenerationRun, t: TypeDef) -> None:
    w = run.writer
    members = ", ".join(f'"{name}"' for name in t.possible_types)
    w.p(t.name, " = Union[", members, "]")
    _end_declaration(w)
    run.declare(t.name)

    name = resolver_name(t.name)
    w.p("@dataclass")
    _class_header(w, f"class {name}:", t.description)
    w.p("result: Any")
    for possible in t.possible_types:
        concrete = resolver_name(possible)
        w.p()
        w.p("def ", accessor_name(possible), "(self) -> Tuple[Optional[", concrete, "], bool]:")
        with w.indented():
            w.p("if isinstance(self.result, ", possible, "):")
            with w.indented():
                w.p("return ", concrete, "(self.result), True")
            w.p("return None, False")
    w.dedent()
    _end_declaration(w)
    run.declare(name)


def gen_input(run: GenerationRun, t: TypeDef) -> None:
    gen_struct(run, t.name, t.description, t.fields, Mode.INPUT)
    run.input_types.append(t.name)


def gen_enum(run: GenerationRun, t: TypeDef) -> None:
    """Enums are plain strings."""


def gen_scalar(run: GenerationRun, t: TypeDef) -> None:
    run.warn("custom scalar %s is not mapped, values pass through as Any", t.name)


_EMITTERS: dict[str, Callable[[GenerationRun, TypeDef], None]] = {
    OBJECT: gen_object,
    INTERFACE: gen_interface,
    UNION: gen_union,
    INPUT_OBJECT: gen_input,
    ENUM: gen_enum,
    SCALAR: gen_scalar,
}


def emit_type(run: GenerationRun, t: TypeDef) -> None:
    """Dispatch one schema type to the emitter for its kind."""
    if t.name in KNOWN_TYPES:
        return
    emitter = _EMITTERS.get(t.kind)
    if emitter is None:
        raise GeneratorDefect(f"unknown graphql type {t.name}: {t.kind}")
    emitter(run, t)


def gen_root_resolver(run: GenerationRun) -> None:
    """Write the interface implemented by the query/mutation root value."""
    gen_abstract(
        run,
        ROOT_RESOLVER,
        "Root value resolving the query and mutation fields.",
        run.root_fields.values(),
    )
