"""Generate the resolver and server modules and write them to disk.

generate_resolvers() turns schema text into schema_gql.py: the declarations
of every schema type, the root resolver interface, and a trailer embedding
the schema text. generate_server() renders server_gql.py from the
transport template.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import jinja2

from .declarations import GenerationRun, emit_type, gen_root_resolver
from .definitions import TypeDef, new_type
from .leaves import ID_WIRE, TIME_WIRE
from .loader import get_root_type_names, get_types, introspect
from .naming import HOLDER_ATTR, resolver_name

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

RESOLVERS_MODULE = "schema_gql"
SERVER_MODULE = "server_gql"

_IMPORTS = (
    "import datetime",
    "from abc import ABC, abstractmethod",
    "from dataclasses import dataclass",
    "from typing import Any, Dict, List, Optional, Tuple, Union",
)

_TRAILER_NAMES = ("ARGUMENT_TYPES", "INPUT_TYPES", "RESOLVER_TYPES", "SCHEMA")


def _gen_header(run: GenerationRun, package: str, declared: Iterable[str]) -> None:
    w = run.writer
    w.p('"""Code generated by resolvergen. DO NOT EDIT.')
    w.p()
    w.p("Package: ", package)
    w.p('"""')
    w.p()
    w.p("from __future__ import annotations")
    w.p()
    for line in _IMPORTS:
        w.p(line)
    w.p()
    w.p("__all__ = [")
    with w.indented():
        for name in (ID_WIRE, TIME_WIRE, *declared, *_TRAILER_NAMES):
            w.p('"', name, '",')
    w.p("]")
    w.p()
    w.p()
    w.p("class ", ID_WIRE, "(str):")
    with w.indented():
        w.doc("GraphQL ID value.")
    w.p()
    w.p()
    w.p("class ", TIME_WIRE, "(str):")
    with w.indented():
        w.doc("GraphQL Time value, serialized in RFC 3339 form.")
        w.p()
        w.p("def __new__(cls, value: datetime.datetime) -> ", TIME_WIRE, ":")
        with w.indented():
            w.p("return super().__new__(cls, value.isoformat())")
    w.p()
    w.p()


def _gen_mapping(run: GenerationRun, name: str, entries: dict[str, str]) -> None:
    w = run.writer
    if not entries:
        w.p(name, ": Dict[str, type] = {}")
        return
    w.p(name, ": Dict[str, type] = {")
    with w.indented():
        for key, value in entries.items():
            w.p('"', key, '": ', value, ",")
    w.p("}")


def _escape_schema(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


def _gen_trailer(run: GenerationRun, schema_text: str) -> None:
    w = run.writer
    _gen_mapping(run, "ARGUMENT_TYPES", run.argument_types)
    w.p()
    _gen_mapping(run, "INPUT_TYPES", {name: name for name in run.input_types})
    w.p()
    _gen_mapping(run, "RESOLVER_TYPES", {name: resolver_name(name) for name in run.object_types})
    w.p()
    w.p('SCHEMA = """')
    w.p(_escape_schema(schema_text))
    w.p('"""')


def _emit_declarations(run: GenerationRun, types: Iterable[TypeDef]) -> None:
    for t in types:
        emit_type(run, t)
    gen_root_resolver(run)


def generate_resolvers(schema_text: str, package: str) -> str:
    """Generate the resolver module for the given schema text.

    Raises SchemaParseError when graphql-core rejects the schema.
    """
    catalog = introspect(schema_text)
    types = [new_type(entry) for entry in get_types(catalog)]
    root_types = get_root_type_names(catalog)

    # First pass only collects the declared names for __all__
    planned = GenerationRun(root_types=root_types)
    with planned.writer.suppressed():
        _emit_declarations(planned, types)

    run = GenerationRun(root_types=root_types)
    _gen_header(run, package, planned.declared)
    _emit_declarations(run, types)
    _gen_trailer(run, schema_text)

    logger.debug(
        "generated %d declarations, %d argument structs",
        len(run.declared), len(run.emitted_args),
    )
    return run.writer.getvalue()


def generate_server(package: str) -> str:
    """Render the HTTP transport module."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    template = env.get_template("server.py.j2")
    return template.render(
        package=package,
        resolvers_module=RESOLVERS_MODULE,
        holder_attr=HOLDER_ATTR,
    )


def write_output(out_dir: Path | str, package: str, resolvers: str, server: str) -> list[Path]:
    """Write the generated modules into <out_dir>/<package>/."""
    target_dir = Path(out_dir) / package
    target_dir.mkdir(parents=True, exist_ok=True)

    init_file = target_dir / "__init__.py"
    if not init_file.exists():
        init_file.write_text("")

    written = []
    for module, text in ((RESOLVERS_MODULE, resolvers), (SERVER_MODULE, server)):
        output_path = target_dir / f"{module}.py"
        output_path.write_text(text, encoding="utf-8")
        logger.info("wrote %s", output_path)
        written.append(output_path)
    return written
