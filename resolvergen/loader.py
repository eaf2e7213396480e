"""Load GraphQL schema files and introspect them.

Reads one or more SDL files, builds the schema with graphql-core and
extracts the introspection catalog the emitters walk.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from graphql import GraphQLError, build_schema, introspection_from_schema, validate_schema

from .errors import SchemaFileError, SchemaParseError


def read_schema_files(paths: Iterable[Path | str]) -> list[str]:
    """Read every schema file from disk."""
    texts = []
    for path in paths:
        try:
            texts.append(Path(path).read_text(encoding="utf-8"))
        except OSError as exc:
            raise SchemaFileError(f"Cannot read schema file {path}: {exc}") from exc
    return texts


def concatenate_schemas(texts: Iterable[str]) -> str:
    """Join schema fragments, separated by a blank line."""
    return "\n\n".join(texts)


def load_schema_files(paths: Iterable[Path | str]) -> str:
    """Read and concatenate the given schema files."""
    return concatenate_schemas(read_schema_files(paths))


def introspect(schema_text: str) -> dict[str, Any]:
    """Parse the schema text and return its `__schema` introspection."""
    try:
        schema = build_schema(schema_text)
    except GraphQLError as exc:
        raise SchemaParseError(f"Invalid schema: {exc.message}") from exc
    except TypeError as exc:
        # graphql-core reports some definition errors as TypeError
        raise SchemaParseError(f"Invalid schema: {exc}") from exc

    errors = validate_schema(schema)
    if errors:
        raise SchemaParseError("Invalid schema: " + "; ".join(error.message for error in errors))
    return introspection_from_schema(schema)["__schema"]


def get_types(catalog: dict[str, Any]) -> list[dict[str, Any]]:
    """Extract the type entries from the catalog, in catalog order."""
    return catalog.get("types", [])


def get_root_type_names(catalog: dict[str, Any]) -> frozenset[str]:
    """Names of the query and mutation root types."""
    names = set()
    for key in ("queryType", "mutationType"):
        root = catalog.get(key)
        if root:
            names.add(root["name"])
    return frozenset(names)
