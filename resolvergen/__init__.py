"""Generate Python resolver glue from GraphQL schemas."""

from __future__ import annotations

from .codegen import generate_resolvers, generate_server, write_output
from .errors import (
    ConfigurationError,
    GeneratorDefect,
    ResolverGenError,
    SchemaError,
    SchemaFileError,
    SchemaParseError,
)
from .loader import concatenate_schemas, load_schema_files

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "GeneratorDefect",
    "ResolverGenError",
    "SchemaError",
    "SchemaFileError",
    "SchemaParseError",
    "concatenate_schemas",
    "generate_resolvers",
    "generate_server",
    "load_schema_files",
    "write_output",
]
