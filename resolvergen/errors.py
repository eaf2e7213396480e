"""Exceptions raised by the generator.

User-input problems (files, schema text, configuration) derive from
ResolverGenError and are reported to the user. GeneratorDefect marks a bug
in the generator itself and is never caught.
"""

from __future__ import annotations


class ResolverGenError(Exception):
    """Base class for errors caused by user input."""


class SchemaFileError(ResolverGenError):
    """Raised when a schema file cannot be read."""


class SchemaParseError(ResolverGenError):
    """Raised when graphql-core rejects the schema text."""


class SchemaError(ResolverGenError):
    """Raised when the introspected schema cannot be mapped."""


class ConfigurationError(ResolverGenError):
    """Raised when the configuration file is invalid."""


class GeneratorDefect(Exception):
    """Internal invariant violation while emitting code."""
