"""Convert GraphQL names into Python identifiers.

GraphQL fields are camelCase; the generated data holders, resolver methods
and argument structs use snake_case attributes:

  id            -> id
  createdAt     -> created_at
  userID        -> user_id
  from          -> from_
  r             -> r_ (the resolver wrapper keeps its data holder in `r`)
  createPerson  -> CreatePersonArgs (argument struct for the field)
  Folder        -> FolderResolver (resolver wrapper for the type)

The generated transport maps names back with the same rules, so any change
here must keep python_name() stable.
"""

from __future__ import annotations

import keyword
import re

RESOLVER_SUFFIX = "Resolver"
HOLDER_ATTR = "r"
ARGS_SUFFIX = "Args"


def camel_to_snake(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    return re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s1).lower()


def upper_first(name: str) -> str:
    """Upper-case the first letter, leaving leading underscores alone."""
    for i, ch in enumerate(name):
        if ch.isalpha():
            return name[:i] + ch.upper() + name[i + 1:]
    return name


def python_name(name: str) -> str:
    """Return the attribute/method name used for a GraphQL field or argument."""
    snake = camel_to_snake(name)
    if keyword.iskeyword(snake) or snake == HOLDER_ATTR:
        snake += "_"
    return snake


def resolver_name(type_name: str) -> str:
    """Name of the resolver wrapper generated for a schema type."""
    return type_name + RESOLVER_SUFFIX


def args_name(field_name: str) -> str:
    """Synthesized name of the argument struct for a field.

    The name depends on the field name only, so fields sharing a name on
    different types share one struct.
    """
    return upper_first(field_name) + ARGS_SUFFIX


def accessor_name(type_name: str) -> str:
    """Name of the union accessor returning the given concrete type."""
    return "to_" + camel_to_snake(type_name)
