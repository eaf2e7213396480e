"""Shared fixtures for resolvergen tests.

Generated modules are written into a temporary directory under a fresh
package name per call, so each test imports its own copy.
"""

from __future__ import annotations

import importlib
import itertools
import sys
from pathlib import Path
from types import ModuleType
from typing import Callable

import pytest

from resolvergen.codegen import generate_resolvers, generate_server, write_output
from resolvergen.loader import load_schema_files

SCHEMA_DIR = Path(__file__).parent / "schemas"
SAMPLE_SCHEMA = SCHEMA_DIR / "sample.graphql"
EVENTS_SCHEMA = SCHEMA_DIR / "events.graphql"

_package_ids = itertools.count()


# ---------------------------------------------------------------------------
# Schema text
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_schema() -> str:
    """Folders, files and people, with a union and input objects."""
    return load_schema_files([SAMPLE_SCHEMA])


@pytest.fixture
def full_schema() -> str:
    """The sample schema extended with an interface, enum and Time fields."""
    return load_schema_files([SAMPLE_SCHEMA, EVENTS_SCHEMA])


# ---------------------------------------------------------------------------
# Generated package import
# ---------------------------------------------------------------------------

@pytest.fixture
def import_generated(tmp_path, monkeypatch) -> Callable[..., tuple[ModuleType, ModuleType]]:
    """Return a callable that generates, writes and imports a package.

    Usage in tests::

        resolvers, server = import_generated(schema_text)
    """
    monkeypatch.syspath_prepend(str(tmp_path))
    packages: list[str] = []

    def _import(schema_text: str) -> tuple[ModuleType, ModuleType]:
        pkg = f"generated_{next(_package_ids)}"
        packages.append(pkg)
        write_output(tmp_path, pkg, generate_resolvers(schema_text, pkg), generate_server(pkg))
        importlib.invalidate_caches()
        resolvers = importlib.import_module(f"{pkg}.schema_gql")
        server = importlib.import_module(f"{pkg}.server_gql")
        return resolvers, server

    yield _import

    for name in list(sys.modules):
        if name.split(".")[0] in packages:
            sys.modules.pop(name, None)
