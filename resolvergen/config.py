"""Generator settings from a YAML config file and the environment.

Precedence, lowest first: defaults, config file, environment variables,
command line options. The config file looks like:

    pkg: api
    out_dir: ./generated
    schema_files:
      - schema/types.graphql
      - schema/root.graphql
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigurationError

DEFAULT_CONFIG_PATH = Path.home() / ".resolvergen.yaml"
DEFAULT_PKG = "schema"
DEFAULT_OUT_DIR = "."

ENV_PKG = "RESOLVERGEN_PKG"
ENV_OUT_DIR = "RESOLVERGEN_OUT_DIR"


@dataclass(frozen=True)
class Settings:
    pkg: str = DEFAULT_PKG
    out_dir: str = DEFAULT_OUT_DIR
    schema_files: tuple[str, ...] = ()


def _parse_settings(parsed: Mapping[str, Any], path: Path) -> Settings:
    unknown = set(parsed) - {"pkg", "out_dir", "schema_files"}
    if unknown:
        raise ConfigurationError(f"Unknown keys in {path}: {', '.join(sorted(unknown))}")

    pkg = parsed.get("pkg", DEFAULT_PKG)
    out_dir = parsed.get("out_dir", DEFAULT_OUT_DIR)
    if not isinstance(pkg, str) or not pkg.isidentifier():
        raise ConfigurationError(f"'pkg' must be a Python identifier, got {pkg!r}")
    if not isinstance(out_dir, str):
        raise ConfigurationError("'out_dir' must be a string")

    schema_files = parsed.get("schema_files") or []
    if not isinstance(schema_files, list) or not all(isinstance(f, str) for f in schema_files):
        raise ConfigurationError("'schema_files' must be a list of paths")

    # relative schema paths are relative to the config file
    resolved = tuple(str(path.parent / f) for f in schema_files)
    return Settings(pkg=pkg, out_dir=out_dir, schema_files=resolved)


def load_config_file(path: Path | str) -> Settings:
    """Load settings from a YAML config file."""
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")
    return _parse_settings(parsed, path)


def load_settings(config_path: Path | str | None = None,
                  environ: Mapping[str, str] | None = None) -> Settings:
    """Load settings from the config file (if any) and the environment.

    Without an explicit path the default config file is read when present.
    """
    if config_path is not None:
        settings = load_config_file(config_path)
    elif DEFAULT_CONFIG_PATH.exists():
        settings = load_config_file(DEFAULT_CONFIG_PATH)
    else:
        settings = Settings()

    env = os.environ if environ is None else environ
    if env.get(ENV_PKG):
        settings = replace(settings, pkg=env[ENV_PKG])
    if env.get(ENV_OUT_DIR):
        settings = replace(settings, out_dir=env[ENV_OUT_DIR])
    return settings
