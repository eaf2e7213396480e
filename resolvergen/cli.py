"""Command line interface entry point."""

from __future__ import annotations

import logging

import click

from .codegen import generate_resolvers, generate_server, write_output
from .config import load_settings
from .errors import ResolverGenError
from .loader import load_schema_files


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="resolvergen")
@click.argument("schema_files", nargs=-1, type=click.Path(dir_okay=False, path_type=str))
@click.option("--pkg", default=None, help="Generated package name [default: schema]")
@click.option(
    "--out-dir",
    "out_dir",
    default=None,
    type=click.Path(file_okay=False, path_type=str),
    help="Output directory [default: current directory]",
)
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False, path_type=str),
    help="YAML config file [default: ~/.resolvergen.yaml when present]",
)
@click.option("-v", "--verbose", is_flag=True, help="Log generation details")
def main(schema_files: tuple[str, ...], pkg: str | None, out_dir: str | None,
         config_path: str | None, verbose: bool) -> None:
    """Generate GraphQL resolver glue from SCHEMA_FILES."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(config_path)
    except ResolverGenError as exc:
        raise click.ClickException(str(exc)) from exc

    pkg = pkg or settings.pkg
    out_dir = out_dir or settings.out_dir
    files = schema_files or settings.schema_files
    if not pkg.isidentifier():
        raise click.BadParameter(f"{pkg!r} is not a valid package name", param_hint="--pkg")
    if not files:
        raise click.UsageError("No schema files given")

    try:
        schema_text = load_schema_files(files)
        resolvers = generate_resolvers(schema_text, pkg)
    except ResolverGenError as exc:
        raise click.ClickException(str(exc)) from exc

    server = generate_server(pkg)
    for path in write_output(out_dir, pkg, resolvers, server):
        click.echo(f"Generated {path}")
