"""nscontext CLI - Inspect and use XML namespace declarations."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

import click

from nscontext.config import LoadConfig, NamespaceBinding
from nscontext.output import build_result, write_output
from nscontext.registry.namespace_context import NamespaceContext
from nscontext.documents.declarations import load_context, populate_context, read_declarations
from nscontext.documents.query import UnboundPrefixError, display_name, find_all


@click.group()
def cli() -> None:
    """nscontext - Resolve namespace prefixes for path queries over XML."""
    pass


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_single(path: str, root_only: bool = True) -> NamespaceContext:
    config = LoadConfig(paths=[path], root_only=root_only)
    return load_context(config)


def _parse_binding(value: str) -> NamespaceBinding:
    prefix, sep, uri = value.partition("=")
    if not sep or not uri:
        raise click.BadParameter(f"expected PREFIX=URI, got '{value}'", param_hint="'-n'")
    return NamespaceBinding(prefix=prefix, uri=uri)


def _print_table(context: NamespaceContext, title: str) -> None:
    from rich.console import Console
    from rich.table import Table

    table = Table(title=title, show_edge=False)
    table.add_column("Prefix", style="bold")
    table.add_column("Namespace URI", overflow="fold")

    for binding in context.bindings():
        table.add_row(binding.prefix or "(default)", binding.uri)

    Console().print(table)


@cli.command("list")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", "output_path", default=None, help="Output JSON file path")
@click.option("--all-elements", is_flag=True, help="Read declarations from every element, not just the root")
@click.option("--no-default", is_flag=True, help="Skip the default (unprefixed) namespace")
@click.option("--verbose", is_flag=True, help="Log each registered binding")
@click.option("--quiet", is_flag=True, help="Suppress all output except errors")
def list_cmd(
    paths: tuple[str, ...],
    output_path: str | None,
    all_elements: bool,
    no_default: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """List the namespace bindings declared by one or more documents."""
    _configure_logging(verbose)

    config = LoadConfig(
        paths=list(paths),
        root_only=not all_elements,
        include_default=not no_default,
        verbose=verbose,
        quiet=quiet,
    )
    context = load_context(config)

    if not quiet:
        title = Path(paths[0]).name if len(paths) == 1 else f"{len(paths)} documents"
        _print_table(context, f"Namespaces: {title}")

    if output_path:
        write_output(build_result(config, context), output_path)
        if not quiet:
            from rich.console import Console
            Console().print(f"[green]Output written to:[/green] {output_path}")


@cli.command("resolve")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.argument("prefix")
def resolve_cmd(path: str, prefix: str) -> None:
    """Print the namespace URI bound to PREFIX in a document."""
    uri = _load_single(path).get_namespace_uri(prefix)
    if uri is None:
        click.echo(f"Prefix '{prefix}' is not bound", err=True)
        raise click.exceptions.Exit(1)
    click.echo(uri)


@cli.command("prefix")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.argument("uri")
def prefix_cmd(path: str, uri: str) -> None:
    """Print the prefix bound to URI in a document."""
    prefix = _load_single(path).get_prefix(uri)
    if prefix is None:
        click.echo(f"Namespace '{uri}' has no prefix", err=True)
        raise click.exceptions.Exit(1)
    click.echo(prefix)


@cli.command("query")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.argument("expression")
@click.option("-n", "--namespace", "extra", multiple=True, help="Extra binding as PREFIX=URI")
@click.option("--all-elements", is_flag=True, help="Read declarations from every element, not just the root")
@click.option("--verbose", is_flag=True, help="Log each registered binding")
def query_cmd(
    path: str,
    expression: str,
    extra: tuple[str, ...],
    all_elements: bool,
    verbose: bool,
) -> None:
    """Evaluate a prefixed path EXPRESSION against a document."""
    _configure_logging(verbose)

    extra_bindings = [_parse_binding(value) for value in extra]

    try:
        root = ET.parse(path).getroot()
        context = NamespaceContext()
        populate_context(context, read_declarations(path, root_only=not all_elements))
    except ET.ParseError as e:
        raise click.ClickException(f"Failed to parse {path}: {e}")

    populate_context(context, extra_bindings)

    try:
        matches = find_all(root, expression, context)
    except (UnboundPrefixError, SyntaxError) as e:
        raise click.ClickException(str(e))

    for elem in matches:
        name = display_name(elem.tag, context)
        text = (elem.text or "").strip()
        click.echo(f"{name}\t{text}" if text else name)


if __name__ == "__main__":
    cli()
