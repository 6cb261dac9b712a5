"""Main CLI entry point for graphql-workbook.

Generates workbook configurations from GraphQL endpoints, SDL files and
config files from the command line.
"""

from pathlib import Path
import asyncio
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from graphql_workbook import __version__
from graphql_workbook.config.loader import dump_config, load_setup
from graphql_workbook.engine.diagnostics import Diagnostics, DiagnosticSeverity
from graphql_workbook.generators.sheet import IntegrityMode
from graphql_workbook.generators.space import configure_space_sync
from graphql_workbook.generators.workbook import WorkbookResult, generate_workbook_sync
from graphql_workbook.introspection.extractor import extract_objects
from graphql_workbook.introspection.introspector import introspect
from graphql_workbook.introspection.types import describe_type_ref
from graphql_workbook.utils.helpers import is_valid_url
from graphql_workbook.workbook.base import PartialWorkbookConfig

# Generated configs go to stdout; everything else goes to stderr.
console = Console(stderr=True)

CONFIG_SUFFIXES = (".yaml", ".yml", ".json")

SETUP_TEMPLATE = """\
# graphql-workbook setup
#
# Usage:
#   graphql-workbook configure {output} -o space.json
#
# Each workbook needs a 'source' (GraphQL endpoint URL or inline SDL) or a
# 'source_file' (path to an SDL file, relative to this file).

defaults:
  labels: []

workbooks:
  - name: GraphQL Workbook
    source: {source}
    sheets: []

space: {{}}
"""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_workbook_config(source: str, name: str | None) -> PartialWorkbookConfig:
    """Turn a SOURCE argument into a workbook config.

    SOURCE is a GraphQL endpoint URL, a YAML/JSON config file holding a single
    workbook, or an SDL file.
    """
    if is_valid_url(source):
        config = PartialWorkbookConfig(source=source)
    else:
        path = Path(source)
        if not path.is_file():
            raise click.BadParameter(
                f"'{source}' is neither a URL nor an existing file", param_hint="SOURCE"
            )
        if path.suffix.lower() in CONFIG_SUFFIXES:
            setup = load_setup(path)
            if len(setup.workbooks) != 1:
                raise click.BadParameter(
                    f"'{source}' defines {len(setup.workbooks)} workbooks; "
                    "use 'graphql-workbook configure' instead",
                    param_hint="SOURCE",
                )
            config = setup.workbooks[0]
        else:
            config = PartialWorkbookConfig(source=path.read_text())

    if name:
        config = config.model_copy(update={"name": name})
    return config


def _output_format(output: str | None, fmt: str | None) -> str:
    if fmt:
        return fmt
    if output and Path(output).suffix.lower() in (".yaml", ".yml"):
        return "yaml"
    return "json"


def _write_output(data: dict, output: str | None, fmt: str, pretty: bool) -> None:
    text = dump_config(data, fmt, pretty=pretty)
    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text)
    else:
        click.echo(text, nl=False)


def _print_diagnostics(diagnostics: Diagnostics, verbose: bool) -> None:
    """Print diagnostics; INFO entries only when verbose."""
    for diagnostic in diagnostics:
        if diagnostic.severity == DiagnosticSeverity.INFO and not verbose:
            continue
        color = {
            "error": "red",
            "warning": "yellow",
            "info": "blue",
        }.get(diagnostic.severity.value, "white")
        console.print(
            f"  [{color}]{diagnostic.severity.value.upper()}[/{color}]: {escape(diagnostic.message)}"
        )


def _print_summary(result: WorkbookResult, output: str | None) -> None:
    summary = result.summary()
    dropped = ", ".join(summary["dropped_sheets"]) or "none"
    console.print(Panel.fit(
        f"[green]Generated workbook '{summary['workbook']}'[/green]\n\n"
        f"[cyan]Object types:[/cyan] {summary['object_count']}\n"
        f"[cyan]Sheets:[/cyan] {summary['sheet_count']}\n"
        f"[cyan]Fields:[/cyan] {summary['field_count']}\n"
        f"[cyan]Dropped:[/cyan] {dropped}\n"
        f"[cyan]Output:[/cyan] {output or 'stdout'}",
        title="Workbook Generated",
    ))


def _fail(e: Exception, verbose: bool) -> None:
    console.print(f"[red]Error: {escape(str(e))}[/red]")
    if verbose:
        import traceback
        console.print(traceback.format_exc())
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="graphql-workbook")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """graphql-workbook - Generate import workbooks from GraphQL schemas.

    Each GraphQL object type becomes a sheet and each supported field a
    typed column.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)


@cli.command()
@click.argument("source")
@click.option("--name", "-n", help="Workbook name (overrides config)")
@click.option("--output", "-o", type=click.Path(), help="Output file (stdout if not specified)")
@click.option("--format", "-f", "fmt", type=click.Choice(["json", "yaml"]), help="Output format (defaults to output suffix, else json)")
@click.option(
    "--integrity",
    type=click.Choice([m.value for m in IntegrityMode]),
    default=IntegrityMode.UNIVERSE.value,
    help="Check references against all object types or against surviving sheets",
)
@click.option("--pretty/--compact", default=True, help="Pretty print JSON output")
@click.pass_context
def generate(
    ctx: click.Context,
    source: str,
    name: str | None,
    output: str | None,
    fmt: str | None,
    integrity: str,
    pretty: bool,
) -> None:
    """Generate a workbook from a GraphQL schema.

    SOURCE is a GraphQL endpoint URL, an SDL file, or a YAML/JSON config
    file describing a single workbook.

    \b
    Examples:
      graphql-workbook generate https://example.com/graphql -o workbook.json
      graphql-workbook generate schema.graphql -n Movies -f yaml
      graphql-workbook generate movies.yaml --integrity survivors
    """
    verbose = ctx.obj.get("verbose", False)

    try:
        config = _load_workbook_config(source, name)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("Generating workbook...", total=None)
            result = generate_workbook_sync(config, integrity=IntegrityMode(integrity))

        _write_output(result.workbook.to_dict(), output, _output_format(output, fmt), pretty)
        _print_summary(result, output)
        _print_diagnostics(result.diagnostics, verbose)

    except click.BadParameter:
        raise
    except Exception as e:
        _fail(e, verbose)


@cli.command()
@click.argument("source")
@click.pass_context
def inspect(ctx: click.Context, source: str) -> None:
    """List the object types a GraphQL schema would generate sheets for.

    SOURCE is a GraphQL endpoint URL, an SDL file, or a single-workbook
    config file.
    """
    verbose = ctx.obj.get("verbose", False)

    try:
        config = _load_workbook_config(source, None)
        objects = extract_objects(asyncio.run(introspect(config.source)))
    except click.BadParameter:
        raise
    except Exception as e:
        _fail(e, verbose)
        return

    if not objects:
        console.print("[yellow]No object types found[/yellow]")
        return

    table = Table(title="Object Types")
    table.add_column("Name", style="cyan")
    table.add_column("Fields", justify="right")
    table.add_column("Description")

    for obj in objects:
        description = obj.description or "-"
        table.add_row(
            obj.name,
            str(len(obj.fields)),
            escape(description[:50] + "..." if len(description) > 50 else description),
        )

    console.print(table)

    if verbose:
        for obj in objects:
            console.print(f"\n[cyan]{obj.name}[/cyan]")
            for field in obj.fields:
                console.print(f"  - {field.name}: {escape(describe_type_ref(field.type))}")


@cli.command()
@click.argument("config_path", type=click.Path(exists=True))
@click.option("--output", "-o", type=click.Path(), help="Output file (stdout if not specified)")
@click.option("--format", "-f", "fmt", type=click.Choice(["json", "yaml"]), help="Output format (defaults to output suffix, else json)")
@click.option(
    "--integrity",
    type=click.Choice([m.value for m in IntegrityMode]),
    default=IntegrityMode.UNIVERSE.value,
    help="Check references against all object types or against surviving sheets",
)
@click.pass_context
def configure(
    ctx: click.Context,
    config_path: str,
    output: str | None,
    fmt: str | None,
    integrity: str,
) -> None:
    """Generate a space with every workbook of a setup file.

    CONFIG_PATH is the path to a YAML/JSON setup file.
    """
    verbose = ctx.obj.get("verbose", False)

    try:
        setup = load_setup(config_path)
        result = configure_space_sync(setup, integrity=IntegrityMode(integrity))
        _write_output(result.space.to_dict(), output, _output_format(output, fmt), True)
    except Exception as e:
        _fail(e, verbose)
        return

    table = Table(title="Generated Workbooks")
    table.add_column("Workbook", style="cyan")
    table.add_column("Sheets", justify="right")
    table.add_column("Dropped")

    for workbook_result in result.results:
        table.add_row(
            workbook_result.workbook.name,
            str(len(workbook_result.workbook.sheets)),
            ", ".join(workbook_result.dropped_sheets) or "-",
        )

    console.print(table)
    _print_diagnostics(result.diagnostics, verbose)


@cli.command()
@click.option("--output", "-o", type=click.Path(), default="graphql-workbook.yaml", help="Output file path")
@click.option("--source", "-s", default="https://example.com/graphql", help="GraphQL endpoint URL")
@click.pass_context
def init_config(ctx: click.Context, output: str, source: str) -> None:
    """Initialize a new setup file.

    Creates a template setup YAML file.
    """
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(SETUP_TEMPLATE.format(output=output, source=source))

    console.print(f"[green]Created config: {output}[/green]")


if __name__ == "__main__":
    cli()
