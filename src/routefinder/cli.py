"""Command line interface for RouteFinder."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from routefinder.config import AppConfig
from routefinder.manifest.locator import ManifestLocator
from routefinder.navigation import (
    collect_route_definitions,
    find_entity_declaration,
    route_to_entity_name,
)
from routefinder.resolver import WidgetPathResolver
from routefinder.utils.files import read_text
from routefinder.web.app import app as web_app


console = Console()
app = typer.Typer(help="RouteFinder - jump from generated routes to their screens")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _build_resolver(root: Path | None, fuzzy: bool = False) -> WidgetPathResolver:
    config = AppConfig(root=root if root is not None else Path.cwd(), fallback_heuristics=fuzzy)
    resolved_root = config.resolve_root(Path.cwd())
    if resolved_root is None or not resolved_root.is_dir():
        raise typer.BadParameter(f"Project root not found: {resolved_root}")
    locator = ManifestLocator([resolved_root], config)
    locator.index_manifest_files()
    return WidgetPathResolver(locator, config)


@app.command()
def manifests(
    root: Path = typer.Option(None, "--root", help="Project root (defaults to the current directory)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List the route manifests found in the project."""
    _setup_logging(verbose)
    resolver = _build_resolver(root)
    paths = resolver.locator.locate_manifests()
    if not paths:
        console.print("[yellow]No routes manifest found.[/yellow]")
        raise typer.Exit(code=1)
    for path in paths:
        console.print(str(path), soft_wrap=True)


@app.command()
def resolve(
    entity: str = typer.Argument(..., help="Widget name, e.g. HomeScreen"),
    root: Path = typer.Option(None, "--root", help="Project root (defaults to the current directory)"),
    fuzzy: bool = typer.Option(False, "--fuzzy", help="Try looser name matching when nothing matches"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print the file that defines a widget."""
    _setup_logging(verbose)
    resolver = _build_resolver(root, fuzzy)
    result = resolver.explain(entity)
    if result.path is None:
        console.print(f"[yellow]{result.status.describe(entity)}.[/yellow]")
        raise typer.Exit(code=1)
    console.print(str(result.path), soft_wrap=True)


@app.command()
def lenses(
    source: Path = typer.Argument(..., help="Dart file to scan for route references", exists=True, dir_okay=False),
    root: Path = typer.Option(None, "--root", help="Project root (defaults to the current directory)"),
    fuzzy: bool = typer.Option(False, "--fuzzy", help="Try looser name matching when nothing matches"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show the route references in a file and where they lead."""
    _setup_logging(verbose)
    text = read_text(source)
    if text is None:
        raise typer.BadParameter(f"Unable to read {source}")

    resolver = _build_resolver(root, fuzzy)
    definitions = collect_route_definitions(text, resolver)
    if not definitions:
        console.print("[yellow]No resolvable routes found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Line")
    table.add_column("Route")
    table.add_column("Widget")
    table.add_column("File")
    for definition in definitions:
        table.add_row(
            str(definition.line_number),
            definition.route_name,
            definition.widget_name,
            str(definition.file_path),
        )
    console.print(table)


@app.command()
def jump(
    route: str = typer.Argument(..., help="Route name, e.g. HomeRoute"),
    root: Path = typer.Option(None, "--root", help="Project root (defaults to the current directory)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print the location of the widget behind a route as path:line:column."""
    _setup_logging(verbose)
    resolver = _build_resolver(root)
    widget = resolver.route_declarations().get(route) or route_to_entity_name(
        route, resolver.config.route_suffix, resolver.config.entity_suffix
    )
    result = resolver.explain(widget)
    if result.path is None:
        console.print(f"[yellow]{result.status.describe(widget)}.[/yellow]")
        raise typer.Exit(code=1)

    location = find_entity_declaration(result.path, widget)
    if location is None:
        console.print(str(result.path), soft_wrap=True)
        return
    console.print(f"{location.path}:{location.line}:{location.column + 1}", soft_wrap=True)


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
) -> None:
    """Start the HTTP service used by editor integrations."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    console.print(f"Starting RouteFinder service on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
