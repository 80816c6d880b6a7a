"""CLI application for BuildScan."""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from buildscan.detect import detect_all, read_manifest
from buildscan.errors import WorkspaceError
from buildscan.files import is_directory
from buildscan.models import BuildSystemKind, DepRef
from buildscan.workspace import WorkspaceReport, scan_project, scan_workspace

console = Console()

OUTPUT_FORMATS = ("table", "json")


def format_deps_table(deps: list[DepRef], title: str) -> Table:
    """Build a rich table of dependencies."""
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Version")
    table.add_column("Path")
    table.add_column("Dev")

    for dep in deps:
        table.add_row(
            dep.name,
            dep.version_req or "-",
            dep.path or "",
            "yes" if dep.is_dev else "",
        )
    return table


def format_workspace_table(report: WorkspaceReport) -> Table:
    """Build a rich table summarizing a workspace scan."""
    table = Table(title=f"Workspace {report.root}")
    table.add_column("Directory", style="cyan")
    table.add_column("Build systems")
    table.add_column("Package")
    table.add_column("Version")
    table.add_column("Deps", justify="right")

    for project in report.projects:
        table.add_row(
            project.dir_name,
            ", ".join(str(kind) for kind in project.build_systems),
            project.package_name or "-",
            project.package_version or "-",
            str(len(project.dependencies)),
        )
    return table


def _resolve_directory(path: str) -> Path:
    directory = Path(path)
    if not is_directory(directory):
        console.print(f"Error: Directory {path} not found", style="red")
        raise typer.Exit(1)
    return directory


def _resolve_kind(kind: str | None) -> BuildSystemKind | None:
    if kind is None:
        return None
    try:
        return BuildSystemKind.from_name(kind)
    except ValueError as e:
        console.print(f"Error: {e}", style="red")
        raise typer.Exit(1)


def _check_format(format_type: str) -> None:
    if format_type not in OUTPUT_FORMATS:
        console.print(
            f"Error: Unsupported format: {format_type} (expected table or json)",
            style="red",
        )
        raise typer.Exit(1)


app = typer.Typer(
    name="buildscan",
    help="BuildScan - Detect build systems and list manifest dependencies",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """BuildScan - Detect build systems and list manifest dependencies."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@app.command()
def detect(
    path: str = typer.Argument(help="Project directory"),
) -> None:
    """List the build systems used by a directory, primary first."""
    directory = _resolve_directory(path)
    kinds = detect_all(directory)

    if not kinds:
        console.print("No build system detected")
        raise typer.Exit(2)

    for index, kind in enumerate(kinds):
        marker = " (primary)" if index == 0 else ""
        console.print(f"{kind}{marker}")


@app.command()
def info(
    path: str = typer.Argument(help="Project directory"),
    kind: str | None = typer.Option(None, "--kind", "-k", help="Force a build system: cargo, cabal, node"),
) -> None:
    """Show the package name and version declared by each manifest."""
    directory = _resolve_directory(path)
    forced = _resolve_kind(kind)
    kinds = [forced] if forced else detect_all(directory)

    if not kinds:
        console.print("No build system detected")
        raise typer.Exit(2)

    for build_system in kinds:
        manifest = read_manifest(directory, build_system)
        name = manifest.name if manifest and manifest.name else "-"
        version = manifest.version if manifest and manifest.version else "-"
        console.print(f"{build_system}: {name} {version}")


@app.command()
def deps(
    path: str = typer.Argument(help="Project directory"),
    kind: str | None = typer.Option(None, "--kind", "-k", help="Force a build system: cargo, cabal, node"),
    format_type: str = typer.Option("table", "--format", help="Output format: table or json"),
) -> None:
    """List the dependencies declared by a project's manifest."""
    directory = _resolve_directory(path)
    forced = _resolve_kind(kind)
    _check_format(format_type)

    report = scan_project(directory, forced)
    if report.build_system == BuildSystemKind.UNKNOWN:
        console.print("No build system detected")
        raise typer.Exit(2)

    if format_type == "json":
        typer.echo(json.dumps(report.to_dict(), indent=2))
    elif report.dependencies:
        console.print(format_deps_table(report.dependencies, f"{report.build_system} dependencies"))
    else:
        console.print("No dependencies found")


@app.command()
def workspace(
    root: str = typer.Argument(help="Workspace directory containing projects"),
    format_type: str = typer.Option("table", "--format", help="Output format: table or json"),
) -> None:
    """Summarize every project directory under a workspace root."""
    _check_format(format_type)

    try:
        report = scan_workspace(root)
    except WorkspaceError as e:
        console.print(f"Error: {e}", style="red")
        raise typer.Exit(1)

    if format_type == "json":
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return

    console.print(format_workspace_table(report))
    for skipped in report.skipped_dirs:
        console.print(f"Skipped {skipped.name}: no build system detected", style="yellow")


if __name__ == "__main__":
    app()
