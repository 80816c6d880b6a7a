"""Workspace scanning: summarize every project directory under a root."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .detect import detect_all, detect_one, read_manifest
from .errors import WorkspaceError
from .files import is_directory
from .models import BuildSystemKind, DepRef

logger = logging.getLogger(__name__)


@dataclass
class ProjectReport:
    """Build system and dependency summary for one directory."""

    path: Path
    dir_name: str
    build_system: BuildSystemKind
    build_systems: list[BuildSystemKind] = field(default_factory=list)
    package_name: str | None = None
    package_version: str | None = None
    dependencies: list[DepRef] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "path": str(self.path),
            "dir_name": self.dir_name,
            "build_system": str(self.build_system),
            "build_systems": [str(kind) for kind in self.build_systems],
            "package_name": self.package_name,
            "package_version": self.package_version,
            "dependencies": [dep.to_dict() for dep in self.dependencies],
        }


@dataclass
class WorkspaceReport:
    """Result of scanning a workspace root."""

    root: Path
    projects: list[ProjectReport] = field(default_factory=list)
    skipped_dirs: list[Path] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "root": str(self.root),
            "projects": [project.to_dict() for project in self.projects],
            "skipped_dirs": [str(path) for path in self.skipped_dirs],
        }


def scan_project(directory: str | Path, kind: BuildSystemKind | None = None) -> ProjectReport:
    """Summarize a single directory.

    Args:
        directory: Project directory
        kind: Build system to read; defaults to the detected primary one

    Returns:
        ProjectReport with identity and dependencies taken from ``kind``
    """
    path = Path(directory)
    primary = kind if kind is not None else detect_one(path)
    manifest = read_manifest(path, primary)

    return ProjectReport(
        path=path,
        dir_name=path.name,
        build_system=primary,
        build_systems=detect_all(path),
        package_name=manifest.name if manifest else None,
        package_version=manifest.version if manifest else None,
        dependencies=manifest.dependencies if manifest else [],
    )


def scan_workspace(root: str | Path) -> WorkspaceReport:
    """Scan every immediate subdirectory of a workspace root.

    Hidden directories and plain files are ignored. Directories without a
    recognised build system are reported in ``skipped_dirs``.

    Raises:
        WorkspaceError: If ``root`` is not a readable directory
    """
    root = Path(root)
    if not is_directory(root):
        raise WorkspaceError(f"Not a directory: {root}")

    try:
        children = sorted(root.iterdir())
    except OSError as e:
        raise WorkspaceError(f"Cannot list {root}: {e}") from e

    report = WorkspaceReport(root=root)
    for child in children:
        if child.name.startswith(".") or not is_directory(child):
            continue

        project = scan_project(child)
        if project.build_system == BuildSystemKind.UNKNOWN:
            report.skipped_dirs.append(child)
            continue

        report.projects.append(project)

    report.projects.sort(key=lambda project: project.dir_name)
    logger.info(
        "Scanned %s: %d projects, %d skipped",
        root,
        len(report.projects),
        len(report.skipped_dirs),
    )
    return report
