"""Cargo.toml parsing."""

import logging
import tomllib
from pathlib import Path

from .errors import ManifestParseError
from .files import is_regular_file, read_manifest_text
from .models import BuildSystemKind, DepRef, Manifest

logger = logging.getLogger(__name__)

CARGO_MANIFEST = "Cargo.toml"

# Scanned in this order; entries are concatenated without deduplication
DEPENDENCY_TABLES = ("dependencies", "dev-dependencies", "build-dependencies")


def _string_field(table: object, key: str) -> str | None:
    if not isinstance(table, dict):
        return None
    value = table.get(key)
    return value if isinstance(value, str) else None


def _parse_dep_entry(name: str, value: object) -> DepRef | None:
    """Convert one dependency table entry into a DepRef."""
    if not name:
        return None

    # Simple form: serde = "1.0"
    if isinstance(value, str):
        return DepRef(name=name, version_req=value)

    # Table form: local = { path = "../local", version = "0.1.0" }
    if isinstance(value, dict):
        dep_path = _string_field(value, "path") or None
        return DepRef(
            name=name,
            version_req=_string_field(value, "version"),
            is_path_dep=dep_path is not None,
            path=dep_path,
        )

    logger.debug("Skipping Cargo dependency %r with value %r", name, value)
    return None


def parse_dep_table(table: dict) -> list[DepRef]:
    """Parse a single Cargo dependency table in key order."""
    deps: list[DepRef] = []
    for name, value in table.items():
        dep = _parse_dep_entry(name, value)
        if dep:
            deps.append(dep)
    return deps


def parse_cargo_toml(content: str) -> Manifest:
    """Parse Cargo.toml content into Manifest.

    Args:
        content: The Cargo.toml file content

    Returns:
        Parsed Manifest object

    Raises:
        ManifestParseError: If the content is not valid TOML
    """
    try:
        doc = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ManifestParseError(BuildSystemKind.CARGO, str(e)) from e

    package = doc.get("package")
    deps: list[DepRef] = []
    for section in DEPENDENCY_TABLES:
        table = doc.get(section)
        if isinstance(table, dict):
            deps.extend(parse_dep_table(table))

    return Manifest(
        kind=BuildSystemKind.CARGO,
        raw=content,
        name=_string_field(package, "name"),
        version=_string_field(package, "version"),
        dependencies=deps,
    )


def find_cargo_manifest(directory: Path) -> Path | None:
    path = Path(directory) / CARGO_MANIFEST
    return path if is_regular_file(path) else None


def is_cargo_project(directory: Path) -> bool:
    """Check if a directory contains a Cargo.toml."""
    return find_cargo_manifest(directory) is not None


def read_cargo_manifest(directory: Path) -> Manifest | None:
    """Read and parse the Cargo.toml in a directory, or None on any failure."""
    path = find_cargo_manifest(directory)
    if path is None:
        return None

    content = read_manifest_text(path)
    if content is None:
        return None

    try:
        return parse_cargo_toml(content)
    except ManifestParseError as e:
        logger.debug("Ignoring %s: %s", path, e)
        return None
