"""Node.js package.json parsing."""

import json
import logging
from pathlib import Path

from .errors import ManifestParseError
from .files import is_regular_file, read_manifest_text
from .models import BuildSystemKind, DepRef, Manifest

logger = logging.getLogger(__name__)

NODE_MANIFEST = "package.json"

DEPENDENCY_SECTIONS = ("dependencies", "devDependencies", "peerDependencies")
DEV_SECTION = "devDependencies"

# Specifiers that point at the local filesystem instead of the registry
PATH_PREFIXES = ("file:", "link:")

WILDCARD = "*"


def _local_path(spec: str) -> str | None:
    """Return the path of a file:/link: specifier, or None for registry specs."""
    for prefix in PATH_PREFIXES:
        if spec.startswith(prefix):
            return spec[len(prefix):] or None
    return None


def _string_field(doc: dict, key: str) -> str | None:
    value = doc.get(key)
    return value if isinstance(value, str) else None


def parse_dependency_section(section: dict, is_dev: bool = False) -> list[DepRef]:
    """Parse one package.json dependency object in key order."""
    deps: list[DepRef] = []
    for name, value in section.items():
        if not name:
            continue

        spec = value if isinstance(value, str) else WILDCARD
        path = _local_path(spec)
        deps.append(
            DepRef(
                name=name,
                version_req=spec,
                is_path_dep=path is not None,
                path=path,
                is_dev=is_dev,
            )
        )
    return deps


def parse_package_json(content: str) -> Manifest:
    """Parse package.json content into Manifest.

    Args:
        content: The package.json file content

    Returns:
        Parsed Manifest object

    Raises:
        ManifestParseError: If the content is not a JSON object
    """
    try:
        doc = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestParseError(BuildSystemKind.NODE, str(e)) from e

    if not isinstance(doc, dict):
        raise ManifestParseError(BuildSystemKind.NODE, "top level is not an object")

    deps: list[DepRef] = []
    for section_name in DEPENDENCY_SECTIONS:
        section = doc.get(section_name)
        if isinstance(section, dict):
            deps.extend(parse_dependency_section(section, is_dev=section_name == DEV_SECTION))

    return Manifest(
        kind=BuildSystemKind.NODE,
        raw=content,
        name=_string_field(doc, "name"),
        version=_string_field(doc, "version"),
        dependencies=deps,
    )


def find_node_manifest(directory: Path) -> Path | None:
    path = Path(directory) / NODE_MANIFEST
    return path if is_regular_file(path) else None


def is_node_project(directory: Path) -> bool:
    """Check if a directory contains a package.json."""
    return find_node_manifest(directory) is not None


def read_node_manifest(directory: Path) -> Manifest | None:
    """Read and parse the package.json in a directory, or None on any failure."""
    path = find_node_manifest(directory)
    if path is None:
        return None

    content = read_manifest_text(path)
    if content is None:
        return None

    try:
        return parse_package_json(content)
    except ManifestParseError as e:
        logger.debug("Ignoring %s: %s", path, e)
        return None
