"""Build system detection and manifest dispatch.

Every function here is total: a missing, unreadable or malformed manifest
degrades to ``UNKNOWN``, ``None`` or an empty list instead of raising, so a
broken manifest never aborts a wider directory scan.
"""

import logging
from pathlib import Path

from .models import BuildSystemKind, DepRef, Manifest
from .parse_cabal import is_cabal_project, read_cabal_manifest
from .parse_cargo import is_cargo_project, read_cargo_manifest
from .parse_node import is_node_project, read_node_manifest

logger = logging.getLogger(__name__)

# Priority order: the first match owns the directory
DETECTION_ORDER = (
    (BuildSystemKind.CARGO, is_cargo_project),
    (BuildSystemKind.CABAL, is_cabal_project),
    (BuildSystemKind.NODE, is_node_project),
)


def detect_one(directory: str | Path) -> BuildSystemKind:
    """Detect the primary build system of a directory.

    Args:
        directory: Project directory to probe

    Returns:
        The first kind whose marker is present (Cargo, then Cabal, then
        Node), or ``UNKNOWN``
    """
    for kind, is_present in DETECTION_ORDER:
        if is_present(Path(directory)):
            return kind
    return BuildSystemKind.UNKNOWN


def detect_all(directory: str | Path) -> list[BuildSystemKind]:
    """Detect every build system present in a directory, in priority order."""
    kinds = [kind for kind, is_present in DETECTION_ORDER if is_present(Path(directory))]
    logger.debug("Detected %s in %s", [str(kind) for kind in kinds], directory)
    return kinds


def read_manifest(directory: str | Path, kind: BuildSystemKind) -> Manifest | None:
    """Read the manifest for ``kind`` in a directory, or None."""
    directory = Path(directory)
    if kind == BuildSystemKind.CARGO:
        return read_cargo_manifest(directory)
    elif kind == BuildSystemKind.CABAL:
        return read_cabal_manifest(directory)
    elif kind == BuildSystemKind.NODE:
        return read_node_manifest(directory)
    elif kind == BuildSystemKind.UNKNOWN:
        return None
    raise ValueError(f"Unhandled build system kind: {kind!r}")


def package_name(directory: str | Path, kind: BuildSystemKind) -> str | None:
    """Get the declared package name, or None."""
    manifest = read_manifest(directory, kind)
    return manifest.name if manifest else None


def package_version(directory: str | Path, kind: BuildSystemKind) -> str | None:
    """Get the declared package version, or None."""
    manifest = read_manifest(directory, kind)
    return manifest.version if manifest else None


def parse_dependencies(directory: str | Path, kind: BuildSystemKind) -> list[DepRef]:
    """Get the declared dependencies, or an empty list."""
    manifest = read_manifest(directory, kind)
    return manifest.dependencies if manifest else []
