"""Haskell .cabal file parsing.

Cabal files have no structured grammar we can hand to a library, so the
dependency fields are recovered with a line scanner. A ``build-depends:``
field may carry its list on the same line, on indented continuation lines
(conventionally each starting with a comma), or both. The field ends at the
first non-indented line or at an indented line that looks like another field.
Every ``build-depends`` in the file, whatever stanza it belongs to, feeds a
single list deduplicated by package name.
"""

import logging
from pathlib import Path

from .files import read_manifest_text
from .models import BuildSystemKind, DepRef, Manifest

logger = logging.getLogger(__name__)

CABAL_EXTENSION = ".cabal"
DEPENDS_FIELD = "build-depends:"
COMMENT_PREFIX = "--"
VERSION_OPERATORS = (">", "<", "=", "^")

# Implicitly available in every package
STDLIB_PACKAGE = "base"


def is_field_line(trimmed: str) -> bool:
    """Check if an indented line starts a new field rather than continuing a list.

    A colon only marks a field when the text before it holds no list
    separator or version operator, so a colon trailing a version constraint
    does not end the list.
    """
    if ":" not in trimmed:
        return False
    if trimmed.startswith(",") or trimmed.startswith(COMMENT_PREFIX):
        return False

    before_colon = trimmed.split(":", 1)[0]
    return not any(char in before_colon for char in ",><=")


def split_cabal_dep(dep: str) -> tuple[str, str | None]:
    """Split ``aeson >=2.0`` into its name and version constraint."""
    for index, char in enumerate(dep):
        if char in VERSION_OPERATORS:
            return dep[:index].strip(), dep[index:].strip()
    return dep.strip(), None


class BuildDependsParser:
    """Parser for the build-depends fields of a .cabal file."""

    def __init__(self):
        self.deps: list[DepRef] = []
        self._seen: set[str] = set()
        self._in_build_depends = False

    def _add_dep_list(self, text: str) -> None:
        """Parse a comma-separated dependency fragment."""
        text = text.strip()
        if text.startswith(COMMENT_PREFIX):
            return
        if text.startswith(","):
            text = text[1:]

        for part in text.split(","):
            part = part.strip()
            if not part or part.startswith(COMMENT_PREFIX):
                continue

            name, version = split_cabal_dep(part)
            if not name or name == STDLIB_PACKAGE:
                continue

            if name in self._seen:
                logger.debug("Dropping repeated cabal dependency %s", name)
                continue

            self._seen.add(name)
            self.deps.append(DepRef(name=name, version_req=version))

    def feed_line(self, line: str) -> None:
        trimmed = line.strip()

        if trimmed.lower().startswith(DEPENDS_FIELD):
            self._in_build_depends = True
            rest = trimmed[len(DEPENDS_FIELD):]
            if rest.strip():
                self._add_dep_list(rest)
            return

        if not self._in_build_depends:
            return

        if not line.startswith((" ", "\t")):
            self._in_build_depends = False
            return

        if is_field_line(trimmed):
            self._in_build_depends = False
            return

        self._add_dep_list(trimmed)

    def parse(self, content: str) -> list[DepRef]:
        """Parse all build-depends fields of a .cabal file."""
        self.deps = []
        self._seen = set()
        self._in_build_depends = False

        for line in content.splitlines():
            self.feed_line(line)

        return self.deps


def parse_build_depends(content: str) -> list[DepRef]:
    """Parse build-depends fields from .cabal content.

    Args:
        content: The .cabal file content

    Returns:
        Dependencies in first-seen order, without ``base`` or repeats
    """
    parser = BuildDependsParser()
    return parser.parse(content)


def parse_cabal_field(content: str, field: str) -> str | None:
    """Return the first non-empty value of a top-level ``field:`` line."""
    prefix = f"{field.lower()}:"
    for line in content.splitlines():
        trimmed = line.strip()
        if trimmed.lower().startswith(prefix):
            value = trimmed[len(prefix):].strip().strip("\"'")
            if value:
                return value
    return None


def parse_cabal_file(content: str) -> Manifest:
    """Parse .cabal content into Manifest. Never raises on malformed text."""
    return Manifest(
        kind=BuildSystemKind.CABAL,
        raw=content,
        name=parse_cabal_field(content, "name"),
        version=parse_cabal_field(content, "version"),
        dependencies=parse_build_depends(content),
    )


def find_cabal_file(directory: Path) -> Path | None:
    """Find the .cabal file in a directory.

    When several exist the lexicographically smallest filename wins.
    """
    try:
        candidates = sorted(
            entry
            for entry in Path(directory).iterdir()
            if entry.suffix == CABAL_EXTENSION and entry.is_file()
        )
    except OSError as e:
        logger.debug("Cannot list %s: %s", directory, e)
        return None

    if len(candidates) > 1:
        logger.debug("Multiple cabal files in %s, using %s", directory, candidates[0].name)
    return candidates[0] if candidates else None


def is_cabal_project(directory: Path) -> bool:
    """Check if a directory contains a .cabal file."""
    return find_cabal_file(directory) is not None


def read_cabal_manifest(directory: Path) -> Manifest | None:
    """Read and parse the .cabal file in a directory, or None on any failure."""
    path = find_cabal_file(directory)
    if path is None:
        return None

    content = read_manifest_text(path)
    if content is None:
        return None

    return parse_cabal_file(content)
