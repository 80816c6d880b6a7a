"""Filesystem helpers shared by the manifest readers."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_manifest_text(path: Path) -> str | None:
    """Read a manifest as UTF-8 text, or None if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read manifest %s: %s", path, e)
        return None


def is_regular_file(path: Path) -> bool:
    """Check for a regular file, treating any probe failure as absence."""
    try:
        return path.is_file()
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return False


def is_directory(path: Path) -> bool:
    """Check for a directory, treating any probe failure as absence."""
    try:
        return path.is_dir()
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return False
