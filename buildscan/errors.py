"""Exceptions raised below the fail-soft boundary of BuildScan."""

from .models import BuildSystemKind


class BuildScanError(Exception):
    """Base exception for all BuildScan errors."""


class ManifestParseError(BuildScanError):
    """Raised when a structured manifest cannot be decoded."""

    def __init__(self, kind: BuildSystemKind, reason: str):
        self.kind = kind
        self.reason = reason
        super().__init__(f"Malformed {kind} manifest: {reason}")


class WorkspaceError(BuildScanError):
    """Raised when a workspace root cannot be scanned."""
