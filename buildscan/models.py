"""Core data models for BuildScan."""

from dataclasses import dataclass, field
from enum import Enum


class BuildSystemKind(str, Enum):
    """Build ecosystems recognised from filesystem markers."""

    CARGO = "cargo"
    CABAL = "cabal"
    NODE = "node"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "BuildSystemKind":
        """Look up a kind by its display name (case-insensitive)."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Unknown build system '{name}' (expected one of: {valid})")


@dataclass
class DepRef:
    """A single dependency declared in a manifest."""

    name: str
    version_req: str | None = None
    is_path_dep: bool = False
    path: str | None = None
    is_dev: bool = False

    def to_dict(self) -> dict:
        data = {
            "name": self.name,
            "version_req": self.version_req,
            "is_path_dep": self.is_path_dep,
            "is_dev": self.is_dev,
        }
        if self.path is not None:
            data["path"] = self.path
        return data


@dataclass
class Manifest:
    """A parsed build manifest."""

    kind: BuildSystemKind
    raw: str
    name: str | None = None
    version: str | None = None
    dependencies: list[DepRef] = field(default_factory=list)
