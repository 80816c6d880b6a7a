"""Tests for core models."""

import pytest

from buildscan.models import BuildSystemKind, DepRef


class TestBuildSystemKind:
    """Test the build system enumeration."""

    def test_display_names(self):
        """Should display as lowercase names."""
        assert [str(kind) for kind in BuildSystemKind] == ["cargo", "cabal", "node", "unknown"]

    def test_from_name(self):
        """Should look up kinds case-insensitively."""
        assert BuildSystemKind.from_name("Cargo") == BuildSystemKind.CARGO
        assert BuildSystemKind.from_name(" node ") == BuildSystemKind.NODE

    def test_from_name_invalid(self):
        """Should reject names that are not build systems."""
        with pytest.raises(ValueError, match="expected one of"):
            BuildSystemKind.from_name("maven")


class TestDepRef:
    """Test the dependency record."""

    def test_defaults(self):
        """Should default to a registry, non-dev dependency."""
        dep = DepRef(name="serde")

        assert dep.version_req is None
        assert dep.is_path_dep is False
        assert dep.path is None
        assert dep.is_dev is False

    def test_to_dict_omits_missing_path(self):
        """Should only include path for path dependencies."""
        assert "path" not in DepRef(name="serde", version_req="1").to_dict()

        data = DepRef(name="local", is_path_dep=True, path="../local").to_dict()
        assert data["path"] == "../local"
        assert data["version_req"] is None
