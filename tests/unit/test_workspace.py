"""Tests for workspace scanning."""

import os

import pytest

from buildscan.errors import WorkspaceError
from buildscan.models import BuildSystemKind
from buildscan.workspace import scan_project, scan_workspace


@pytest.fixture
def workspace_root(make_project, sample_cargo_toml, sample_package_json, sample_cabal_file):
    """A workspace with three projects, a plain directory and hidden entries."""
    make_project({"Cargo.toml": sample_cargo_toml, "package.json": sample_package_json}, name="ws/rust-app")
    make_project({"package.json": sample_package_json}, name="ws/frontend")
    make_project({"mypackage.cabal": sample_cabal_file}, name="ws/haskell-lib")
    make_project({"notes.txt": "todo"}, name="ws/notes")
    make_project({"Cargo.toml": sample_cargo_toml}, name="ws/.hidden")
    root = make_project({"README.md": "workspace"}, name="ws")
    return root


class TestScanProject:
    """Test single-directory summaries."""

    def test_primary_kind_used(self, workspace_root):
        """Should read identity and deps from the primary build system."""
        report = scan_project(workspace_root / "rust-app")

        assert report.dir_name == "rust-app"
        assert report.build_system == BuildSystemKind.CARGO
        assert report.build_systems == [BuildSystemKind.CARGO, BuildSystemKind.NODE]
        assert report.package_name == "my-crate"
        assert report.package_version == "0.3.1"
        assert len(report.dependencies) == 4

    def test_forced_kind(self, workspace_root):
        """Should read the forced build system instead of the primary one."""
        report = scan_project(workspace_root / "rust-app", BuildSystemKind.NODE)

        assert report.build_system == BuildSystemKind.NODE
        assert report.package_name == "test-project"

    def test_unknown_directory(self, workspace_root):
        """Should produce an empty report for directories without manifests."""
        report = scan_project(workspace_root / "notes")

        assert report.build_system == BuildSystemKind.UNKNOWN
        assert report.build_systems == []
        assert report.package_name is None
        assert report.dependencies == []

    def test_to_dict(self, workspace_root):
        """Should serialize kinds as display names and omit empty paths."""
        data = scan_project(workspace_root / "rust-app").to_dict()

        assert data["build_system"] == "cargo"
        assert data["build_systems"] == ["cargo", "node"]
        assert data["dependencies"][0] == {
            "name": "serde",
            "version_req": "1.0",
            "is_path_dep": False,
            "is_dev": False,
        }
        assert data["dependencies"][1]["path"] == "../local"


class TestScanWorkspace:
    """Test scanning a workspace root."""

    def test_projects_sorted_and_filtered(self, workspace_root):
        """Should list projects by directory name, skipping hidden dirs and files."""
        report = scan_workspace(workspace_root)

        assert [project.dir_name for project in report.projects] == ["frontend", "haskell-lib", "rust-app"]
        assert [path.name for path in report.skipped_dirs] == ["notes"]

    def test_cabal_project_summary(self, workspace_root):
        """Should summarize Cabal projects like any other."""
        report = scan_workspace(workspace_root)
        haskell = report.projects[1]

        assert haskell.build_system == BuildSystemKind.CABAL
        assert haskell.package_name == "mypackage"
        assert [dep.name for dep in haskell.dependencies] == ["aeson", "text", "mypackage"]

    def test_empty_workspace(self, tmp_path):
        """Should return an empty report for an empty directory."""
        report = scan_workspace(tmp_path)

        assert report.projects == []
        assert report.skipped_dirs == []
        assert report.to_dict()["root"] == str(tmp_path)

    def test_root_not_a_directory(self, tmp_path):
        """Should raise WorkspaceError for a missing root or a file."""
        with pytest.raises(WorkspaceError):
            scan_workspace(tmp_path / "missing")

        file_path = tmp_path / "file.txt"
        file_path.write_text("x")
        with pytest.raises(WorkspaceError):
            scan_workspace(file_path)

    @pytest.mark.skipif(os.geteuid() == 0, reason="root ignores directory permissions")
    def test_unsearchable_child_skipped(self, make_project, sample_cargo_toml):
        """Should skip a child whose contents cannot be listed or probed."""
        make_project({"Cargo.toml": sample_cargo_toml}, name="ws/good")
        locked = make_project({"Cargo.toml": sample_cargo_toml}, name="ws/locked")
        root = make_project({}, name="ws")
        locked.chmod(0o644)
        try:
            report = scan_workspace(root)
        finally:
            locked.chmod(0o755)

        assert [project.dir_name for project in report.projects] == ["good"]
        assert [path.name for path in report.skipped_dirs] == ["locked"]

    def test_over_long_child_path(self, tmp_path):
        """Should report an over-long project path as unknown instead of raising."""
        report = scan_project(tmp_path / ("b" * 300))

        assert report.build_system == BuildSystemKind.UNKNOWN
        assert report.dependencies == []
