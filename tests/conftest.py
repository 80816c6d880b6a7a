"""Pytest configuration and fixtures."""


import pytest


@pytest.fixture
def sample_cargo_toml():
    """Sample Cargo.toml content for testing."""
    return """
[package]
name = "my-crate"
version = "0.3.1"

[dependencies]
serde = "1.0"
local = { path = "../local", version = "0.1.0" }

[dev-dependencies]
serde = "1.0"

[build-dependencies]
cc = { version = "1.0" }
"""


@pytest.fixture
def sample_cabal_file():
    """Sample .cabal content with two stanzas declaring build-depends."""
    return """cabal-version:  2.4
name:           mypackage
version:        0.2.0

library
  exposed-modules: MyLib
  build-depends:
    , base >=4.14 && <5
    , aeson >=2.0
    , text
  hs-source-dirs: src

executable mypackage-exe
  main-is: Main.hs
  build-depends:
    , base
    , mypackage
    , aeson >=2.1
    , text
"""


@pytest.fixture
def sample_package_json():
    """Sample package.json content for testing."""
    return """
{
  "name": "test-project",
  "version": "1.2.3",
  "dependencies": {
    "express": "^4.18.0",
    "lodash": "~4.17.21"
  },
  "devDependencies": {
    "local-pkg": "file:../local-pkg"
  },
  "peerDependencies": {
    "react": ">=18"
  }
}
"""


@pytest.fixture
def make_project(tmp_path):
    """Create a project directory populated with the given manifest files."""

    def _make(files: dict[str, str], name: str = "project"):
        project = tmp_path / name
        project.mkdir(parents=True, exist_ok=True)
        for filename, content in files.items():
            (project / filename).write_text(content)
        return project

    return _make
