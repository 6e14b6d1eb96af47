"""Pytest configuration and fixtures.

The sys.path manipulation below enables running tests directly from a
checkout without requiring `pip install -e .`.
"""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


GO_MOD = """\
// Example module
module "example.com/project.git"

go 1.22

require github.com/stretchr/testify v1.9.0
"""


@pytest.fixture
def go_project(tmp_path: Path) -> Path:
    """Create ``<tmp>/workspace/project`` with a go.mod and a nested package.

    Layout::

        workspace/
          project/
            go.mod
            main.go
            pkg/sub/file.go
    """
    project = tmp_path / "workspace" / "project"
    package_dir = project / "pkg" / "sub"
    package_dir.mkdir(parents=True)
    (project / "go.mod").write_text(GO_MOD, encoding="utf-8")
    (project / "main.go").write_text("package main\n", encoding="utf-8")
    (package_dir / "file.go").write_text("package sub\n", encoding="utf-8")
    return project


@pytest.fixture
def no_boundary_env(monkeypatch):
    """Remove the default boundary variable from the environment."""
    monkeypatch.delenv("GOPATH", raising=False)
