from pathlib import Path

import pydantic
import pytest

from modroot.config.loader import load_config
from modroot.config.schema import LocatorConfig


def test_load_config_merges_overrides(tmp_path: Path, monkeypatch):
    base = """
marker_file: go.mod
declaration_file: go.mod
boundary: "${MODROOT_WORKSPACE}"
"""
    override = """
marker_file: go.work
"""
    monkeypatch.setenv("MODROOT_WORKSPACE", "/srv/workspace")
    base_path = tmp_path / "base.yaml"
    override_path = tmp_path / "override.yaml"
    base_path.write_text(base, encoding="utf-8")
    override_path.write_text(override, encoding="utf-8")

    cfg = load_config([base_path, override_path])
    assert cfg.boundary == "/srv/workspace"
    assert cfg.marker_file == "go.work"
    assert cfg.declaration_file == "go.mod"


def test_load_config_single_path_and_env_boundary(tmp_path: Path):
    path = tmp_path / "modroot.yaml"
    path.write_text("boundary_env: WORKSPACE_ROOT\n", encoding="utf-8")

    cfg = load_config(path, environ={"WORKSPACE_ROOT": "/home/me/ws"})
    assert cfg.boundary_env == "WORKSPACE_ROOT"
    assert cfg.boundary == "/home/me/ws"


def test_load_config_file_boundary_wins_over_env(tmp_path: Path):
    path = tmp_path / "modroot.yaml"
    path.write_text("boundary: /from/file\n", encoding="utf-8")

    cfg = load_config(path, environ={"GOPATH": "/from/env"})
    assert cfg.boundary == "/from/file"


def test_load_config_empty_file(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    cfg = load_config(path, environ={})
    assert cfg == LocatorConfig()


def test_load_config_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- go.mod\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        load_config(path, environ={})


class TestLocatorConfig:
    """Tests for LocatorConfig validation and environment handling."""

    def test_defaults(self):
        cfg = LocatorConfig()
        assert cfg.marker_file == "go.mod"
        assert cfg.declaration_file == "go.mod"
        assert cfg.boundary_env == "GOPATH"
        assert cfg.boundary is None

    @pytest.mark.parametrize("name", ["", "   ", "sub/go.mod"])
    def test_rejects_bad_file_names(self, name):
        with pytest.raises(pydantic.ValidationError):
            LocatorConfig(marker_file=name)

    def test_frozen(self):
        cfg = LocatorConfig()
        with pytest.raises(pydantic.ValidationError):
            cfg.marker_file = "other"

    def test_from_env(self):
        cfg = LocatorConfig.from_env({"GOPATH": "/go"})
        assert cfg.boundary == "/go"

    def test_from_env_empty_value_means_no_boundary(self):
        assert LocatorConfig.from_env({"GOPATH": ""}).boundary is None
        assert LocatorConfig.from_env({}).boundary is None

    def test_from_env_overrides(self):
        cfg = LocatorConfig.from_env({"WS": "/ws"}, boundary_env="WS", marker_file="pyproject.toml")
        assert cfg.marker_file == "pyproject.toml"
        assert cfg.boundary == "/ws"
