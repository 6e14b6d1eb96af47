"""Tests for locator error classes."""

from __future__ import annotations

from pathlib import Path

import pytest

from modroot.errors import (
    CallerResolutionFailed,
    LocatorError,
    ModuleIdentityNotFound,
    PathNotRelatable,
    RootNotFound,
)


class TestLocatorError:
    """Tests for the base LocatorError."""

    def test_default_exit_code_is_1(self):
        error = LocatorError("boom")
        assert error.exit_code == 1

    def test_operation_prefix(self):
        error = LocatorError("boom", operation="root")
        assert str(error) == "[root] boom"

    def test_no_operation_no_prefix(self):
        assert str(LocatorError("boom")) == "boom"


class TestExitCodes:
    """Each error kind maps to a distinct exit code."""

    @pytest.mark.parametrize(
        "error, code",
        [
            (CallerResolutionFailed("no frame"), 2),
            (RootNotFound("go.mod", "/x/y/z.go"), 3),
            (ModuleIdentityNotFound("/x/go.mod"), 4),
            (PathNotRelatable("/a", "b"), 5),
        ],
    )
    def test_exit_code(self, error, code):
        assert error.exit_code == code
        assert isinstance(error, LocatorError)


class TestRootNotFound:
    """Tests for RootNotFound context attributes."""

    def test_carries_search_context(self):
        error = RootNotFound("go.mod", "/x/y/z.go", boundary="/x")
        assert error.marker_file == "go.mod"
        assert error.start_path == Path("/x/y/z.go")
        assert error.boundary == Path("/x")
        assert "go.mod" in str(error)
        assert "bounded by" in str(error)

    def test_empty_boundary_is_none(self):
        error = RootNotFound("go.mod", "/x/y/z.go", boundary="")
        assert error.boundary is None
        assert "bounded by" not in str(error)


class TestPathNotRelatable:
    """PathNotRelatable is also a ValueError."""

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            raise PathNotRelatable("C:\\a", "D:\\b", "different drives")

    def test_reason_in_message(self):
        error = PathNotRelatable("C:\\a", "D:\\b", "different drives")
        assert "different drives" in error.message


def test_module_identity_not_found_without_path():
    error = ModuleIdentityNotFound()
    assert error.path is None
    assert "module path not found" in str(error)
