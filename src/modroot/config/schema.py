"""Config schema definitions."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator


class LocatorConfig(BaseModel):
    """Settings shared by every lookup a Locator performs.

    ``boundary`` is the explicit traversal limit. It is only filled from
    the ``boundary_env`` environment variable by :meth:`with_env_boundary`,
    never read from the process environment during a search.
    """

    model_config = ConfigDict(frozen=True)

    marker_file: str = "go.mod"
    declaration_file: str = "go.mod"
    boundary_env: str = "GOPATH"
    boundary: str | None = None

    @field_validator("marker_file", "declaration_file")
    @classmethod
    def validate_file_name(cls, value: str) -> str:
        """Reject empty names and names that are paths rather than file names."""
        value = value.strip()
        if not value:
            raise ValueError("file name must not be empty")
        if "/" in value or (os.sep != "/" and os.sep in value):
            raise ValueError(f"expected a bare file name, got {value!r}")
        return value

    def with_env_boundary(self, environ: Mapping[str, str] | None = None) -> "LocatorConfig":
        """Return a copy whose boundary comes from the environment if unset."""
        if self.boundary:
            return self
        env = os.environ if environ is None else environ
        value = env.get(self.boundary_env, "")
        if not value.strip():
            return self
        return self.model_copy(update={"boundary": value})

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "LocatorConfig":
        """Build a config with defaults, ``overrides`` and the environment boundary."""
        return cls(**overrides).with_env_boundary(environ)
