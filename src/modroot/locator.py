"""Project root locator.

Ties caller resolution, the upward root search, declaration parsing and
relative path computation together behind one configured object::

    >>> locator = Locator()
    >>> root = locator.find_module_root()
    >>> locator.read_module_identity(root)
    'example.com/project'

The module-level functions delegate to a locator configured from the
process environment.
"""

from __future__ import annotations

from pathlib import Path

from modroot.caller import resolve_caller_path
from modroot.config.schema import LocatorConfig
from modroot.declaration import read_module_identity as _read_module_identity
from modroot.finder import find_root_dir as _find_root_dir
from modroot.paths import relative_package_path as _relative_package_path
from modroot.utils.logging import get_logger

log = get_logger(__name__)


class Locator:
    """Locate project roots and derive paths relative to them.

    Holds nothing but an immutable :class:`LocatorConfig`, so a single
    instance can be shared freely.

    ``caller_depth`` follows the same convention everywhere: ``1`` is the
    code that calls the locator method, ``2`` its caller, and so on.
    """

    def __init__(self, config: LocatorConfig | None = None) -> None:
        self.config = config if config is not None else LocatorConfig()

    def __repr__(self) -> str:
        return f"Locator(config={self.config!r})"

    def find_root_dir_with_marker(self, marker_file: str, caller_depth: int = 1) -> Path:
        """Find the root above the calling code's source file."""
        return self._root_from_caller(marker_file, caller_depth + 1)

    def find_module_root(self, caller_depth: int = 1) -> Path:
        """Find the root holding the configured marker file above the caller."""
        return self._root_from_caller(self.config.marker_file, caller_depth + 1)

    def find_root_dir(self, marker_file: str, start_path: Path | str) -> Path:
        """Find the root above an explicit start path."""
        return _find_root_dir(marker_file, start_path, self.config.boundary)

    def read_module_identity(self, root: Path | str) -> str:
        """Read the module identity from the configured declaration file under ``root``."""
        return _read_module_identity(root, self.config.declaration_file)

    def relative_package_path(self, root: Path | str, full_path: Path | str) -> Path:
        """Containing directory of ``full_path`` relative to ``root``."""
        return _relative_package_path(root, full_path)

    def module_import_path(self, full_path: Path | str) -> str:
        """Return the import path of the package containing ``full_path``.

        The module identity joined with the package directory relative to
        the root, e.g. ``example.com/project/pkg/destination`` for a file
        in ``<root>/pkg/destination``.
        """
        root = self.find_root_dir(self.config.marker_file, full_path)
        identity = self.read_module_identity(root)
        package_dir = self.relative_package_path(root, Path(full_path).absolute())
        if package_dir == Path("."):
            return identity
        return f"{identity}/{package_dir.as_posix()}"

    def _root_from_caller(self, marker_file: str, skip_frames: int) -> Path:
        # skip_frames counts from this frame, as resolve_caller_path does
        start_path = resolve_caller_path(skip_frames)
        log.debug("caller_resolved", start_path=str(start_path), skip_frames=skip_frames)
        return self.find_root_dir(marker_file, start_path)


def default_locator() -> Locator:
    """Locator with default settings and the boundary taken from the environment."""
    return Locator(LocatorConfig.from_env())


def find_root_dir_with_marker(marker_file: str, caller_depth: int = 1) -> Path:
    """Find the root holding ``marker_file`` above the calling code's source file."""
    return default_locator().find_root_dir_with_marker(marker_file, caller_depth + 1)


def find_root_dir(marker_file: str, start_path: Path | str) -> Path:
    """Find the root holding ``marker_file`` above ``start_path``."""
    return default_locator().find_root_dir(marker_file, start_path)


def read_module_identity(root: Path | str) -> str:
    """Module identity declared in ``<root>/go.mod``."""
    return default_locator().read_module_identity(root)


def relative_package_path(root: Path | str, full_path: Path | str) -> Path:
    """Containing directory of ``full_path`` relative to ``root``."""
    return _relative_package_path(root, full_path)
