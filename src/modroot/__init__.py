"""Locate a project's root from the calling code and derive paths below it.

Example:
    >>> from modroot import find_root_dir_with_marker, read_module_identity
    >>> root = find_root_dir_with_marker("go.mod")
    >>> read_module_identity(root)
    'example.com/project'
"""

from modroot.errors import (
    CallerResolutionFailed,
    LocatorError,
    ModuleIdentityNotFound,
    PathNotRelatable,
    RootNotFound,
)
from modroot.locator import (
    Locator,
    default_locator,
    find_root_dir,
    find_root_dir_with_marker,
    read_module_identity,
    relative_package_path,
)

__version__ = "0.1.0"

__all__ = [
    "CallerResolutionFailed",
    "Locator",
    "LocatorError",
    "ModuleIdentityNotFound",
    "PathNotRelatable",
    "RootNotFound",
    "default_locator",
    "find_root_dir",
    "find_root_dir_with_marker",
    "read_module_identity",
    "relative_package_path",
]
