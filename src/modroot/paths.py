"""Path helpers for package paths relative to a discovered root."""

from __future__ import annotations

import os
from pathlib import Path

from modroot.errors import PathNotRelatable
from modroot.utils.logging import get_logger

log = get_logger(__name__)


def relative_package_path(root: Path | str, full_path: Path | str) -> Path:
    """Return the containing directory of ``full_path`` relative to ``root``.

    ``root`` is a project root like ``/Users/username/project`` and
    ``full_path`` a path inside it like
    ``/Users/username/project/pkg/destination``; the last segment is
    dropped, so the result here is ``pkg``. A single remaining segment,
    or ``full_path`` equal to ``root``, gives ``.``.

    Raises:
        PathNotRelatable: If exactly one of the paths is absolute, or the
            platform cannot relate them (e.g. different drives).
    """
    root_str = os.fspath(root)
    full_str = os.fspath(full_path)
    log.debug("relative_package_path", root=root_str, full_path=full_str)

    if os.path.isabs(root_str) != os.path.isabs(full_str):
        raise PathNotRelatable(root, full_path, "one path is absolute and the other is not")

    try:
        result = os.path.relpath(full_str, root_str)
    except ValueError as e:
        raise PathNotRelatable(root, full_path, str(e)) from e

    log.debug("relative_package_path", result=result)
    return Path(result).parent
