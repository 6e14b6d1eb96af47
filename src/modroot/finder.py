"""Upward root directory search bounded by a workspace boundary."""

from __future__ import annotations

import os
from pathlib import Path

from modroot.errors import RootNotFound
from modroot.utils.logging import get_logger

log = get_logger(__name__)


def normalize_dir(path: Path | str) -> Path:
    """Return ``path`` made absolute and lexically cleaned.

    Symlinks are left alone; ``..`` segments are collapsed the way
    ``os.path.normpath`` does. Both the start path and the boundary go
    through this function so that they compare equal when they name the
    same directory.
    """
    return Path(os.path.normpath(os.path.abspath(os.fspath(path))))


def normalize_boundary(boundary: Path | str | None) -> Path | None:
    """Normalize a boundary setting, treating unset or empty as no boundary.

    An empty string must not become ``Path(".")``: that would silently
    turn the current working directory into a stop point.
    """
    if boundary is None:
        return None
    boundary = os.fspath(boundary)
    if not boundary.strip():
        return None
    return normalize_dir(boundary)


def find_root_dir(
    marker_file: str,
    start_path: Path | str,
    boundary: Path | str | None = None,
) -> Path:
    """Find the nearest ancestor of ``start_path`` containing ``marker_file``.

    The search starts at the parent directory of ``start_path`` and moves
    up one level per step. It stops without a match when it reaches the
    filesystem root or the boundary directory; neither of those two is
    itself checked for the marker.

    Args:
        marker_file: File name identifying a root directory (e.g. ``go.mod``).
        start_path: Path of a source file; its parent is the first
            directory examined.
        boundary: Optional directory beyond which the search must not go.

    Returns:
        Absolute path of the directory containing the marker.

    Raises:
        RootNotFound: If no directory below the root/boundary holds the marker.
    """
    start = normalize_dir(start_path)
    stop = normalize_boundary(boundary)

    log.debug(
        "root_search_started",
        marker_file=marker_file,
        start_path=str(start),
        boundary=str(stop) if stop is not None else None,
    )

    current = start.parent
    while current != current.parent and current != stop:
        if (current / marker_file).exists():
            log.debug("root_found", root=str(current))
            return current
        current = current.parent

    log.debug("root_not_found", marker_file=marker_file, stopped_at=str(current))
    raise RootNotFound(marker_file, start, stop)
