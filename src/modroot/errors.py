"""Locator exception hierarchy for error handling and exit codes.

Every failure of a lookup is terminal for that call. Each exception class
carries a specific exit code so the CLI can map failures to process exit
status without inspecting messages.
"""

from __future__ import annotations

from pathlib import Path


class LocatorError(Exception):
    """Base exception for locator failures.

    Attributes:
        message: Human-readable error description.
        operation: Name of the locator operation that failed (optional).
        exit_code: Process exit code for CLI integration.

    Example:
        >>> raise LocatorError("Something went wrong", operation="root")
        LocatorError: [root] Something went wrong
    """

    def __init__(
        self,
        message: str,
        operation: str = "",
        exit_code: int = 1,
    ) -> None:
        self.message = message
        self.operation = operation
        self.exit_code = exit_code
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format error with operation prefix if available."""
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message


class CallerResolutionFailed(LocatorError):
    """Stack frame lookup failed at the requested depth.

    Raised when:
    - The call stack is shallower than the requested depth
    - The depth is negative
    - The frame has no source file on disk (``<stdin>``, ``<string>``)

    Exit code: 2
    """

    def __init__(self, message: str, skip_frames: int | None = None) -> None:
        self.skip_frames = skip_frames
        super().__init__(message, operation="caller", exit_code=2)


class RootNotFound(LocatorError):
    """Upward traversal reached the filesystem root or the boundary.

    Check that the marker file exists in an ancestor directory and that
    the boundary setting is not cutting the search short.

    Exit code: 3
    """

    def __init__(
        self,
        marker_file: str,
        start_path: Path | str,
        boundary: Path | str | None = None,
    ) -> None:
        self.marker_file = marker_file
        self.start_path = Path(start_path)
        self.boundary = Path(boundary) if boundary else None
        message = f"cannot find root dir for file [{marker_file}] in filepath [{start_path}]"
        if self.boundary is not None:
            message += f" (search bounded by {self.boundary})"
        super().__init__(message, operation="root", exit_code=3)


class ModuleIdentityNotFound(LocatorError):
    """Declaration file lacks a ``module`` directive.

    Exit code: 4
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        if self.path is None:
            message = "module path not found in declaration"
        else:
            message = f"module path not found in {self.path}"
        super().__init__(message, operation="module", exit_code=4)


class PathNotRelatable(LocatorError, ValueError):
    """Two paths cannot be expressed relative to each other.

    Also a ``ValueError`` so callers treating relativization failures the
    way ``os.path.relpath`` reports them keep working.

    Exit code: 5
    """

    def __init__(self, root: Path | str, full_path: Path | str, reason: str = "") -> None:
        self.root = root
        self.full_path = full_path
        message = f"cannot make {full_path} relative to {root}"
        if reason:
            message += f": {reason}"
        super().__init__(message, operation="relpath", exit_code=5)
