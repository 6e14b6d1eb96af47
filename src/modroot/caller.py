"""Resolve the source file of a frame in the active call chain."""

from __future__ import annotations

import inspect
import os
from pathlib import Path
from types import FrameType

from modroot.errors import CallerResolutionFailed


def resolve_caller_path(skip_frames: int = 0) -> Path:
    """Return the absolute source file path of a frame on the call stack.

    ``skip_frames=0`` names the function that called ``resolve_caller_path``;
    every increment walks one frame further up the chain.

    Raises:
        CallerResolutionFailed: If the depth is negative, the stack is not
            that deep, or the frame was not loaded from a file.
    """
    if skip_frames < 0:
        raise CallerResolutionFailed(
            f"skip_frames must be >= 0, got {skip_frames}", skip_frames=skip_frames
        )

    frame: FrameType | None = inspect.currentframe()
    try:
        # Step past this function's own frame, then the requested number.
        for _ in range(skip_frames + 1):
            if frame is None:
                break
            frame = frame.f_back

        if frame is None:
            raise CallerResolutionFailed(
                f"failed to get caller info at depth {skip_frames}",
                skip_frames=skip_frames,
            )

        filename = frame.f_code.co_filename
        if not filename or (filename.startswith("<") and filename.endswith(">")):
            raise CallerResolutionFailed(
                f"frame at depth {skip_frames} has no source file ({filename or 'unknown'})",
                skip_frames=skip_frames,
            )
        return Path(os.path.abspath(filename))
    finally:
        # frame -> f_locals -> frame cycle
        del frame
