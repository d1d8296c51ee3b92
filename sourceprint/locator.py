"""Locate the source position of the code calling into the printer."""

import inspect
import logging
import os

from sourceprint.models import CallSite

logger = logging.getLogger(__name__)


class StackUnavailable(Exception):
    """The caller's frame could not be resolved."""

    def __init__(self, message: str, depth: int):
        super().__init__(message)
        self.depth = depth


def locate(skip_frames: int = 0) -> CallSite:
    """Return the call site of the function calling locate().

    Frame 0 is the function that called locate(); skip_frames more frames are
    skipped above it. For a printer whose __call__ invokes locate(1), the
    result is the user code that called the printer.

    The reported line is the last line of the call instruction's source
    range, so a call spread over several lines reports its closing line.

    Args:
        skip_frames: Number of frames to skip above the direct caller

    Returns:
        CallSite for the resolved frame

    Raises:
        StackUnavailable: If frames are unsupported or the stack is too shallow
    """
    frame = inspect.currentframe()
    try:
        if frame is None:
            raise StackUnavailable("Interpreter does not expose stack frames", 0)

        # +1 to step out of locate() itself
        for _ in range(skip_frames + 1):
            frame = frame.f_back
            if frame is None:
                raise StackUnavailable(
                    f"Stack is shallower than {skip_frames} frames", skip_frames
                )

        code = frame.f_code
        positions = inspect.getframeinfo(frame, context=0).positions
        # Positions can be missing, e.g. under python -X no_debug_ranges
        line = positions.end_lineno or frame.f_lineno

        site = CallSite(
            function_name=code.co_qualname,
            file=os.path.abspath(code.co_filename),
            line=line,
        )
        logger.debug(f"Located call site: {site.function_name} at {site.file}:{line}")
        return site
    finally:
        del frame
