"""Call-site stack capture, independent of any exception object.

An error handed to ``send_http_error`` may have been created on an earlier
turn of the event loop, so its own traceback points at the callback that
produced it. These helpers record the frames of the code that is running
*now*, innermost first.
"""

import sys
import traceback
from types import FrameType


def capture_call_site(limit: int | None = None) -> str:
    """Return the stack starting at the caller of this function.

    Args:
        limit: Maximum number of frames to keep, innermost first.
    """
    return _format_frames(sys._getframe(1), limit)


def capture_construction_site(instance: object, limit: int | None = None) -> str:
    """Return the stack starting at the code that constructed ``instance``.

    Frames whose ``self`` is ``instance`` (the constructor chain) are skipped.
    """
    frame: FrameType | None = sys._getframe(1)
    while frame is not None and frame.f_locals.get("self") is instance:
        frame = frame.f_back
    if frame is None:
        return ""
    return _format_frames(frame, limit)


def _format_frames(frame: FrameType, limit: int | None) -> str:
    summary = traceback.StackSummary.extract(traceback.walk_stack(frame), limit=limit)
    return "".join(summary.format())
