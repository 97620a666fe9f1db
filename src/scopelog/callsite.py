"""
Call-site capture.

Resolves the function, file, line and column of a caller frame so scope
factories and leveled calls can default their metadata the way stdlib
``logging`` resolves ``funcName``/``lineno`` with ``stacklevel``.
"""

import inspect
from dataclasses import dataclass
from types import FrameType
from typing import Optional

UNKNOWN_FILE = "<unknown>"
UNKNOWN_FUNCTION = "<unknown>"


@dataclass(frozen=True)
class CallSite:
    function: str
    file: str
    line: int
    column: int


def _frame_at(stacklevel: int) -> Optional[FrameType]:
    # stacklevel=1 is the caller of the function that called _frame_at
    frame = inspect.currentframe()
    depth = stacklevel + 1
    while frame is not None and depth > 0:
        frame = frame.f_back
        depth -= 1
    return frame


def caller_file(stacklevel: int = 1) -> str:
    """Source file of the frame ``stacklevel`` levels above the caller."""
    frame = _frame_at(stacklevel + 1)
    if frame is None:
        return UNKNOWN_FILE
    return frame.f_code.co_filename


def capture(stacklevel: int = 1) -> CallSite:
    """Full call site of the frame ``stacklevel`` levels above the caller."""
    frame = _frame_at(stacklevel + 1)
    if frame is None:
        return CallSite(UNKNOWN_FUNCTION, UNKNOWN_FILE, 0, 0)

    column = 0
    info = inspect.getframeinfo(frame, context=0)
    positions = getattr(info, "positions", None)
    if positions is not None and positions.col_offset is not None:
        column = positions.col_offset + 1
    return CallSite(
        function=frame.f_code.co_name,
        file=frame.f_code.co_filename,
        line=frame.f_lineno,
        column=column,
    )
