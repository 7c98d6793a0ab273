"""Build mode and call-site capture.

``DEBUG`` mirrors the interpreter's ``__debug__`` constant, which is fixed when
the process starts: ``python -O`` compiles ``if __debug__:`` branches away.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Final

DEBUG: Final[bool] = __debug__


@dataclass(frozen=True)
class CallSite:
    """Source location of a call, rendered as ``[file:line]``."""

    file: str
    line: int

    def __str__(self) -> str:
        return f"[{self.file}:{self.line}]"


def _display_path(filename: str) -> str:
    try:
        relative = os.path.relpath(filename)
    except ValueError:
        # different drive on Windows
        return filename
    if relative == os.pardir or relative.startswith(os.pardir + os.sep):
        return filename
    return relative.replace(os.sep, "/")


def caller(stacklevel: int = 1) -> CallSite:
    """Capture the location of the code calling the current function.

    Args:
        stacklevel: 1 names the direct caller of the function that calls
            ``caller()``, 2 that caller's caller, and so on

    Returns:
        The captured call site
    """
    if stacklevel < 1:
        raise ValueError(f"stacklevel must be >= 1, got {stacklevel}")
    frame = sys._getframe(stacklevel + 1)
    return CallSite(_display_path(frame.f_code.co_filename), frame.f_lineno)


def tag(message: str | None, site: CallSite) -> str:
    """Append a call site to a message, or use it alone when there is none."""
    if message is None:
        return str(site)
    return f"{message} {site}"
