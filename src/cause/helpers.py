"""Construction helper that tags errors with the caller's location."""

from __future__ import annotations

import logging
from typing import TypeVar

from cause.callsite import caller, tag
from cause.error import Cause
from cause.render import debug_text

T = TypeVar("T")

logger = logging.getLogger(__name__)


def cause(kind: T, msg: object | None = None, *, stacklevel: int = 1) -> Cause[T]:
    """Create a :class:`Cause`, tagging it with the call site in debug mode.

    With assertions enabled (the default) the message gets ``[file:line]``
    of the calling code appended; under ``python -O`` the message is exactly
    ``msg`` and no location is recorded.

    Args:
        kind: The error kind
        msg: Optional human-readable message
        stacklevel: Which frame to report, counted like ``warnings.warn``

    Returns:
        The new error

    Example::

        err = cause(ErrorType.NotFound, "no such content")
        str(err)  # "NotFound: no such content [app/views.py:42]"
    """
    text = None if msg is None else str(msg)
    if __debug__:
        site = caller(stacklevel)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("tagged %s at %s", debug_text(kind), site)
        return Cause(kind).with_message(tag(text, site))
    if text is None:
        return Cause(kind)
    return Cause(kind).with_message(text)
