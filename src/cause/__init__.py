"""Generic error wrapping: an exception keyed by an error kind.

Wrap a kind, optionally add a message and a lower-level source, and raise it::

    from cause import Cause, cause

    raise Cause(ErrorType.InternalError).with_message("oops!").with_source(err)
    raise cause(ErrorType.NotFound, "no such content")  # tagged with [file:line]
"""

from .callsite import DEBUG, CallSite
from .error import Cause
from .helpers import cause
from .render import debug_text

__all__ = [
    # Core
    "Cause",
    "cause",
    # Rendering
    "debug_text",
    # Call sites
    "CallSite",
    "DEBUG",
]
