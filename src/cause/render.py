"""Text rendering for wrapped errors."""

from __future__ import annotations

from enum import Enum
from typing import Any


def debug_text(value: Any) -> str:
    """Return the structural text form of an error kind.

    Enum members render as their bare member name, everything else as ``repr()``.
    """
    if isinstance(value, Enum) and value.name is not None:
        return value.name
    return repr(value)


def render(kind: Any, message: str | None = None, source: BaseException | None = None) -> str:
    """Render a kind with its optional message and chained source.

    Args:
        kind: The error kind
        message: Human-readable context, appended after ``": "``
        source: The lower-level error, rendered under a ``Caused by:`` block

    Returns:
        ``"<kind>[: <message>][\\n\\nCaused by:\\n    <source>\\n]"``
    """
    text = debug_text(kind)
    if message is not None:
        text = f"{text}: {message}"
    if source is not None:
        text += f"\n\nCaused by:\n    {source}\n"
    return text
