# src/localizedstrings/formatter.py
"""
Positional placeholder formatting.

Templates use numbered placeholders, ``{0}``, ``{1}`` and so on::

    format_string("I'd like some {0} and {1}", "bread", "butter")
    # -> ["I'd like some ", "bread", " and ", "butter"]

The result is a list of segments rather than a string so that values which
are not text (widgets, markup nodes) survive for the rendering layer. Use
:func:`render` when plain text is all that is needed.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Iterable

from .models import CompositeValue, FormattedSegments, KeyedChild, PlainValue

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"(\{\d+\})")


def format_string(template: str, *values: Any) -> FormattedSegments:
    """
    Substitute ``{N}`` placeholders in ``template`` with ``values[N]``.

    Args:
        template: Text containing numbered placeholders.
        *values: Values for the placeholders, by position.

    Returns:
        Ordered segments: literal text interleaved with substituted values.
        A :class:`CompositeValue` becomes a list of :class:`KeyedChild`
        keyed by the segment's position. An index with no matching value
        yields ``None``.
    """
    segments = [part for part in PLACEHOLDER_PATTERN.split(template) if part]
    result: FormattedSegments = []
    for index, part in enumerate(segments):
        if not PLACEHOLDER_PATTERN.fullmatch(part):
            result.append(part)
            continue

        position = int(part[1:-1])
        if position < len(values):
            value = values[position]
        else:
            logger.debug("No value supplied for placeholder %s in %r", part, template)
            value = None

        if isinstance(value, CompositeValue):
            result.append([KeyedChild(str(index), child) for child in value])
        elif isinstance(value, PlainValue):
            result.append(value.value)
        else:
            result.append(value)
    return result


def render(segments: Iterable[Any]) -> str:
    """Concatenate formatted segments into plain text."""
    parts = []
    for segment in segments:
        if segment is None:
            continue
        if isinstance(segment, list):
            parts.extend(str(child.value if isinstance(child, KeyedChild) else child) for child in segment)
        else:
            parts.append(str(segment))
    return "".join(parts)
