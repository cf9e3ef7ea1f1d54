# src/localizedstrings/resolver.py
"""
Language tag matching.

Tags are treated as a hierarchy of hyphen-separated subtags: ``zh-Hans-CN``
is more specific than ``zh-Hans``, which is more specific than ``zh``. The
best match for a requested tag is the longest prefix (at subtag
boundaries) that exists among the available tags.

Functions:
    normalize_tag: Convert a host locale string (``en_US.UTF-8``) to ``en-US``
    resolve_language: Pick the best available tag for a requested one
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


def normalize_tag(tag: Optional[str]) -> str:
    """
    Normalise a locale identifier to hyphen-delimited form.

    Drops a POSIX encoding or modifier suffix and replaces every underscore
    with a hyphen, e.g. ``de_DE.UTF-8@euro`` -> ``de-DE``.

    Args:
        tag: Locale identifier, possibly ``None``.

    Returns:
        The normalised tag (``""`` for ``None``).
    """
    if not tag:
        return ""
    for sep in (".", "@"):
        if sep in tag:
            tag = tag.split(sep, 1)[0]
    return tag.strip().replace("_", "-")


def resolve_language(requested: str, available: Iterable[str], default: str) -> str:
    """
    Return the most specific tag in ``available`` matching ``requested``.

    The requested tag itself is tried first, then it is shortened one
    subtag at a time (``en-US-POSIX`` -> ``en-US`` -> ``en``). If nothing
    matches, ``default`` is returned.

    Args:
        requested: Hyphen-delimited language tag.
        available: Tags present in the props dictionary.
        default: Tag returned when no truncation matches.

    Returns:
        A member of ``available``, or ``default``.
    """
    tags = set(available)
    candidate = requested
    while True:
        if candidate in tags:
            if candidate != requested:
                logger.debug("Language '%s' matched as '%s'", requested, candidate)
            return candidate
        idx = candidate.rfind("-")
        if idx < 0:
            break
        candidate = candidate[:idx]

    logger.debug("No match for language '%s', using default '%s'", requested, default)
    return default
