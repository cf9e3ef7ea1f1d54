# src/localizedstrings/interface_language.py
"""
Host interface language detection.

Reads the user's locale the same way a desktop or CLI application would:
the POSIX locale environment variables first, then the C library locale.
The value is returned in the host's own underscore form (``en_US``); use
:func:`localizedstrings.resolver.normalize_tag` before matching.
"""
import locale
import logging
import os

from .config import config

logger = logging.getLogger(__name__)

ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE")
_NEUTRAL_LOCALES = ("C", "POSIX")


def _clean(value):
    # LANGUAGE may hold a priority list such as "fr_CA:fr:en"
    value = value.split(":", 1)[0].strip()
    base = value.split(".", 1)[0].split("@", 1)[0]
    if not base or base in _NEUTRAL_LOCALES:
        return None
    return base


def get_interface_language():
    """
    Detect the host interface language.

    Prefers environment variables, then uses locale.setlocale/getlocale
    to read the user's configured locale.

    Returns:
        str: Locale identifier such as ``'en_US'`` or ``'zh_Hans_CN'``, or the
        configured fallback (empty by default) when nothing can be detected.
    """
    for var in ENV_VARS:
        val = os.environ.get(var)
        if val:
            cleaned = _clean(val)
            if cleaned:
                return cleaned

    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        # Keep whatever locale the process already has
        pass

    loc = locale.getlocale()[0]
    if loc:
        cleaned = _clean(loc)
        if cleaned:
            return cleaned

    fallback = config.get('localization', 'fallback_interface_language', '')
    logger.error(
        "Could not determine the interface language from the environment or "
        "the system locale. Set LANG or [localization] fallback_interface_language "
        "in config.ini; using %r.", fallback
    )
    return fallback
