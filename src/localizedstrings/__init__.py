# src/localizedstrings/__init__.py
"""
localizedstrings - runtime string localization with language fallback.

Pick the best available translation for a requested locale, fill the gaps
from a default language and format strings with numbered placeholders.

Main Components:
- strings: LocalizedStrings, the merged lookup surface
- resolver: Language tag normalisation and best-match resolution
- formatter: ``{N}`` placeholder substitution
- models: Tagged string table and formatter argument types
- interface_language: Host interface language detection
- config: Configuration management
"""

from .formatter import format_string, render
from .models import CompositeValue, GroupValue, KeyedChild, PlainValue, StringValue
from .resolver import normalize_tag, resolve_language
from .strings import LocalizedStrings

__version__ = "1.0.0"
__author__ = "localizedstrings Team"
__description__ = "Runtime string localization with best-match language fallback"

__all__ = [
    "LocalizedStrings",
    "StringValue",
    "GroupValue",
    "PlainValue",
    "CompositeValue",
    "KeyedChild",
    "format_string",
    "render",
    "normalize_tag",
    "resolve_language",
]
