# src/localizedstrings/strings.py
"""
Localized string tables with default-language fallback.

Usage::

    from localizedstrings import LocalizedStrings

    strings = LocalizedStrings({
        "en": {"how": "How do you want your egg today?", "boiled": "Boiled egg"},
        "it": {"how": "Come vuoi il tuo uovo oggi?"},
    }, interface_language="it_IT")

    strings["how"].text     # "Come vuoi il tuo uovo oggi?"
    strings.text("boiled")  # "Boiled egg" (from the default language)

The first language in the dictionary is the default language. Every key it
defines is always available, whatever language is active.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional

from .config import config
from .formatter import format_string
from .interface_language import get_interface_language
from .models import FormattedSegments, GroupValue, StringValue, TableValue, to_plain, to_value
from .resolver import normalize_tag, resolve_language

logger = logging.getLogger(__name__)


class LocalizedStrings:
    """
    Resolve and merge translated string tables for one active language.

    Attributes:
        language (str): Currently active (resolved) language tag
    """

    def __init__(
        self,
        props: Mapping[str, Mapping[str, Any]],
        interface_language: Optional[str] = None,
        empty_is_missing: Optional[bool] = None,
    ) -> None:
        """
        Args:
            props: Language tag -> string table. The first tag is the default.
            interface_language: Host interface language (``en_US`` or
                ``en-US``). Detected from the system when omitted.
            empty_is_missing: Treat empty-string translations as missing and
                fill them from the default language. Defaults to the
                ``[localization] empty_is_missing`` setting.

        Raises:
            ValueError: If ``props`` has no languages.
            TypeError: If a language entry is not a mapping or holds an
                unsupported value (see :func:`models.to_value`).
        """
        if not props:
            raise ValueError("props must contain at least one language")

        self._raw_props: Dict[str, Mapping[str, Any]] = dict(props)
        self._props: Dict[str, GroupValue] = {}
        for tag, table in props.items():
            if not isinstance(table, Mapping):
                raise TypeError(f"String table for language {tag!r} must be a mapping, got {type(table).__name__}")
            self._props[tag] = to_value(table)

        if interface_language is None:
            interface_language = get_interface_language()
        self._interface_language = normalize_tag(interface_language)

        if empty_is_missing is None:
            empty_is_missing = config.get('localization', 'empty_is_missing', False)
        self._empty_is_missing = bool(empty_is_missing)
        self._log_missing = config.get('localization', 'log_missing_translations', True)

        self._available_languages: Optional[List[str]] = None
        self._strings: Dict[str, TableValue] = {}
        self.language = ""
        self.set_language(self._interface_language)

    # ── language selection ─────────────────────────────────────────────────

    @property
    def default_language(self) -> str:
        """The first language of the props dictionary."""
        return next(iter(self._props))

    def set_language(self, language: str) -> None:
        """
        Make the best match for ``language`` the active language.

        Can be called at any time to force a language independently of the
        interface language. Missing translations are filled from the default
        language.
        """
        default = self.default_language
        best = resolve_language(normalize_tag(language), self._props.keys(), default)
        self.language = best

        table = self._props.get(best)
        if table is None:
            return

        if best == default:
            self._strings = dict(table.entries)
        else:
            self._strings = self._fill_missing(self._props[default], table.entries, prefix="")
        logger.debug("Active language set to '%s' (requested '%s')", best, language)

    def _is_missing(self, value: Optional[TableValue]) -> bool:
        if value is None:
            return True
        return self._empty_is_missing and isinstance(value, StringValue) and value.text == ""

    def _fill_missing(
        self, defaults: GroupValue, strings: Mapping[str, TableValue], prefix: str
    ) -> Dict[str, TableValue]:
        # Builds a new dict in default-key order, then translation-only keys.
        # The source groups are shared, never modified.
        merged: Dict[str, TableValue] = {}
        for key, default_value in defaults.entries.items():
            current = strings.get(key)
            if self._is_missing(current):
                merged[key] = default_value
                if self._log_missing:
                    logger.warning(
                        "Missing localization for language '%s' and key '%s'.",
                        self.language, prefix + key,
                    )
            elif isinstance(current, GroupValue) and isinstance(default_value, GroupValue):
                merged[key] = GroupValue(
                    self._fill_missing(default_value, current.entries, prefix + key + ".")
                )
            else:
                merged[key] = current
        for key, value in strings.items():
            merged.setdefault(key, value)
        return merged

    def get_language(self) -> str:
        """The language currently displayed."""
        return self.language

    def get_interface_language(self) -> str:
        """The host interface language, hyphen-delimited."""
        return self._interface_language

    def get_available_languages(self) -> List[str]:
        """Languages passed in ``props``, in their original order."""
        if self._available_languages is None:
            self._available_languages = list(self._props)
        return self._available_languages

    # ── lookup ─────────────────────────────────────────────────────────────

    @property
    def strings(self) -> Mapping[str, TableValue]:
        """Read-only view of the merged table for the active language."""
        return MappingProxyType(self._strings)

    def __getitem__(self, key: str) -> TableValue:
        return self._strings[key]

    def __contains__(self, key: object) -> bool:
        return key in self._strings

    def __iter__(self) -> Iterator[str]:
        return iter(self._strings)

    def __len__(self) -> int:
        return len(self._strings)

    def get(self, key: str, default: Any = None) -> Any:
        return self._strings.get(key, default)

    def text(self, path: str) -> Optional[str]:
        """
        Return the active translation at a dotted path, e.g. ``"greet.morning"``.

        Returns ``None`` when the path does not exist or names a group.
        """
        node: Any = GroupValue(self._strings)
        for part in path.split("."):
            if not isinstance(node, GroupValue) or part not in node:
                logger.warning("No localized string at '%s' for language '%s'", path, self.language)
                return None
            node = node[part]
        if not isinstance(node, StringValue):
            logger.warning("'%s' is a group, not a string", path)
            return None
        return node.text

    def get_string(self, key: str, language: str) -> Any:
        """
        Return ``props[language][key]`` without resolution or fallback.

        Returns:
            The value exactly as given in ``props``, or ``None`` if the
            language or the key does not exist (or cannot be looked up).
        """
        try:
            return self._raw_props[language][key]
        except (KeyError, TypeError):
            logger.info("No localization found for key %s and language %s", key, language)
        return None

    def format_string(self, template: Any, *values: Any) -> FormattedSegments:
        """
        Replace ``{N}`` placeholders in ``template`` with ``values[N]``.

        ``template`` may be a plain string or a :class:`StringValue`, e.g.
        ``strings.format_string(strings["question"], "bread", "butter")``.
        """
        if isinstance(template, StringValue):
            template = template.text
        return format_string(template, *values)

    def as_dict(self) -> Dict[str, Any]:
        """The merged table as plain nested dicts."""
        return {key: to_plain(value) for key, value in self._strings.items()}

    def __repr__(self) -> str:
        return f"LocalizedStrings(language={self.language!r}, available={self.get_available_languages()!r})"
