"""Lookup of translated strings by language preference."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

TranslationEntries = Mapping[str, str]


def find_language_entry(languages: Sequence[str] | str, entries: TranslationEntries) -> str:
    """Return the entry whose key prefixes the most preferred language tag.

    ``entries["default"]`` is either the key of the fallback entry (``"en"``) or
    the fallback text itself. A table without any usable entry yields ``""``.
    """
    if isinstance(languages, str):
        languages = [languages]
    for language in languages:
        for key, text in entries.items():
            if key != "default" and language.startswith(key):
                return text
    default = entries.get("default")
    if default is None:
        return ""
    if default in entries and default != "default":
        return entries[default]
    return default
