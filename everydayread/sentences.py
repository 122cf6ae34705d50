"""Extracting lists of sentences from JSON documents."""

from __future__ import annotations

import json

__all__ = ["parse_string_list"]


def parse_string_list(text: str, key: str) -> list[str]:
    """Parse ``text`` as JSON and return the list of strings stored under ``key``.

    Raises ValueError for malformed JSON, KeyError when the key is absent and
    TypeError when the value is not a list of strings.
    """
    document = json.loads(text)
    if not isinstance(document, dict):
        raise TypeError("JSON document is not an object")
    if key not in document:
        raise KeyError(key)
    value = document[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise TypeError(f"value under {key!r} is not a list of strings")
    return list(value)