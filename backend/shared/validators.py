"""Parsing helpers for list-valued settings read from the environment."""

import json


def parse_string_list(value: str | list[str], *, allow_empty: bool = False) -> list[str]:
    """Parse a list of strings from a settings value.

    Accepts a list (returned as-is), a JSON array string ('["a","b"]') or a
    comma-separated string ('a,b'). Raises ValueError for malformed JSON,
    non-string items, and, unless allow_empty is set, an empty result.
    """
    if isinstance(value, list):
        items = value
    else:
        stripped = value.strip()
        if stripped.startswith("["):
            try:
                items = json.loads(stripped)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON array: {e}") from e
            if not isinstance(items, list):
                raise ValueError("JSON value must be an array of strings")
        else:
            items = [item.strip() for item in stripped.split(",") if item.strip()]

    if not all(isinstance(item, str) for item in items):
        raise ValueError("JSON value must be an array of strings")
    if not items and not allow_empty:
        raise ValueError("String list value must not be empty")
    return items
