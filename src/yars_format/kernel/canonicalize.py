"""Recursive key sorting for value trees.

Rules:
- Mapping entries sorted by key_sort_key (plain code-point order)
- Sort is stable: keys deriving the same text keep their input order
  (so the number 5 and the string "5" stay where they were relative to each other)
- Sequences preserve order; each element is canonicalized
- Scalars and tagged values pass through unchanged
- Keys are kept as given; a Key sorts by the value it wraps
- The input tree is never mutated; a new tree is returned
"""

from typing import Any, List, Tuple

from .emitter import emit
from .value import Key, Tagged, format_number, is_mapping, is_number, is_sequence


def key_sort_key(key: Any) -> str:
    """Derive the comparable text for a mapping key.

    Args:
        key: Any value usable as a mapping key

    Returns:
        Sort text (see module docstring for ordering rules)
    """
    if isinstance(key, Key):
        return key_sort_key(key.value)
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if is_number(key):
        return format_number(key)
    if isinstance(key, str):
        return key
    if isinstance(key, Tagged):
        return f"{key.tag}:{key_sort_key(key.value)}"
    if is_sequence(key) or is_mapping(key):
        return emit(canonicalize(key)).replace("\n", " ").strip()
    return repr(key)


def canonicalize(value: Any) -> Any:
    """Return a copy of value with every mapping sorted by key_sort_key."""
    if is_mapping(value):
        entries: List[Tuple[str, Any, Any]] = [
            (key_sort_key(key), key, canonicalize(item))
            for key, item in value.items()
        ]
        entries.sort(key=lambda entry: entry[0])
        return {key: item for _, key, item in entries}
    if isinstance(value, tuple):
        return tuple(canonicalize(item) for item in value)
    if isinstance(value, list):
        return [canonicalize(item) for item in value]
    return value
