"""Value tree model.

A document is a tree of plain Python objects:

- None, bool, int, float, str
- list (tuple is accepted where a hashable sequence is needed, e.g. as a key)
- dict (insertion ordered; keys are str, None, or any of the above
  wrapped in Key so that YAML structure decides key identity)
- Tagged (an opaque tag wrapped around any of the above)

Trees are acyclic and never mutated by the kernel.
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Tagged:
    """A value carrying an explicit YAML tag (e.g. ``!secret``)."""
    tag: str
    value: Any


class Key:
    """A mapping key compared by YAML structure instead of Python equality.

    ``Key(1)``, ``Key(1.0)`` and ``Key(True)`` are three different keys, and
    sequences and mappings may be used as keys. The wrapped value is kept as is.
    """

    __slots__ = ("value", "_identity")

    def __init__(self, value: Any):
        if isinstance(value, Key):
            value = value.value
        self.value = value
        self._identity = structural_identity(value)

    def __eq__(self, other):
        if not isinstance(other, Key):
            return NotImplemented
        return self._identity == other._identity

    def __hash__(self):
        return hash(self._identity)

    def __repr__(self):
        return f"Key({self.value!r})"


def structural_identity(value: Any) -> Any:
    """Hashable form of value in which equal forms mean equal YAML values.

    Raises:
        TypeError: If value is not part of the value model
    """
    if isinstance(value, Key):
        return value._identity
    if value is None:
        return ("null",)
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, int):
        return ("int", value)
    if isinstance(value, float):
        return ("float", "nan" if math.isnan(value) else value)
    if isinstance(value, str):
        return ("str", value)
    if isinstance(value, Tagged):
        return ("tagged", value.tag, structural_identity(value.value))
    if is_sequence(value):
        return ("seq", tuple(structural_identity(item) for item in value))
    if is_mapping(value):
        return ("map", frozenset(
            (structural_identity(k), structural_identity(v)) for k, v in value.items()
        ))
    raise TypeError(f"cannot use value of type {type(value).__name__} as a key")


def unwrap_key(key: Any) -> Any:
    return key.value if isinstance(key, Key) else key


def is_sequence(obj: Any) -> bool:
    return isinstance(obj, (list, tuple))


def is_mapping(obj: Any) -> bool:
    return isinstance(obj, dict)


def is_number(obj: Any) -> bool:
    # bool is an int subclass but a separate variant
    return isinstance(obj, (int, float)) and not isinstance(obj, bool)


def describe_value(obj: Any) -> str:
    """Short kind name used in error messages."""
    obj = unwrap_key(obj)
    if obj is None:
        return "null"
    if isinstance(obj, bool):
        return "bool"
    if is_number(obj):
        return "number"
    if isinstance(obj, str):
        return "string"
    if is_sequence(obj):
        return "list"
    if is_mapping(obj):
        return "dict"
    if isinstance(obj, Tagged):
        return "tagged"
    return type(obj).__name__


def format_number(num: Any) -> str:
    """Canonical decimal text for an int or float.

    Floats follow the YAML scalar encoding: ``.nan``, ``.inf``, ``-.inf``,
    otherwise ``repr`` with a lower-case exponent and a ``.0`` inserted when
    the mantissa has no dot, so the text re-parses as a float.
    """
    if isinstance(num, int):
        return str(num)
    if math.isnan(num):
        return ".nan"
    if math.isinf(num):
        return ".inf" if num > 0 else "-.inf"
    text = repr(num).lower()
    if "." not in text and "e" in text:
        text = text.replace("e", ".0e", 1)
    return text
