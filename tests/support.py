"""Shared helpers for formatter tests."""

import math
from typing import Any

from yars_format.kernel.loader import parse_yaml
from yars_format.kernel.value import Tagged, is_mapping, is_number, is_sequence, structural_identity

FLOAT_REL_TOL = 1e-14
FLOAT_ABS_TOL = 1e-10


def approx_equal(a: Any, b: Any) -> bool:
    """Structural equality with float tolerance for numbers."""
    if is_number(a) and is_number(b):
        return _approx_number(a, b)
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if a is None or b is None:
        return a is b
    if isinstance(a, str) or isinstance(b, str):
        return a == b
    if is_sequence(a) and is_sequence(b):
        return len(a) == len(b) and all(approx_equal(x, y) for x, y in zip(a, b))
    if is_mapping(a) and is_mapping(b):
        if len(a) != len(b):
            return False
        # Keys match by structure, so a raw 5 in one tree finds Key(5) in the other.
        b_by_identity = {structural_identity(key): value for key, value in b.items()}
        for key, value in a.items():
            identity = structural_identity(key)
            if identity not in b_by_identity or not approx_equal(value, b_by_identity[identity]):
                return False
        return True
    if isinstance(a, Tagged) and isinstance(b, Tagged):
        return a.tag == b.tag and approx_equal(a.value, b.value)
    return False


def _approx_number(a, b) -> bool:
    if isinstance(a, int) and isinstance(b, int):
        return a == b
    x, y = float(a), float(b)
    if math.isnan(x) and math.isnan(y):
        return True
    if not math.isfinite(x) or not math.isfinite(y):
        return x == y
    return abs(x - y) <= max(FLOAT_ABS_TOL, FLOAT_REL_TOL * abs(x), FLOAT_REL_TOL * abs(y))


def reparse(text: str) -> Any:
    return parse_yaml(text)
