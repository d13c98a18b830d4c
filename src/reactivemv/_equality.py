"""Coercive equality used to decide whether a new state is a change.

Numbers and numeric strings compare by value, so ``1`` and ``"1"`` are the
same state, and so are ``0`` and ``""``. Booleans count as 0/1. ``None`` is
only equal to ``None``. Anything else falls back to ``==``.
"""

from __future__ import annotations

import math
import re
from numbers import Number

_DECIMAL = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_RADIX = re.compile(r"0(?:[xX](?P<hex>[0-9a-fA-F]+)|[oO](?P<oct>[0-7]+)|[bB](?P<bin>[01]+))")


def _to_number(value: object) -> float | None:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, Number):
        try:
            return float(value)
        except TypeError:
            return None  # complex
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        return _parse_numeric(text)
    return None


def _parse_numeric(text: str) -> float | None:
    """Decimal, exponent, Infinity or 0x/0o/0b literals; nothing else."""
    if _DECIMAL.fullmatch(text):
        return float(text.replace("Infinity", "inf"))
    radix = _RADIX.fullmatch(text)
    if radix is None:
        return None
    if radix["hex"]:
        return float(int(radix["hex"], 16))
    if radix["oct"]:
        return float(int(radix["oct"], 8))
    return float(int(radix["bin"], 2))


def _is_scalar(value: object) -> bool:
    return isinstance(value, (Number, str))


def loosely_equal(a: object, b: object) -> bool:
    if a is None or b is None:
        return a is b
    if isinstance(a, float) and math.isnan(a):
        return False
    if a is b:
        return True
    if type(a) is type(b) or not (_is_scalar(a) and _is_scalar(b)):
        return bool(a == b)
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    left, right = _to_number(a), _to_number(b)
    if left is None or right is None:
        return False
    return left == right
