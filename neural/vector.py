"""
synapse module: neural/vector.py

Dot product plus the number formatting used by neuron diagnostics.
"""

from __future__ import annotations
import math
from decimal import Decimal
from typing import Sequence


class LengthMismatchError(AssertionError):
    """Raised when two vectors that must line up have different lengths."""


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Sum of a[i] * b[i]. Empty vectors give 0.0.

    Mismatched lengths raise LengthMismatchError instead of truncating.
    """
    if len(a) != len(b):
        raise LengthMismatchError(f"dot: length mismatch ({len(a)} != {len(b)})")
    product = 0.0
    for x, y in zip(a, b):
        product += x * y
    return product


def format_scalar(x: float) -> str:
    # shortest round-trip digits, no exponent, no trailing ".0"
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    text = format(Decimal(repr(float(x))), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_values(values: Sequence[float]) -> str:
    """Render as {a, b, c}; empty renders as {}."""
    return "{" + ", ".join(format_scalar(v) for v in values) + "}"
