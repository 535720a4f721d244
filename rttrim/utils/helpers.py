"""
Utility helper functions for the RT trimming procedures.
"""

from __future__ import annotations

import numbers
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Iterable, List, Optional

import numpy as np
import pandas as pd


def round_half_up(value: Optional[float], digits: int) -> Optional[float]:
    """
    Round a value to a fixed number of decimal places, ties away from zero.

    Rounding works on the shortest decimal representation of the float, so
    2.675 rounds to 2.68 even though its binary value is slightly below the
    tie. ``None`` and non-finite values pass through unchanged.

    Parameters
    ----------
    value : Optional[float]
        Value to round
    digits : int
        Number of decimal places

    Returns
    -------
    Optional[float]
        Rounded value
    """
    if value is None:
        return None
    value = float(value)
    if not np.isfinite(value):
        return value

    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the requested places
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def ordered_unique(values: Iterable[Any]) -> List[Any]:
    """
    Distinct values in order of first appearance.

    Parameters
    ----------
    values : Iterable[Any]
        Values to deduplicate

    Returns
    -------
    List[Any]
        Unique values, first occurrence order
    """
    return list(pd.unique(pd.Series(list(values), dtype=object)))


def is_valid_digits(digits: Any) -> bool:
    """True for a non-negative integer (booleans excluded)."""
    return (
        isinstance(digits, numbers.Integral)
        and not isinstance(digits, bool)
        and digits >= 0
    )


def is_finite_number(value: Any) -> bool:
    """True for a finite real number (booleans excluded)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return bool(np.isfinite(value))
