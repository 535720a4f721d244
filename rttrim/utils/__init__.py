"""
Utility functions for the RT trimming procedures.
"""

from .helpers import (
    round_half_up,
    ordered_unique,
    is_valid_digits,
    is_finite_number,
)

__all__ = [
    "round_half_up",
    "ordered_unique",
    "is_valid_digits",
    "is_finite_number",
]
