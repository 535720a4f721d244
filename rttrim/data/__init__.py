"""
Data module for the rttrim package.

Provides synthetic trial-level data for exercising the procedures.
"""

from .synthetic import generate_rt_data

__all__ = [
    "generate_rt_data",
]
