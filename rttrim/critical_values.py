"""
Sample-size dependent SD multipliers for RT trimming.

The multipliers come from van Selst & Jolicoeur (1994), Table 4. The paper
tabulates a handful of anchor sample sizes; the full 1..100 table is filled
in by linear interpolation between them. Sample sizes below the first
anchor reuse its value, and sizes above 100 reuse the value for 100.

References
----------
Van Selst, M. & Jolicoeur, P. (1994). A solution to the effect of sample
size on outlier elimination. Quarterly Journal of Experimental Psychology,
47 (A), 631-650.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from .exceptions import ConfigurationError, SampleSizeOutOfRange


MAX_SAMPLE_SIZE = 100

ANCHOR_SAMPLE_SIZES = (4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 20, 25, 30, 35, 50, 100)

NONRECURSIVE_ANCHORS = (
    1.458, 1.680, 1.841, 1.961, 2.050, 2.120, 2.173, 2.220, 2.246,
    2.274, 2.310, 2.326, 2.391, 2.410, 2.4305, 2.450, 2.480, 2.500,
)

MODIFIED_RECURSIVE_ANCHORS = (
    8.000, 6.200, 5.300, 4.800, 4.475, 4.250, 4.110, 4.000, 3.920,
    3.850, 3.800, 3.750, 3.640, 3.595, 3.550, 3.535, 3.506, 3.500,
)


def _interpolate(sizes: Sequence[int], values: Sequence[float]) -> Tuple[float, ...]:
    grid = np.arange(1, MAX_SAMPLE_SIZE + 1)
    return tuple(float(v) for v in np.interp(grid, sizes, values))


@dataclass(frozen=True)
class CriticalValueTable:
    """
    Read-only lookup of SD multipliers indexed by sample size.

    Build one with :meth:`van_selst_jolicoeur` (the published values) or
    :meth:`from_anchors`, then hand it to the trimmers that need it.

    Attributes
    ----------
    nonrecursive : Tuple[float, ...]
        Multipliers for sample sizes 1..100, non-recursive procedure
    modified_recursive : Tuple[float, ...]
        Multipliers for sample sizes 1..100, modified-recursive procedure
    """

    nonrecursive: Tuple[float, ...]
    modified_recursive: Tuple[float, ...]

    def __post_init__(self):
        for name in ("nonrecursive", "modified_recursive"):
            values = getattr(self, name)
            if len(values) != MAX_SAMPLE_SIZE:
                raise ConfigurationError(
                    f"{name} must hold {MAX_SAMPLE_SIZE} multipliers, got {len(values)}"
                )
            if not all(np.isfinite(v) and v > 0 for v in values):
                raise ConfigurationError(f"{name} multipliers must be finite and positive")

    @classmethod
    def from_anchors(
        cls,
        sample_sizes: Sequence[int],
        nonrecursive: Sequence[float],
        modified_recursive: Sequence[float],
    ) -> "CriticalValueTable":
        """
        Build a table by linear interpolation between anchor sample sizes.

        Parameters
        ----------
        sample_sizes : Sequence[int]
            Strictly increasing anchor sample sizes within 1..100
        nonrecursive : Sequence[float]
            Non-recursive multiplier at each anchor
        modified_recursive : Sequence[float]
            Modified-recursive multiplier at each anchor

        Returns
        -------
        CriticalValueTable
            Table covering every sample size from 1 to 100
        """
        sizes = np.asarray(sample_sizes)
        if not (len(sizes) == len(nonrecursive) == len(modified_recursive)) or len(sizes) == 0:
            raise ConfigurationError("Anchor sizes and multipliers must be non-empty and equal length")
        if np.any(np.diff(sizes) <= 0):
            raise ConfigurationError("Anchor sample sizes must be strictly increasing")
        if sizes[0] < 1 or sizes[-1] > MAX_SAMPLE_SIZE:
            raise ConfigurationError(f"Anchor sample sizes must lie within 1..{MAX_SAMPLE_SIZE}")

        return cls(
            nonrecursive=_interpolate(sizes, nonrecursive),
            modified_recursive=_interpolate(sizes, modified_recursive),
        )

    @classmethod
    def van_selst_jolicoeur(cls) -> "CriticalValueTable":
        """Table built from the published van Selst & Jolicoeur anchors."""
        return cls.from_anchors(
            ANCHOR_SAMPLE_SIZES, NONRECURSIVE_ANCHORS, MODIFIED_RECURSIVE_ANCHORS
        )

    @staticmethod
    def _index(sample_size: int) -> int:
        if sample_size < 1:
            raise SampleSizeOutOfRange(sample_size)
        return min(int(sample_size), MAX_SAMPLE_SIZE) - 1

    def nonrecursive_multiplier(self, sample_size: int) -> float:
        """SD multiplier for the non-recursive procedure."""
        return self.nonrecursive[self._index(sample_size)]

    def modified_recursive_multiplier(self, sample_size: int) -> float:
        """SD multiplier for the modified-recursive procedure."""
        return self.modified_recursive[self._index(sample_size)]

    def to_frame(self) -> pd.DataFrame:
        """Table as a DataFrame with one row per sample size."""
        return pd.DataFrame({
            "sample_size": np.arange(1, MAX_SAMPLE_SIZE + 1),
            "nonrecursive": self.nonrecursive,
            "modified_recursive": self.modified_recursive,
        })
