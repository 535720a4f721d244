"""
Per-cell SD trimming procedures of van Selst & Jolicoeur (1994).

Each trimmer takes the RTs of one participant x condition cell and returns
the trimmed mean, or ``None`` when no defined mean exists (no trials, a
single trial, or every trial falling outside the window). Trimmers own
the critical-value table they use and hold no other state, so they can be
shipped to worker processes.

Input order never matters: RTs are sorted before any arithmetic, so the
result is a function of the multiset of values only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

import numpy as np

from .critical_values import CriticalValueTable

logger = logging.getLogger(__name__)

# Per-cell strategy accepted by the grouping driver
CellTrimmer = Callable[[Sequence[float]], Optional[float]]

# The modified-recursive table starts at n = 4; below that nothing is trimmed
MIN_RECURSIVE_SAMPLE_SIZE = 4


def _sorted_rts(rts: Sequence[float]) -> np.ndarray:
    return np.sort(np.asarray(rts, dtype=float))


@dataclass(frozen=True)
class NonRecursiveTrimmer:
    """
    One pass of SD-window filtering with a sample-size adjusted cutoff.

    The window is ``mean +/- k * sd`` where ``k`` is looked up for the
    cell's sample size and ``sd`` uses the n - 1 divisor. Both bounds are
    strict: an RT equal to a bound is excluded.
    """

    table: CriticalValueTable = field(default_factory=CriticalValueTable.van_selst_jolicoeur)

    def __call__(self, rts: Sequence[float]) -> Optional[float]:
        x = _sorted_rts(rts)

        # Need two trials for an SD; identical trials give an empty window
        if x.size < 2 or x[0] == x[-1]:
            return None

        k = self.table.nonrecursive_multiplier(x.size)
        mean = x.mean()
        sd = x.std(ddof=1)
        kept = x[(x > mean - k * sd) & (x < mean + k * sd)]

        if kept.size == 0:
            return None
        return float(kept.mean())


@dataclass(frozen=True)
class ModifiedRecursiveTrimmer:
    """
    Iterative SD-window filtering with leave-one-out estimates.

    On each pass the largest RT is set aside and the mean and SD of the
    remaining trials define the upper cutoff; likewise the smallest RT for
    the lower cutoff. Extremes beyond their cutoff are removed and the pass
    repeats with a multiplier for the new sample size, until a pass removes
    nothing or fewer than four trials remain.
    """

    table: CriticalValueTable = field(default_factory=CriticalValueTable.van_selst_jolicoeur)

    def __call__(self, rts: Sequence[float]) -> Optional[float]:
        x = _sorted_rts(rts)
        passes = 0

        while x.size >= MIN_RECURSIVE_SAMPLE_SIZE:
            k = self.table.modified_recursive_multiplier(x.size)

            without_max = x[:-1]
            drop_max = x[-1] > without_max.mean() + k * without_max.std(ddof=1)

            without_min = x[1:]
            drop_min = x[0] < without_min.mean() - k * without_min.std(ddof=1)

            if not (drop_max or drop_min):
                break

            x = x[int(drop_min):x.size - int(drop_max)]
            passes += 1

        logger.debug(f"Modified-recursive trim converged after {passes} removal passes")

        if x.size == 0:
            return None
        return float(x.mean())


@dataclass(frozen=True)
class HybridTrimmer:
    """
    Average of the non-recursive and modified-recursive trimmed means.

    Undefined if either procedure is undefined for the cell.
    """

    table: CriticalValueTable = field(default_factory=CriticalValueTable.van_selst_jolicoeur)

    def __call__(self, rts: Sequence[float]) -> Optional[float]:
        non_recursive = NonRecursiveTrimmer(self.table)(rts)
        modified_recursive = ModifiedRecursiveTrimmer(self.table)(rts)

        if non_recursive is None or modified_recursive is None:
            return None
        return (non_recursive + modified_recursive) / 2
