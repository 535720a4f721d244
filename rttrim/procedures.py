"""
Public trimming procedures.

Each procedure takes trial-level RT data and returns a table of trimmed
mean RTs with participants as rows and conditions as columns:

- ``non_recursive``: one pass of SD trimming with a sample-size adjusted
  criterion
- ``modified_recursive``: iterative SD trimming with leave-one-out
  estimates of the mean and SD
- ``hybrid_recursive``: the average of the two

All three share the same filtering, enumeration and rounding rules (see
:func:`rttrim.driver.trim_by_cell`).

References
----------
Van Selst, M. & Jolicoeur, P. (1994). A solution to the effect of sample
size on outlier elimination. Quarterly Journal of Experimental Psychology,
47 (A), 631-650.

Examples
--------
>>> import pandas as pd
>>> from rttrim import non_recursive
>>> data = pd.DataFrame({
...     "participant": [1] * 6,
...     "condition": ["congruent"] * 6,
...     "rt": [200, 210, 205, 195, 208, 900],
...     "accuracy": [1] * 6,
... })
>>> float(non_recursive(data, min_rt=150).loc[1, "congruent"])
203.6
"""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

from config.settings import get_config

from .critical_values import CriticalValueTable
from .driver import trim_by_cell
from .trimmers import CellTrimmer, HybridTrimmer, ModifiedRecursiveTrimmer, NonRecursiveTrimmer

logger = logging.getLogger(__name__)


def _run(
    name: str,
    trimmer: CellTrimmer,
    data: pd.DataFrame,
    min_rt: float,
    participant_var: Optional[str],
    condition_var: Optional[str],
    rt_var: Optional[str],
    accuracy_var: Optional[str],
    omit_errors: Optional[bool],
    digits: Optional[int],
    n_workers: Optional[int],
    show_progress: Optional[bool],
) -> pd.DataFrame:
    settings = get_config().trimming
    if omit_errors is None:
        omit_errors = settings.omit_errors

    logger.info(f"Running {name} trimming (min_rt={min_rt}, omit_errors={omit_errors})")

    return trim_by_cell(
        data,
        min_rt,
        trimmer,
        participant_var=settings.participant_var if participant_var is None else participant_var,
        condition_var=settings.condition_var if condition_var is None else condition_var,
        rt_var=settings.rt_var if rt_var is None else rt_var,
        accuracy_var=settings.accuracy_var if accuracy_var is None else accuracy_var,
        omit_errors=omit_errors,
        digits=settings.digits if digits is None else digits,
        n_workers=settings.n_workers if n_workers is None else n_workers,
        show_progress=settings.show_progress if show_progress is None else show_progress,
    )


def non_recursive(
    data: pd.DataFrame,
    min_rt: float,
    participant_var: Optional[str] = None,
    condition_var: Optional[str] = None,
    rt_var: Optional[str] = None,
    accuracy_var: Optional[str] = None,
    omit_errors: Optional[bool] = None,
    digits: Optional[int] = None,
    table: Optional[CriticalValueTable] = None,
    n_workers: Optional[int] = None,
    show_progress: Optional[bool] = None,
) -> pd.DataFrame:
    """
    Non-recursive SD trimming per participant and condition.

    For every cell, RTs further than ``k`` SDs from the cell mean are
    excluded, with ``k`` chosen for the cell's sample size, and the mean of
    the remaining RTs is reported.

    Parameters
    ----------
    data : pd.DataFrame
        Trial-level data with participant, condition, RT and accuracy
        columns. RTs may be in seconds or milliseconds.
    min_rt : float
        Lower criterion for acceptable RTs, in the unit of the RT column.
        RTs at or below it are removed before SD trimming.
    participant_var : Optional[str]
        Column identifying participants (configuration default: "participant")
    condition_var : Optional[str]
        Column identifying conditions (configuration default: "condition")
    rt_var : Optional[str]
        Column containing RTs (configuration default: "rt")
    accuracy_var : Optional[str]
        Column containing accuracy, 1 for correct and 0 for error trials
        (configuration default: "accuracy")
    omit_errors : Optional[bool]
        Remove error trials before trimming (configuration default: True)
    digits : Optional[int]
        Decimal places to round to (configuration default: 3)
    table : Optional[CriticalValueTable]
        Critical values; defaults to the van Selst & Jolicoeur table
    n_workers : Optional[int]
        Worker processes for the per-cell computation
    show_progress : Optional[bool]
        Show a progress bar over cells

    Returns
    -------
    pd.DataFrame
        Trimmed mean RTs, participants as rows and conditions as columns;
        ``<NA>`` where a cell has no defined mean
    """
    trimmer = NonRecursiveTrimmer(table or CriticalValueTable.van_selst_jolicoeur())
    return _run(
        "non-recursive", trimmer, data, min_rt, participant_var, condition_var,
        rt_var, accuracy_var, omit_errors, digits, n_workers, show_progress,
    )


def modified_recursive(
    data: pd.DataFrame,
    min_rt: float,
    participant_var: Optional[str] = None,
    condition_var: Optional[str] = None,
    rt_var: Optional[str] = None,
    accuracy_var: Optional[str] = None,
    omit_errors: Optional[bool] = None,
    digits: Optional[int] = None,
    table: Optional[CriticalValueTable] = None,
    n_workers: Optional[int] = None,
    show_progress: Optional[bool] = None,
) -> pd.DataFrame:
    """
    Modified-recursive SD trimming per participant and condition.

    Takes the same arguments as :func:`non_recursive`.
    """
    trimmer = ModifiedRecursiveTrimmer(table or CriticalValueTable.van_selst_jolicoeur())
    return _run(
        "modified-recursive", trimmer, data, min_rt, participant_var, condition_var,
        rt_var, accuracy_var, omit_errors, digits, n_workers, show_progress,
    )


def hybrid_recursive(
    data: pd.DataFrame,
    min_rt: float,
    participant_var: Optional[str] = None,
    condition_var: Optional[str] = None,
    rt_var: Optional[str] = None,
    accuracy_var: Optional[str] = None,
    omit_errors: Optional[bool] = None,
    digits: Optional[int] = None,
    table: Optional[CriticalValueTable] = None,
    n_workers: Optional[int] = None,
    show_progress: Optional[bool] = None,
) -> pd.DataFrame:
    """
    Hybrid trimming: the mean of the non-recursive and modified-recursive
    trimmed means for each cell.

    A cell is missing when either procedure has no defined mean for it.
    Takes the same arguments as :func:`non_recursive`.
    """
    trimmer = HybridTrimmer(table or CriticalValueTable.van_selst_jolicoeur())
    return _run(
        "hybrid-recursive", trimmer, data, min_rt, participant_var, condition_var,
        rt_var, accuracy_var, omit_errors, digits, n_workers, show_progress,
    )
