"""
Grouping driver shared by every trimming procedure.

Turns trial-level data into a participant x condition table of trimmed
mean RTs, delegating the per-cell computation to a trimmer strategy
(see :mod:`rttrim.trimmers`).

The table's rows and columns are enumerated from the *unfiltered* data,
while the trimmed means are computed from the data left after the error
and minimum-RT filters. A participant or condition present only in
discarded trials therefore still gets a row or column, filled with missing
values.
"""

from __future__ import annotations

import logging
from multiprocessing import Pool
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from .exceptions import ConfigurationError
from .trimmers import CellTrimmer
from .utils.helpers import is_finite_number, is_valid_digits, ordered_unique, round_half_up

logger = logging.getLogger(__name__)


def _trim_cell(job: Tuple[CellTrimmer, np.ndarray]) -> Optional[float]:
    trimmer, rts = job
    return trimmer(rts)


def validate_trial_data(
    data: pd.DataFrame,
    min_rt: float,
    participant_var: str,
    condition_var: str,
    rt_var: str,
    accuracy_var: str,
    omit_errors: bool,
    digits: int,
    n_workers: int,
) -> None:
    """
    Check arguments and data layout before any trimming happens.

    Raises
    ------
    ConfigurationError
        If a required column is missing, the RT column is not numeric,
        ``min_rt`` is not a finite number, ``digits`` is not a non-negative
        integer or ``n_workers`` is below 1
    """
    if not isinstance(data, pd.DataFrame):
        raise ConfigurationError(f"data must be a pandas DataFrame, got {type(data).__name__}")

    required_cols = [participant_var, condition_var, rt_var]
    if omit_errors:
        required_cols.append(accuracy_var)

    for col in required_cols:
        if col not in data.columns:
            raise ConfigurationError(f"Missing required column: {col}")

    rt_col = data[rt_var]
    if pd.api.types.is_bool_dtype(rt_col) or not pd.api.types.is_numeric_dtype(rt_col):
        raise ConfigurationError(f"Column {rt_var} must hold numeric RTs, got dtype {rt_col.dtype}")

    if not is_finite_number(min_rt):
        raise ConfigurationError(f"min_rt must be a finite number in the unit of {rt_var}, got {min_rt!r}")

    if not is_valid_digits(digits):
        raise ConfigurationError(f"digits must be a non-negative integer, got {digits!r}")

    if not isinstance(n_workers, int) or isinstance(n_workers, bool) or n_workers < 1:
        raise ConfigurationError(f"n_workers must be a positive integer, got {n_workers!r}")


def filter_trials(
    data: pd.DataFrame,
    min_rt: float,
    rt_var: str,
    accuracy_var: str,
    omit_errors: bool,
) -> pd.DataFrame:
    """
    Drop error trials (optionally) and trials at or below the RT floor.

    Parameters
    ----------
    data : pd.DataFrame
        Trial-level data
    min_rt : float
        RTs less than or equal to this value are removed
    rt_var : str
        RT column
    accuracy_var : str
        Accuracy column, 1 for correct trials
    omit_errors : bool
        Whether to remove trials whose accuracy is not 1

    Returns
    -------
    pd.DataFrame
        Trials eligible for trimming
    """
    n_initial = len(data)
    df = data

    if omit_errors:
        df = df[df[accuracy_var] == 1]
        logger.info(f"Removed {n_initial - len(df):,} error trials")

    n_correct = len(df)
    df = df[df[rt_var] > min_rt]
    logger.info(f"Removed {n_correct - len(df):,} trials with RT <= {min_rt}")
    logger.info(f"{len(df):,} of {n_initial:,} trials retained for trimming")

    return df


def _collect_cells(
    trials: pd.DataFrame,
    participant_var: str,
    condition_var: str,
    rt_var: str,
) -> Dict[Tuple[Any, Any], np.ndarray]:
    grouped = trials.groupby([participant_var, condition_var], sort=False, observed=True)[rt_var]
    return {key: group.to_numpy(dtype=float) for key, group in grouped if len(group) > 0}


def _run_jobs(
    jobs: List[Tuple[CellTrimmer, np.ndarray]],
    n_workers: int,
    show_progress: bool,
) -> List[Optional[float]]:
    if n_workers > 1 and len(jobs) > 1:
        chunksize = max(1, len(jobs) // (n_workers * 4))
        with Pool(n_workers) as pool:
            return list(tqdm(
                pool.imap(_trim_cell, jobs, chunksize=chunksize),
                total=len(jobs),
                desc="Trimming cells",
                disable=not show_progress,
            ))

    return [_trim_cell(job) for job in tqdm(jobs, desc="Trimming cells", disable=not show_progress)]


def trim_by_cell(
    data: pd.DataFrame,
    min_rt: float,
    trimmer: CellTrimmer,
    participant_var: str = "participant",
    condition_var: str = "condition",
    rt_var: str = "rt",
    accuracy_var: str = "accuracy",
    omit_errors: bool = True,
    digits: int = 3,
    n_workers: int = 1,
    show_progress: bool = False,
) -> pd.DataFrame:
    """
    Apply a per-cell trimmer across every participant x condition pair.

    Parameters
    ----------
    data : pd.DataFrame
        Trial-level data, one row per trial
    min_rt : float
        RT floor in the unit of ``rt_var``; trials at or below it are dropped
    trimmer : CellTrimmer
        Callable mapping one cell's RTs to a trimmed mean or ``None``
    participant_var, condition_var, rt_var, accuracy_var : str
        Column names
    omit_errors : bool
        Remove error trials before trimming
    digits : int
        Decimal places kept (ties round half up)
    n_workers : int
        Process-pool size; 1 computes cells in this process
    show_progress : bool
        Show a tqdm progress bar over cells

    Returns
    -------
    pd.DataFrame
        Index: participants in first-appearance order. Columns: conditions
        in first-appearance order. Values: nullable ``Float64`` trimmed
        means, ``<NA>`` where a cell has no defined mean.
    """
    validate_trial_data(
        data, min_rt, participant_var, condition_var, rt_var, accuracy_var,
        omit_errors, digits, n_workers,
    )

    # Shape comes from the unfiltered data
    participants = ordered_unique(data[participant_var])
    conditions = ordered_unique(data[condition_var])

    trials = filter_trials(data, min_rt, rt_var, accuracy_var, omit_errors)
    cells = _collect_cells(trials, participant_var, condition_var, rt_var)

    # Empty cells never reach the trimmer
    keys: List[Tuple[int, int]] = []
    jobs: List[Tuple[CellTrimmer, np.ndarray]] = []
    for i, participant in enumerate(participants):
        for j, condition in enumerate(conditions):
            rts = cells.get((participant, condition))
            if rts is not None:
                keys.append((i, j))
                jobs.append((trimmer, rts))

    results = _run_jobs(jobs, n_workers, show_progress)

    rows: List[List[Optional[float]]] = [[None] * len(conditions) for _ in participants]
    for (i, j), value in zip(keys, results):
        rows[i][j] = round_half_up(value, digits)

    table = pd.DataFrame(
        rows,
        index=pd.Index(participants, name=participant_var),
        columns=pd.Index(conditions, name=condition_var),
        dtype="Float64",
    )

    n_cells = len(participants) * len(conditions)
    n_undefined = int(table.isna().sum().sum())
    if n_undefined:
        logger.warning(f"{n_undefined} of {n_cells} cells have no trimmed mean")
    logger.info(f"Trimmed {len(participants)} participants x {len(conditions)} conditions")

    return table
