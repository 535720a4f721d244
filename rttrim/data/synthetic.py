"""
Synthetic trial-level RT data for testing the trimming procedures.

The generated data follow a typical choice-RT shape (ex-Gaussian core with
occasional slow lapses and fast anticipations) but carry no scientific
meaning. Do not present results computed from them as findings.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def generate_rt_data(
    n_participants: int = 10,
    conditions: Sequence[str] = ("congruent", "incongruent"),
    n_trials: int = 40,
    error_rate: float = 0.05,
    outlier_rate: float = 0.03,
    anticipation_rate: float = 0.01,
    seed: int = 12345,
) -> pd.DataFrame:
    """
    Generate a long-format RT dataset in milliseconds.

    Parameters
    ----------
    n_participants : int
        Number of simulated participants
    conditions : Sequence[str]
        Condition labels; each condition is slower than the previous by 40 ms
    n_trials : int
        Trials per participant and condition
    error_rate : float
        Probability that a trial is an error (accuracy 0)
    outlier_rate : float
        Probability that a trial is a slow lapse (+1000 to +2500 ms)
    anticipation_rate : float
        Probability that a trial is an anticipation (50 to 140 ms)
    seed : int
        Seed for the random generator

    Returns
    -------
    pd.DataFrame
        Columns ``participant``, ``condition``, ``rt`` and ``accuracy``,
        trials interleaved across conditions
    """
    rng = np.random.default_rng(seed)
    records = []

    for participant in range(1, n_participants + 1):
        base_rt = rng.normal(450, 50)

        for trial in range(n_trials):
            for offset, condition in enumerate(conditions):
                rt = rng.normal(base_rt + 40 * offset, 40) + rng.exponential(80)

                draw = rng.random()
                if draw < outlier_rate:
                    rt += rng.uniform(1000, 2500)
                elif draw < outlier_rate + anticipation_rate:
                    rt = rng.uniform(50, 140)

                records.append({
                    "participant": participant,
                    "condition": condition,
                    "rt": round(float(rt), 1),
                    "accuracy": int(rng.random() >= error_rate),
                })

    df = pd.DataFrame(records)
    logger.info(
        f"Generated {len(df):,} synthetic trials "
        f"({n_participants} participants x {len(conditions)} conditions)"
    )
    return df
