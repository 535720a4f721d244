"""
rttrim

Outlier trimming for reaction-time data, following van Selst & Jolicoeur
(1994). Turns trial-level data into per-participant, per-condition mean
RTs after removing statistically extreme trials.

Procedures:
    - non_recursive: single-pass SD trimming with a sample-size adjusted criterion
    - modified_recursive: iterative leave-one-out SD trimming
    - hybrid_recursive: average of the two

Modules:
    - critical_values: sample-size dependent SD multipliers
    - trimmers: per-cell trimming strategies
    - driver: participant x condition grouping shared by all procedures
    - procedures: public entry points
    - data: synthetic data for testing
    - utils: helper functions
"""

__version__ = "1.0.0"

from .critical_values import CriticalValueTable
from .exceptions import ConfigurationError, SampleSizeOutOfRange, TrimmingError
from .procedures import hybrid_recursive, modified_recursive, non_recursive
from .trimmers import HybridTrimmer, ModifiedRecursiveTrimmer, NonRecursiveTrimmer

__all__ = [
    "__version__",
    "CriticalValueTable",
    "NonRecursiveTrimmer",
    "ModifiedRecursiveTrimmer",
    "HybridTrimmer",
    "non_recursive",
    "modified_recursive",
    "hybrid_recursive",
    "TrimmingError",
    "ConfigurationError",
    "SampleSizeOutOfRange",
]
