"""
Exceptions raised by the trimming procedures.

Undefined cells (no trials left after filtering or trimming) are not
errors; they surface as missing values in the result table.
"""


class TrimmingError(Exception):
    """Base class for all rttrim errors."""


class ConfigurationError(TrimmingError, ValueError):
    """Invalid arguments or data layout; raised before any cell is trimmed."""


class SampleSizeOutOfRange(TrimmingError, LookupError):
    """A critical value was requested for a sample size below 1."""

    def __init__(self, sample_size: int):
        self.sample_size = sample_size
        super().__init__(
            f"No critical value for sample size {sample_size}; "
            "empty cells must be handled before the lookup"
        )
