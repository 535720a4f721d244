"""
Configuration settings for the rttrim package.

Defaults for the trimming procedures can be overridden through environment
variables (or a ``.env`` file picked up by python-dotenv). Arguments passed
explicitly to a procedure always win over configuration.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class TrimmingConfig:
    """Defaults for the trimming procedures."""

    # Column names expected in trial-level data
    participant_var: str = "participant"
    condition_var: str = "condition"
    rt_var: str = "rt"
    accuracy_var: str = "accuracy"

    omit_errors: bool = True

    # Decimal places kept in the result table
    digits: int = field(default_factory=lambda: int(os.getenv("RTTRIM_DIGITS", "3")))

    # Cells are trimmed in a process pool when above 1
    n_workers: int = field(default_factory=lambda: int(os.getenv("RTTRIM_N_WORKERS", "1")))

    show_progress: bool = field(default_factory=lambda: _env_bool("RTTRIM_SHOW_PROGRESS", "false"))


@dataclass
class AppConfig:
    """Main application configuration."""

    trimming: TrimmingConfig = field(default_factory=TrimmingConfig)


# Global configuration instance
config = AppConfig()


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    return config


def reload_config() -> AppConfig:
    """Reload configuration from environment."""
    global config
    load_dotenv(override=True)
    config = AppConfig()
    return config
