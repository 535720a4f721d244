"""
Configuration module for the rttrim package.
"""

from .settings import get_config, config, reload_config

__all__ = ["get_config", "config", "reload_config"]
