"""
Classic Toolkit Shared Module
=============================

Configuration, diagnostic console, structured logging and integer
utilities shared by every classical cipher tool.
"""

from shared.config import ClassicConfig, ConfigError

__all__ = ["ClassicConfig", "ConfigError"]
