"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- ThaiWater API client (HTTP)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from floodwatch.shell.thaiwater_client import ThaiWaterClient
from floodwatch.shell.config_loader import load_config, load_config_from_env

__all__ = [
    "ThaiWaterClient",
    "load_config",
    "load_config_from_env",
]
