"""Cloud Function Entry Point - Root Module.

This is the root-level entry point for Google Cloud Functions.
It imports from the floodwatch package.
"""

from floodwatch.main import flood_risk

__all__ = [
    "flood_risk",
]
