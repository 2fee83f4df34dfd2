"""Utility functions for bezierdist.

This module provides utility functions including:

- Logging setup and configuration
"""

from bezierdist.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
