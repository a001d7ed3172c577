"""
Utility functions and helpers.
"""

from .naming import snake_case

__all__ = [
    "snake_case",
]
