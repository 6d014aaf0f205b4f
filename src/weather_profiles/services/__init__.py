"""
Business logic services for the weather profiles viewer.

Services orchestrate API operations and hold the selection state.
"""

from .directory import ProfileDirectory
from .selection import SelectionStore

__all__ = [
    "ProfileDirectory",
    "SelectionStore",
]
