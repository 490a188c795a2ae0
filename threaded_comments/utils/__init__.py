# threaded_comments/utils/__init__.py
"""
Utility package

Helpers shared across the project: date/time handling, the comment tree
projection and the thread view model.
"""

from .datetime_utils import DateTimeUtils

__all__ = ['DateTimeUtils']
