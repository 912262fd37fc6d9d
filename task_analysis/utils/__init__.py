"""Utility functions."""

from .config import get_default_config, load_config, merge_config
from .datetime_utils import is_working_day, minutes_between, to_minutes

__all__ = [
    'get_default_config',
    'load_config',
    'merge_config',
    'is_working_day',
    'minutes_between',
    'to_minutes',
]
