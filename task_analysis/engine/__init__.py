"""Task analysis engine."""

from .aggregator import aggregate
from .analyzer import TaskAnalyzer, analyze
from .grouping import day_type_key, group_by, group_key
from .normalizer import normalize, project_name

__all__ = [
    'aggregate',
    'TaskAnalyzer',
    'analyze',
    'day_type_key',
    'group_by',
    'group_key',
    'normalize',
    'project_name',
]
