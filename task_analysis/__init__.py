"""Task Analysis Engine: statistical reports over time-tracked tasks."""

from .engine.analyzer import TaskAnalyzer, analyze
from .models import AggregateReport, AnalysisRecord, AnalysisResult, Project, RawTask

__all__ = [
    'TaskAnalyzer',
    'analyze',
    'AggregateReport',
    'AnalysisRecord',
    'AnalysisResult',
    'Project',
    'RawTask',
]
