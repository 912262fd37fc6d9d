"""Data models."""

from .report import AggregateReport, AnalysisResult
from .task import AnalysisRecord, Project, RawTask, RecordSet

__all__ = ['AggregateReport', 'AnalysisResult', 'AnalysisRecord', 'Project', 'RawTask', 'RecordSet']
