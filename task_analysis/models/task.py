"""Task and analysis record data models."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Tuple

from ..utils.datetime_utils import minutes_between, to_minutes


@dataclass(frozen=True)
class Project:
    """A project tasks are logged against."""

    id: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name}


@dataclass(frozen=True)
class RawTask:
    """A logged unit of work as supplied by the caller."""

    id: str
    name: str
    group: Optional[str] = None
    project: Optional[Project] = None
    comment: Optional[str] = None
    estimated_time: Optional[timedelta] = None
    begin_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    holiday: bool = False

    def belongs_to(self, project_id: str) -> bool:
        """Check if the task is linked to the given project."""
        return self.project is not None and self.project.id == project_id

    def is_complete(self) -> bool:
        """Check if both begin and end timestamps are recorded."""
        return self.begin_time is not None and self.end_time is not None


def derive_group(name: str) -> Optional[str]:
    """Group label of a task name: its first word when it has at least two."""
    words = name.split()
    if len(words) < 2:
        return None
    return words[0]


@dataclass(frozen=True, eq=False)
class AnalysisRecord:
    """Normalized, read-only view of a complete task used for reporting.

    Records compare equal by id and order by begin time.
    """

    id: str
    name: str
    group: Optional[str]
    project: Optional[Project]
    comment: Optional[str]
    estimated_time: Optional[int]
    time_gap_ratio: Optional[float]
    begin_time: datetime
    end_time: datetime
    timespan: int
    holiday: bool

    @classmethod
    def from_task(cls, task: RawTask) -> 'AnalysisRecord':
        """Build a record from a task with both timestamps present."""
        if not task.is_complete():
            raise ValueError(f"Task {task.id} has no begin or end time")

        timespan = minutes_between(task.begin_time, task.end_time)
        estimated = to_minutes(task.estimated_time) if task.estimated_time is not None else None

        # A zero-minute estimate has no meaningful ratio
        time_gap_ratio = timespan / estimated if estimated else None

        return cls(
            id=task.id,
            name=task.name,
            group=derive_group(task.name),
            project=task.project,
            comment=task.comment,
            estimated_time=estimated,
            time_gap_ratio=time_gap_ratio,
            begin_time=task.begin_time,
            end_time=task.end_time,
            timespan=timespan,
            holiday=task.holiday,
        )

    def __eq__(self, other):
        if not isinstance(other, AnalysisRecord):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __lt__(self, other: 'AnalysisRecord') -> bool:
        return self.begin_time < other.begin_time

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dictionary, omitting absent optional fields."""
        data = {
            'id': self.id,
            'name': self.name,
            'group': self.group,
            'project': self.project.to_dict() if self.project else None,
        }
        if self.comment is not None:
            data['comment'] = self.comment
        if self.estimated_time is not None:
            data['estimated_time'] = self.estimated_time
        if self.time_gap_ratio is not None:
            data['time_gap_ratio'] = self.time_gap_ratio
        data.update({
            'begin_time': self.begin_time.isoformat(),
            'end_time': self.end_time.isoformat(),
            'timespan': self.timespan,
            'holiday': self.holiday,
        })
        return data


@dataclass(frozen=True)
class RecordSet:
    """Ordered analysis records plus the externally supplied value."""

    records: Tuple[AnalysisRecord, ...]
    value: Optional[int] = None

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)
