"""Loading raw tasks from JSON or YAML files."""

import json
import yaml
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..models.task import Project, RawTask


def load_tasks(tasks_path: str) -> List[RawTask]:
    """Load tasks from a YAML or JSON file.

    The file holds either a list of task mappings or a mapping with a
    ``tasks`` list.
    """
    path = Path(tasks_path)

    if not path.exists():
        raise FileNotFoundError(f"Tasks file not found: {tasks_path}")

    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported tasks file format: {path.suffix}")

    if isinstance(data, dict):
        data = data.get('tasks', [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of tasks in {tasks_path}")

    return [parse_task(entry) for entry in data]


def parse_task(data: Dict[str, Any]) -> RawTask:
    """Convert one task mapping into a RawTask."""
    if 'id' not in data or 'name' not in data:
        raise ValueError(f"Task requires 'id' and 'name': {data}")

    task_id = str(data['id'])

    return RawTask(
        id=task_id,
        name=str(data['name']),
        group=data.get('group'),
        project=_parse_project(data.get('project'), task_id),
        comment=data.get('comment'),
        estimated_time=_parse_estimate(data.get('estimated_time'), task_id),
        begin_time=_parse_datetime(data.get('begin_time'), task_id),
        end_time=_parse_datetime(data.get('end_time'), task_id),
        holiday=_parse_holiday(data.get('holiday', False), task_id),
    )


def _parse_project(data: Optional[Dict[str, Any]], task_id: str) -> Optional[Project]:
    if data is None:
        return None
    if 'id' not in data:
        raise ValueError(f"Project of task {task_id} has no id")
    return Project(id=str(data['id']), name=str(data.get('name', data['id'])))


def _parse_estimate(value: Any, task_id: str) -> Optional[timedelta]:
    if value is None:
        return None
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Invalid estimated_time {value!r} in task {task_id}: expected whole minutes")
    return timedelta(minutes=value)


def _parse_holiday(value: Any, task_id: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"Invalid holiday flag {value!r} in task {task_id}: expected true or false")
    return value


def _parse_datetime(value: Any, task_id: str) -> Optional[datetime]:
    """Parse a naive local timestamp; values with a UTC offset are rejected."""
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value))
        except ValueError as e:
            raise ValueError(f"Invalid timestamp {value!r} in task {task_id}") from e
    if parsed.tzinfo is not None:
        raise ValueError(f"Timestamp {value!r} in task {task_id} has a UTC offset; expected local time")
    return parsed
