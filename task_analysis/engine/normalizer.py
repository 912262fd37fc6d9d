"""Record normalization: raw tasks to one project's analysis records."""

import logging
from typing import Iterable, Optional

from ..models.task import AnalysisRecord, RawTask, RecordSet

logger = logging.getLogger(__name__)


def normalize(
    tasks: Iterable[RawTask],
    project_id: str,
    value: Optional[int] = None,
) -> RecordSet:
    """Filter tasks to a project's complete entries, ordered by begin time."""
    total = 0
    records = []
    for task in tasks:
        total += 1
        if not task.belongs_to(project_id):
            continue
        if not task.is_complete():
            logger.debug("Skipping task %s: missing begin or end time", task.id)
            continue
        records.append(AnalysisRecord.from_task(task))

    logger.debug("Kept %d of %d tasks for project %s", len(records), total, project_id)

    return RecordSet(tuple(sorted(records)), value)


def project_name(record_set: RecordSet, project_id: str) -> Optional[str]:
    """Display name of the project, or None if no record belongs to it."""
    for record in record_set:
        if record.project is not None and record.project.id == project_id:
            return record.project.name
    return None
