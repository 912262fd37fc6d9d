"""Partitioning of analysis records into labeled buckets."""

from itertools import groupby
from typing import Callable, List, Sequence, Tuple

from ..models.task import AnalysisRecord, RecordSet
from ..utils.datetime_utils import is_working_day

KeyFunc = Callable[[AnalysisRecord], str]


def group_by(record_set: RecordSet, key: KeyFunc) -> List[Tuple[str, RecordSet]]:
    """Split records into (label, bucket) pairs ordered by label.

    Records keep their relative order inside a bucket and every bucket
    carries the parent's value.
    """
    ordered = sorted(record_set.records, key=key)
    return [
        (label, RecordSet(tuple(members), record_set.value))
        for label, members in groupby(ordered, key=key)
    ]


def day_type_key(
    holiday_label: str = 'holiday',
    workday_label: str = 'workday',
    working_days: Sequence[int] = (0, 1, 2, 3, 4),
) -> KeyFunc:
    """Key classifying a record by whether it began on a holiday."""
    def key(record: AnalysisRecord) -> str:
        if record.holiday or not is_working_day(record.begin_time, working_days):
            return holiday_label
        return workday_label
    return key


def group_key(no_group_label: str = '-') -> KeyFunc:
    """Key classifying a record by its derived group label."""
    def key(record: AnalysisRecord) -> str:
        return record.group if record.group is not None else no_group_label
    return key
