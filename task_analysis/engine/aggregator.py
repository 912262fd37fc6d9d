"""Statistics over a bucket of analysis records."""

import math
from datetime import date
from typing import Dict, List, Optional, Tuple

from ..models.report import AggregateReport
from ..models.task import RecordSet


def total_estimated_time(record_set: RecordSet) -> int:
    """Sum of estimates; records without one are left out."""
    return sum(r.estimated_time for r in record_set if r.estimated_time is not None)


def total_work_time(record_set: RecordSet) -> int:
    return sum(r.timespan for r in record_set)


def work_days(record_set: RecordSet) -> int:
    """Number of distinct dates on which a task began."""
    return len({r.begin_time.date() for r in record_set})


def work_time_per_days(record_set: RecordSet) -> List[Tuple[date, int]]:
    """Minutes worked per begin date, in date order."""
    per_day: Dict[date, int] = {}
    for record in record_set:
        day = record.begin_time.date()
        per_day[day] = per_day.get(day, 0) + record.timespan
    return sorted(per_day.items())


def work_time_per_day(record_set: RecordSet) -> float:
    days = work_days(record_set)
    if days == 0:
        return 0.0
    return total_work_time(record_set) / days


def median(values: List[int]) -> int:
    """Element at index n // 2 of the sorted values.

    For an even count this is the upper of the two middle values; they are
    not averaged.
    """
    if not values:
        return 0
    ordered = sorted(values)
    return ordered[len(ordered) // 2]


def work_time_per_day_deviation(record_set: RecordSet) -> float:
    """Spread of per-day minutes around the daily mean.

    The squared deviations are divided by the number of records in the
    bucket, not by the number of days.
    """
    if len(record_set) == 0:
        return 0.0
    mean = work_time_per_day(record_set)
    squares = sum((minutes - mean) ** 2 for _, minutes in work_time_per_days(record_set))
    return math.sqrt(squares / len(record_set))


def ratio(numerator: int, denominator: Optional[int]) -> Optional[float]:
    """numerator / denominator, or None when the denominator is absent or zero.

    A zero denominator (no estimates, or a value of 0) reports no ratio
    rather than an infinite one.
    """
    if not denominator:
        return None
    return numerator / denominator


def aggregate(record_set: RecordSet) -> AggregateReport:
    """Compute the report for one bucket."""
    tw = total_work_time(record_set)
    te = total_estimated_time(record_set)
    daily = [minutes for _, minutes in work_time_per_days(record_set)]

    return AggregateReport(
        total_estimated_time=te,
        total_work_time=tw,
        total_time_gap_ratio=ratio(tw, te),
        work_days=work_days(record_set),
        work_time_per_day=work_time_per_day(record_set),
        work_time_per_day_max=max(daily, default=0),
        work_time_per_day_min=min(daily, default=0),
        work_time_per_day_median=median(daily),
        work_time_per_day_deviation=work_time_per_day_deviation(record_set),
        work_time_per_value=ratio(tw, record_set.value),
        tasks=record_set.records,
    )
