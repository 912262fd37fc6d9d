"""Report models produced by the analysis engine."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .task import AnalysisRecord


@dataclass(frozen=True)
class AggregateReport:
    """Statistics for one bucket of analysis records (minutes throughout)."""

    total_estimated_time: int
    total_work_time: int
    total_time_gap_ratio: Optional[float]
    work_days: int
    work_time_per_day: float
    work_time_per_day_max: int
    work_time_per_day_min: int
    work_time_per_day_median: int
    work_time_per_day_deviation: float
    work_time_per_value: Optional[float]
    tasks: Tuple[AnalysisRecord, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for JSON export."""
        data = {
            'total_estimated_time': self.total_estimated_time,
            'total_work_time': self.total_work_time,
        }
        if self.total_time_gap_ratio is not None:
            data['total_time_gap_ratio'] = self.total_time_gap_ratio
        data.update({
            'work_days': self.work_days,
            'work_time_per_day': self.work_time_per_day,
            'work_time_per_day_max': self.work_time_per_day_max,
            'work_time_per_day_min': self.work_time_per_day_min,
            'work_time_per_day_median': self.work_time_per_day_median,
            'work_time_per_day_deviation': self.work_time_per_day_deviation,
        })
        if self.work_time_per_value is not None:
            data['work_time_per_value'] = self.work_time_per_value
        data['tasks'] = [task.to_dict() for task in self.tasks]
        return data


@dataclass(frozen=True)
class AnalysisResult:
    """Complete analysis of one project."""

    project_name: str
    value: Optional[int]
    all: AggregateReport
    day: List[Tuple[str, AggregateReport]]
    group: List[Tuple[str, AggregateReport]]

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for JSON export."""
        data: Dict[str, Any] = {'project_name': self.project_name}
        if self.value is not None:
            data['value'] = self.value
        data['all'] = self.all.to_dict()
        data['day'] = [[label, report.to_dict()] for label, report in self.day]
        data['group'] = [[label, report.to_dict()] for label, report in self.group]
        return data

    def to_human_readable(self) -> str:
        """Generate human-readable report format."""
        lines = [
            f"=== Project: {self.project_name} ===",
        ]
        if self.value is not None:
            lines.append(f"Value: {self.value}")

        lines.extend(["", "All Tasks:"])
        lines.extend(_format_report(self.all))

        lines.extend(["", "By Day Type:"])
        for label, report in self.day:
            lines.append(f"  [{label}]")
            lines.extend(_format_report(report, indent="    "))

        lines.extend(["", "By Group:"])
        for label, report in self.group:
            lines.append(f"  [{label}]")
            lines.extend(_format_report(report, indent="    "))

        lines.append("=" * 50)

        return "\n".join(lines)


def _format_report(report: AggregateReport, indent: str = "  ") -> List[str]:
    lines = [
        f"{indent}Tasks: {len(report.tasks)}",
        f"{indent}Estimated: {report.total_estimated_time} min",
        f"{indent}Worked: {report.total_work_time} min",
    ]
    if report.total_time_gap_ratio is not None:
        lines.append(f"{indent}Time gap ratio: {report.total_time_gap_ratio:.2f}")
    lines.extend([
        f"{indent}Work days: {report.work_days}",
        f"{indent}Per day: avg {report.work_time_per_day:.1f} / "
        f"max {report.work_time_per_day_max} / "
        f"min {report.work_time_per_day_min} / "
        f"median {report.work_time_per_day_median} / "
        f"dev {report.work_time_per_day_deviation:.1f} min",
    ])
    if report.work_time_per_value is not None:
        lines.append(f"{indent}Per value: {report.work_time_per_value:.2f} min")
    return lines
