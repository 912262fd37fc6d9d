"""Project analysis: composes normalization, grouping and aggregation."""

import logging
from typing import Iterable, List, Optional, Tuple

from ..models.report import AggregateReport, AnalysisResult
from ..models.task import RawTask, RecordSet
from ..utils.config import merge_config
from .aggregator import aggregate
from .grouping import KeyFunc, day_type_key, group_by, group_key
from .normalizer import normalize, project_name

logger = logging.getLogger(__name__)


class TaskAnalyzer:
    """Builds the statistical report of one project from a task snapshot."""

    def __init__(self, config: Optional[dict] = None):
        """Initialize analyzer with configuration (defaults fill the gaps)."""
        self.config = merge_config(config)
        self.analysis_config = self.config.get('analysis', {})
        self.working_days = self.config.get('calendar', {}).get('working_days', [0, 1, 2, 3, 4])

        self.day_key = day_type_key(
            holiday_label=self.analysis_config.get('holiday_label', 'holiday'),
            workday_label=self.analysis_config.get('workday_label', 'workday'),
            working_days=self.working_days,
        )
        self.group_key = group_key(self.analysis_config.get('no_group_label', '-'))

    def analyze(
        self,
        tasks: Iterable[RawTask],
        project_id: str,
        value: Optional[int] = None,
    ) -> Optional[AnalysisResult]:
        """Analyze a project's tasks.

        Returns None when the project has no task with both timestamps.
        """
        target_tasks = normalize(tasks, project_id, value)

        name = project_name(target_tasks, project_id)
        if name is None:
            logger.info("Project %s not found among the supplied tasks", project_id)
            return None

        return AnalysisResult(
            project_name=name,
            value=value,
            all=aggregate(target_tasks),
            day=self._analyze_groups(target_tasks, self.day_key),
            group=self._analyze_groups(target_tasks, self.group_key),
        )

    def _analyze_groups(
        self,
        record_set: RecordSet,
        key: KeyFunc,
    ) -> List[Tuple[str, AggregateReport]]:
        buckets = group_by(record_set, key)
        logger.debug("Buckets: %s", [label for label, _ in buckets])
        return [(label, aggregate(bucket)) for label, bucket in buckets]


def analyze(
    tasks: Iterable[RawTask],
    project_id: str,
    value: Optional[int] = None,
    config: Optional[dict] = None,
) -> Optional[AnalysisResult]:
    """Analyze a project with a one-off analyzer."""
    return TaskAnalyzer(config).analyze(tasks, project_id, value)
