"""Shared fixtures for the analysis tests."""

from datetime import datetime, timedelta

import pytest

from task_analysis.models.task import Project, RawTask

PROJECT = Project(id="P", name="Paper")
OTHER = Project(id="Q", name="Other")


def make_task(
    task_id,
    name,
    begin,
    end,
    estimate=None,
    project=PROJECT,
    holiday=False,
    comment=None,
):
    """Build a RawTask; estimate is given in minutes."""
    return RawTask(
        id=task_id,
        name=name,
        project=project,
        comment=comment,
        estimated_time=timedelta(minutes=estimate) if estimate is not None else None,
        begin_time=begin,
        end_time=end,
        holiday=holiday,
    )


@pytest.fixture
def design_tasks():
    # 2024-01-08 is a Monday
    return [
        make_task("1", "Design Spec", datetime(2024, 1, 8, 9, 0), datetime(2024, 1, 8, 11, 0), estimate=90),
        make_task("2", "Design Review", datetime(2024, 1, 9, 9, 0), datetime(2024, 1, 9, 9, 30)),
    ]


@pytest.fixture
def mixed_tasks():
    return [
        make_task("1", "Write intro", datetime(2024, 1, 8, 9, 0), datetime(2024, 1, 8, 10, 0), estimate=60),
        make_task("2", "Write body", datetime(2024, 1, 8, 13, 0), datetime(2024, 1, 8, 15, 0), estimate=100),
        make_task("3", "Review", datetime(2024, 1, 9, 10, 0), datetime(2024, 1, 9, 10, 45)),
        # Saturday
        make_task("4", "Write outro", datetime(2024, 1, 13, 10, 0), datetime(2024, 1, 13, 10, 30), estimate=20),
        # Wednesday flagged as a holiday
        make_task("5", "Fix typos", datetime(2024, 1, 10, 8, 0), datetime(2024, 1, 10, 8, 20), holiday=True),
        make_task("6", "Write other", datetime(2024, 1, 8, 9, 0), datetime(2024, 1, 8, 17, 0), project=OTHER),
        make_task("7", "Write draft", None, datetime(2024, 1, 11, 9, 0)),
        make_task("8", "Unfiled work", datetime(2024, 1, 11, 9, 0), datetime(2024, 1, 11, 10, 0), project=None),
    ]
