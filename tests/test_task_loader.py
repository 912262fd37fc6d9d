"""Tests for loading tasks from files."""

import json
from datetime import datetime, timedelta

import pytest

from task_analysis.utils.task_loader import load_tasks, parse_task

TASKS = [
    {
        "id": 1,
        "name": "Design Spec",
        "project": {"id": "P", "name": "Paper"},
        "estimated_time": 90,
        "begin_time": "2024-01-08T09:00:00",
        "end_time": "2024-01-08T11:00:00",
    },
    {
        "id": "2",
        "name": "Design Review",
        "project": {"id": "P", "name": "Paper"},
        "comment": "with Sam",
        "begin_time": "2024-01-09T09:00:00",
        "end_time": "2024-01-09T09:30:00",
        "holiday": True,
    },
]


def test_parse_task():
    task = parse_task(TASKS[0])
    assert task.id == "1"
    assert task.project.name == "Paper"
    assert task.estimated_time == timedelta(minutes=90)
    assert task.begin_time == datetime(2024, 1, 8, 9, 0)
    assert task.holiday is False


def test_parse_task_optional_fields():
    task = parse_task({"id": "3", "name": "Loose"})
    assert task.project is None
    assert task.estimated_time is None
    assert task.begin_time is None
    assert not task.is_complete()


def test_parse_task_requires_id_and_name():
    with pytest.raises(ValueError):
        parse_task({"name": "No id"})


def test_parse_task_bad_timestamp():
    with pytest.raises(ValueError, match="task 4"):
        parse_task({"id": "4", "name": "Bad", "begin_time": "yesterday"})


def test_load_json_list(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps(TASKS))
    tasks = load_tasks(str(path))
    assert [t.id for t in tasks] == ["1", "2"]
    assert tasks[1].holiday is True
    assert tasks[1].comment == "with Sam"


def test_load_yaml_mapping(tmp_path):
    path = tmp_path / "tasks.yaml"
    path.write_text(
        "tasks:\n"
        "  - id: a\n"
        "    name: Write intro\n"
        "    project: {id: P, name: Paper}\n"
        "    begin_time: 2024-01-08 09:00:00\n"
        "    end_time: 2024-01-08 10:00:00\n"
    )
    tasks = load_tasks(str(path))
    assert len(tasks) == 1
    assert tasks[0].begin_time == datetime(2024, 1, 8, 9, 0)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tasks(str(tmp_path / "missing.json"))


def test_load_unsupported_format(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text("id,name\n")
    with pytest.raises(ValueError):
        load_tasks(str(path))


def test_load_rejects_scalar(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text("42")
    with pytest.raises(ValueError):
        load_tasks(str(path))


def test_parse_task_estimate_must_be_minutes():
    with pytest.raises(ValueError, match="estimated_time"):
        parse_task({"id": "5", "name": "Bad", "estimated_time": "90"})
    with pytest.raises(ValueError, match="estimated_time"):
        parse_task({"id": "5", "name": "Bad", "estimated_time": True})


def test_parse_task_rejects_offset_timestamp():
    with pytest.raises(ValueError, match="UTC offset"):
        parse_task({"id": "6", "name": "Tokyo", "begin_time": "2024-01-08T09:00:00+09:00"})


def test_load_yaml_rejects_offset_timestamp(tmp_path):
    path = tmp_path / "tasks.yaml"
    path.write_text(
        "- id: a\n"
        "  name: Write intro\n"
        "  begin_time: 2024-01-08T09:00:00+09:00\n"
    )
    with pytest.raises(ValueError, match="UTC offset"):
        load_tasks(str(path))


def test_parse_task_holiday_must_be_boolean():
    with pytest.raises(ValueError, match="holiday"):
        parse_task({"id": "7", "name": "Off", "holiday": "false"})
    assert parse_task({"id": "7", "name": "Off", "holiday": False}).holiday is False
