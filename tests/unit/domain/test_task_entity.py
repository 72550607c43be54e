from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from task_service.core.domain.shared.clock import utc_now
from task_service.core.domain.task import Task

T0 = datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc)


def test_new_task_defaults():
    task = Task.new("Write docs", "For the API", T0)

    assert task.id is not None
    assert task.completed is False
    assert task.created_at == task.updated_at == T0


def test_new_tasks_get_distinct_ids():
    ids = {Task.new("t", "", T0).id for _ in range(50)}
    assert len(ids) == 50


def test_with_changes_keeps_completed_when_omitted():
    task = Task.new("a", "b", T0)
    done = task.with_changes("a", "b", True, T0 + timedelta(seconds=1))

    changed = done.with_changes("new title", "new desc", None, T0 + timedelta(seconds=2))

    assert changed.completed is True
    assert changed.title == "new title"
    assert changed.description == "new desc"
    assert changed.id == task.id
    assert changed.created_at == T0
    assert changed.updated_at == T0 + timedelta(seconds=2)


def test_with_changes_never_moves_updated_at_backwards():
    task = Task.new("a", "b", T0)
    changed = task.with_changes("a", "b", False, T0 - timedelta(minutes=5))

    assert changed.updated_at == T0
    assert changed.created_at <= changed.updated_at


def test_task_is_immutable():
    task = Task.new("a", "b", T0)
    with pytest.raises(FrozenInstanceError):
        task.title = "other"


def test_utc_now_is_aware_and_millisecond_precision():
    now = utc_now()
    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)
    assert now.microsecond % 1000 == 0
