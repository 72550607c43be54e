from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from task_service.core.application.exceptions import (
    BadRequestError,
    InternalError,
    TaskNotFoundError,
    TaskValidationError,
)
from task_service.core.application.ports import TaskRepositoryPort
from task_service.core.application.ports.common.exceptions import RepositoryError
from task_service.core.application.usecases.tasks import (
    CreateTaskCommand,
    TaskHandler,
    UpdateTaskCommand,
)


def test_create_then_get_round_trip(handler):
    created = handler.create_task(CreateTaskCommand(title="T", description="D"))

    fetched = handler.get_task(str(created.id))

    assert fetched.title == "T"
    assert fetched.description == "D"
    assert fetched.completed is False
    assert fetched.created_at == fetched.updated_at


def test_update_without_completed_preserves_it(handler):
    task = handler.create_task(CreateTaskCommand(title="T", description="D"))
    handler.update_task(str(task.id), UpdateTaskCommand("T", "D", completed=True))

    updated = handler.update_task(str(task.id), UpdateTaskCommand("T2", "D2"))

    assert updated.completed is True
    assert updated.title == "T2"
    assert updated.description == "D2"
    assert handler.get_task(str(task.id)).completed is True


def test_update_with_completed_overwrites_it(handler):
    task = handler.create_task(CreateTaskCommand(title="T", description="D"))
    handler.update_task(str(task.id), UpdateTaskCommand("T", "D", completed=True))

    updated = handler.update_task(str(task.id), UpdateTaskCommand("T", "D", completed=False))

    assert updated.completed is False


def test_update_refreshes_updated_at_only(handler):
    task = handler.create_task(CreateTaskCommand(title="T", description="D"))

    first = handler.update_task(str(task.id), UpdateTaskCommand("T", "D"))
    second = handler.update_task(str(task.id), UpdateTaskCommand("T", "D"))

    assert first.created_at == task.created_at
    assert task.updated_at < first.updated_at < second.updated_at


def test_get_unknown_id_raises_not_found(handler):
    with pytest.raises(TaskNotFoundError):
        handler.get_task(str(uuid4()))


def test_malformed_id_is_bad_request_not_not_found(handler):
    with pytest.raises(BadRequestError):
        handler.get_task("not-a-uuid")


def test_update_unknown_id_raises_not_found(handler, repository):
    with pytest.raises(TaskNotFoundError):
        handler.update_task(str(uuid4()), UpdateTaskCommand("T", "D"))
    assert len(repository.find_all()) == 0


def test_delete_then_get_is_not_found(handler):
    task = handler.create_task(CreateTaskCommand(title="T", description="D"))

    handler.delete_task(str(task.id))

    with pytest.raises(TaskNotFoundError):
        handler.get_task(str(task.id))


def test_delete_unknown_id_raises_not_found(handler):
    with pytest.raises(TaskNotFoundError):
        handler.delete_task(str(uuid4()))


def test_validation_failure_never_reaches_repository():
    repository = MagicMock(spec=TaskRepositoryPort)
    handler = TaskHandler(repository=repository)

    with pytest.raises(TaskValidationError):
        handler.create_task(CreateTaskCommand(title="", description=""))
    with pytest.raises(TaskValidationError):
        handler.update_task(str(uuid4()), UpdateTaskCommand(title="x" * 101, description=""))

    repository.create.assert_not_called()
    repository.find_by_id.assert_not_called()
    repository.update.assert_not_called()


def test_bad_id_is_checked_before_validation():
    repository = MagicMock(spec=TaskRepositoryPort)
    handler = TaskHandler(repository=repository)

    with pytest.raises(BadRequestError):
        handler.update_task("123", UpdateTaskCommand(title="", description=""))


@pytest.mark.parametrize(
    "call, message",
    [
        (lambda h: h.list_tasks(), "Failed to retrieve tasks"),
        (lambda h: h.create_task(CreateTaskCommand("T", "D")), "Failed to create task"),
        (lambda h: h.get_task(str(uuid4())), "Failed to retrieve task"),
        (lambda h: h.delete_task(str(uuid4())), "Failed to retrieve task"),
    ],
)
def test_repository_failures_become_internal_errors(call, message):
    repository = MagicMock(spec=TaskRepositoryPort)
    failure = RepositoryError("connection reset by 10.0.0.5", operation="any")
    repository.find_all.side_effect = failure
    repository.create.side_effect = failure
    repository.find_by_id.side_effect = failure
    handler = TaskHandler(repository=repository)

    with pytest.raises(InternalError) as exc:
        call(handler)

    # internal details stay server-side
    assert exc.value.message == message
    assert "10.0.0.5" not in exc.value.message


def test_update_write_failure_becomes_internal_error(handler, repository, monkeypatch):
    task = handler.create_task(CreateTaskCommand(title="T", description="D"))

    def failing_update(task_id, task):
        raise RepositoryError("timeout", operation="update")

    monkeypatch.setattr(repository, "update", failing_update)

    with pytest.raises(InternalError, match="Failed to update task"):
        handler.update_task(str(task.id), UpdateTaskCommand("T2", "D2"))


def test_concurrent_creates_lose_no_writes(repository):
    handler = TaskHandler(repository=repository)
    n = 100

    def create(i: int):
        return handler.create_task(CreateTaskCommand(title=f"Concurrent {i}", description="Test"))

    with ThreadPoolExecutor(max_workers=16) as pool:
        created = list(pool.map(create, range(n)))

    assert len({t.id for t in created}) == n
    stored = handler.list_tasks()
    assert len(stored) == n
    by_id = {t.id: t for t in stored}
    for task in created:
        assert by_id[task.id] == task
