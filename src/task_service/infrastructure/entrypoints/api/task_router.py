from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import APIRouter, Depends, Request, Response, status

from task_service.core.application.exceptions import (
    BadRequestError,
    TaskApplicationError,
    TaskNotFoundError,
    TaskValidationError,
)
from task_service.core.application.usecases.tasks import TaskHandler
from task_service.infrastructure.entrypoints.api.dtos.error_dtos import ErrorResponseDTO
from task_service.infrastructure.entrypoints.api.dtos.task_dtos import (
    CreateTaskRequestDTO,
    GetTaskResponseDTO,
    ListTasksResponseDTO,
    UpdateTaskRequestDTO,
)
from task_service.infrastructure.entrypoints.api.mappers.task_dto_mapper import TaskDtoMapper
from task_service.infrastructure.observability.metrics_service import TASK_OPERATIONS_TOTAL

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={
        400: {"model": ErrorResponseDTO},
        500: {"model": ErrorResponseDTO},
    },
)

# Endpoints are plain `def` so FastAPI runs each request on its worker thread pool.


def get_task_handler(request: Request) -> TaskHandler:
    return request.app.state.task_handler


@contextmanager
def _track(operation: str) -> Iterator[None]:
    """Count the outcome of one task operation."""
    try:
        yield
    except (TaskValidationError, BadRequestError):
        TASK_OPERATIONS_TOTAL.labels(operation=operation, outcome="invalid").inc()
        raise
    except TaskNotFoundError:
        TASK_OPERATIONS_TOTAL.labels(operation=operation, outcome="not_found").inc()
        raise
    except TaskApplicationError:
        TASK_OPERATIONS_TOTAL.labels(operation=operation, outcome="error").inc()
        raise
    TASK_OPERATIONS_TOTAL.labels(operation=operation, outcome="success").inc()


@router.get("", response_model=ListTasksResponseDTO)
def list_tasks(handler: TaskHandler = Depends(get_task_handler)) -> ListTasksResponseDTO:
    with _track("list"):
        tasks = handler.list_tasks()
    return TaskDtoMapper.to_list_response(tasks)


@router.post("", response_model=GetTaskResponseDTO, status_code=status.HTTP_201_CREATED)
def create_task(
    payload: CreateTaskRequestDTO,
    handler: TaskHandler = Depends(get_task_handler),
) -> GetTaskResponseDTO:
    with _track("create"):
        task = handler.create_task(TaskDtoMapper.to_create_command(payload))
    return TaskDtoMapper.to_single_response(task)


@router.get("/{task_id}", response_model=GetTaskResponseDTO, responses={404: {"model": ErrorResponseDTO}})
def get_task(task_id: str, handler: TaskHandler = Depends(get_task_handler)) -> GetTaskResponseDTO:
    with _track("get"):
        task = handler.get_task(task_id)
    return TaskDtoMapper.to_single_response(task)


@router.put("/{task_id}", response_model=GetTaskResponseDTO, responses={404: {"model": ErrorResponseDTO}})
def update_task(
    task_id: str,
    payload: UpdateTaskRequestDTO,
    handler: TaskHandler = Depends(get_task_handler),
) -> GetTaskResponseDTO:
    with _track("update"):
        task = handler.update_task(task_id, TaskDtoMapper.to_update_command(payload))
    return TaskDtoMapper.to_single_response(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponseDTO}},
)
def delete_task(task_id: str, handler: TaskHandler = Depends(get_task_handler)) -> Response:
    with _track("delete"):
        handler.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
