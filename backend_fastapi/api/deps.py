from fastapi import Depends, Request

from core.application.create_task import CreateTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task_status import UpdateTaskStatusUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import (
    get_create_task_use_case,
    get_get_task_use_case,
    get_list_tasks_use_case,
    get_update_task_status_use_case,
)


def task_repository(request: Request) -> TaskRepository:
    return request.app.state.task_repository


def list_tasks_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> ListTasksUseCase:
    return get_list_tasks_use_case(repository)


def get_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> GetTaskUseCase:
    return get_get_task_use_case(repository)


def create_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> CreateTaskUseCase:
    return get_create_task_use_case(repository)


def update_task_status_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> UpdateTaskStatusUseCase:
    return get_update_task_status_use_case(repository)
