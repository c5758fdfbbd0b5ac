from core.domain.errors import InvalidTaskIdError, TaskNotFoundError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class GetTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: str) -> Task:
        try:
            task = self._repository.get(task_id)
        except InvalidTaskIdError:
            raise TaskNotFoundError(task_id) from None

        if task is None:
            raise TaskNotFoundError(task_id)
        return task
