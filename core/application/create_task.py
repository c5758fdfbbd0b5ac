from dataclasses import dataclass

from core.domain.errors import TaskValidationError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class CreateTaskCommand:
    title: str | None
    description: str | None = None


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        title = (cmd.title or "").strip()
        if not title:
            raise TaskValidationError("Task title is required")

        description = (cmd.description or "").strip()
        return self._repository.create(
            title=title,
            description=description,
            status=TaskStatus.TODO,
        )
