from dataclasses import dataclass

from core.domain.errors import (
    InvalidTaskIdError,
    TaskNotFoundError,
    TaskValidationError,
)
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from core.domain.rules import check_transition


@dataclass(slots=True)
class UpdateTaskStatusCommand:
    status: str | None


class UpdateTaskStatusUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: str, cmd: UpdateTaskStatusCommand) -> Task:
        """
        Mueve una tarea a otro estado.

        El orden de validación es: estado válido, tarea existente, guardas de
        transición y por último la escritura en el almacén.

        Argumentos:
            task_id (str): El ID de la tarea.
            cmd (UpdateTaskStatusCommand): El estado destino.

        Retorna:
            Task: La tarea actualizada.
        """
        target = self._parse_status(cmd.status)

        try:
            task = self._repository.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)

            check_transition(task, target)

            updated = self._repository.update_status(task_id, target)
        except InvalidTaskIdError:
            raise TaskNotFoundError(task_id) from None

        if updated is None:
            raise TaskNotFoundError(task_id)
        return updated

    @staticmethod
    def _parse_status(raw: str | None) -> TaskStatus:
        try:
            return TaskStatus(raw)
        except ValueError:
            raise TaskValidationError(
                f"Invalid status. Must be one of: {', '.join(TaskStatus.values())}"
            ) from None
