from abc import ABC, abstractmethod

from core.domain.models.task import Task, TaskStatus


class TaskRepository(ABC):
    """
    Puerto de persistencia de tareas.

    El almacén asigna `id` y `created_at`. Un identificador mal formado lanza
    `InvalidTaskIdError`; cualquier otro fallo de infraestructura `StoreError`.
    """

    @abstractmethod
    def list(self) -> list[Task]:
        """Todas las tareas, de la más reciente a la más antigua."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: str) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def create(self, title: str, description: str, status: TaskStatus) -> Task:
        raise NotImplementedError

    @abstractmethod
    def update_status(self, task_id: str, status: TaskStatus) -> Task | None:
        raise NotImplementedError
