"""
Errores de dominio de las tareas.

Los adaptadores de infraestructura solo lanzan `StoreError` (o su subclase
`InvalidTaskIdError`); los casos de uso las traducen a errores de negocio.
"""


class TaskError(Exception):
    """Base de todos los errores de tareas."""


class TaskValidationError(TaskError):
    """Entrada corregible por el cliente."""


class DescriptionTooShortError(TaskValidationError):
    def __init__(self, current_length: int, required_length: int) -> None:
        super().__init__(
            "Cannot move task to Done: Description must be longer than "
            f"{required_length} characters"
        )
        self.current_length = current_length
        self.required_length = required_length


class TaskNotFoundError(TaskError):
    def __init__(self, task_id: str) -> None:
        super().__init__("Task not found")
        self.task_id = task_id


class StoreError(TaskError):
    """Fallo del almacén de documentos."""


class InvalidTaskIdError(StoreError):
    """El identificador no tiene el formato que espera el almacén."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Invalid task id: {task_id!r}")
        self.task_id = task_id
