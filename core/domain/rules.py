"""
Reglas de transición de estado.

Cada estado destino puede tener una guarda que valida la tarea antes de
persistir el cambio. Los destinos sin guarda se aceptan desde cualquier estado.
"""

from typing import Callable

from core.domain.errors import DescriptionTooShortError
from core.domain.models.task import Task, TaskStatus

MIN_DONE_DESCRIPTION_LENGTH = 20

TransitionGuard = Callable[[Task], None]


def require_long_description(task: Task) -> None:
    length = len(task.description)
    if length <= MIN_DONE_DESCRIPTION_LENGTH:
        raise DescriptionTooShortError(
            current_length=length,
            required_length=MIN_DONE_DESCRIPTION_LENGTH,
        )


TRANSITION_GUARDS: dict[TaskStatus, list[TransitionGuard]] = {
    TaskStatus.DONE: [require_long_description],
}


def check_transition(task: Task, target: TaskStatus) -> None:
    """
    Ejecuta las guardas registradas para `target`.

    Argumentos:
        task (Task): La tarea en su estado actual.
        target (TaskStatus): El estado al que se quiere mover.

    Lanza:
        TaskValidationError: Si alguna guarda rechaza la transición.
    """
    for guard in TRANSITION_GUARDS.get(target, []):
        guard(task)
