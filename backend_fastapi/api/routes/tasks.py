import logging

from fastapi import APIRouter, Depends, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    update_task_status_use_case,
)
from backend_fastapi.api.responses import error_response, store_error_response
from backend_fastapi.api.schemas import (
    CreateTaskRequest,
    TaskEnvelope,
    TaskListEnvelope,
    TaskOut,
    UpdateTaskStatusRequest,
)
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task_status import (
    UpdateTaskStatusCommand,
    UpdateTaskStatusUseCase,
)
from core.domain.errors import (
    DescriptionTooShortError,
    StoreError,
    TaskNotFoundError,
    TaskValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get(
    "",
    response_model=TaskListEnvelope,
    response_model_exclude_none=True,
    summary="List all tasks",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
):
    """
    Devuelve todas las tareas, de la más reciente a la más antigua.
    """
    try:
        tasks = use_case.execute()
    except StoreError as e:
        logger.error(f"Error fetching tasks: {e}")
        return store_error_response(e, "Failed to fetch tasks")

    return TaskListEnvelope(data=[TaskOut.from_domain(task) for task in tasks])


@router.get(
    "/{task_id}",
    response_model=TaskEnvelope,
    response_model_exclude_none=True,
    summary="Get a single task",
)
def get_task(
    task_id: str,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
):
    """
    Obtiene una tarea por su ID.

    - **task_id**: ID asignado por el almacén.
    """
    try:
        task = use_case.execute(task_id)
    except TaskNotFoundError as e:
        return error_response(status.HTTP_404_NOT_FOUND, str(e))
    except StoreError as e:
        logger.error(f"Error fetching task: {e}")
        return store_error_response(e, "Failed to fetch task")

    return TaskEnvelope(data=TaskOut.from_domain(task))


@router.post(
    "",
    response_model=TaskEnvelope,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
def create_task(
    payload: CreateTaskRequest | None = None,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
):
    """
    Crea una nueva tarea en estado To-Do.

    - **title**: Título de la tarea (obligatorio).
    - **description**: Descripción opcional.
    """
    payload = payload or CreateTaskRequest()
    try:
        task = use_case.execute(
            CreateTaskCommand(title=payload.title, description=payload.description)
        )
    except TaskValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except StoreError as e:
        logger.error(f"Error creating task: {e}")
        return store_error_response(e, "Failed to create task")

    logger.info(f"📝 Tarea creada: {task.id}")
    return TaskEnvelope(data=TaskOut.from_domain(task))


@router.patch(
    "/{task_id}/status",
    response_model=TaskEnvelope,
    response_model_exclude_none=True,
    summary="Update task status",
)
def update_task_status(
    task_id: str,
    payload: UpdateTaskStatusRequest | None = None,
    use_case: UpdateTaskStatusUseCase = Depends(update_task_status_use_case),
):
    """
    Mueve una tarea a otro estado.

    - **task_id**: ID de la tarea.
    - **status**: To-Do, In-Progress o Done. Done exige una descripción de
      más de 20 caracteres.
    """
    payload = payload or UpdateTaskStatusRequest()
    try:
        task = use_case.execute(task_id, UpdateTaskStatusCommand(status=payload.status))
    except DescriptionTooShortError as e:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            str(e),
            validationError=True,
            currentDescriptionLength=e.current_length,
        )
    except TaskValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except TaskNotFoundError as e:
        return error_response(status.HTTP_404_NOT_FOUND, str(e))
    except StoreError as e:
        logger.error(f"Error updating task status: {e}")
        return store_error_response(e, "Failed to update task status")

    return TaskEnvelope(data=TaskOut.from_domain(task))
