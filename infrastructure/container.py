import logging
from contextlib import contextmanager
from typing import Iterator

from core.application.create_task import CreateTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task_status import UpdateTaskStatusUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.fault.task_repository import FaultInjectingTaskRepository
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository
from infrastructure.mongo.repository.task_repository import MongoTaskRepository
from infrastructure.mongo.session.client import create_client, get_db
from infrastructure.settings import Settings

logger = logging.getLogger(__name__)


def _with_faults(repository: TaskRepository, settings: Settings) -> TaskRepository:
    if settings.simulated_failure_rate > 0:
        return FaultInjectingTaskRepository(
            repository, failure_rate=settings.simulated_failure_rate
        )
    return repository


@contextmanager
def open_task_repository(settings: Settings) -> Iterator[TaskRepository]:
    """
    Abre el almacén configurado y lo libera al salir del bloque.

    Con TASK_STORE=mongo el cliente de MongoDB vive lo mismo que el bloque
    `with` y se cierra siempre, también si el arranque falla a mitad.
    """
    store = settings.task_store

    if store == "memory":
        logger.info("🧠 Usando almacén en memoria")
        yield _with_faults(InMemoryTaskRepository(), settings)
        return

    if store != "mongo":
        raise ValueError(f"TASK_STORE desconocido: {store!r}")

    client = create_client(settings.mongodb_uri)
    try:
        db = get_db(client, settings.mongo_db_name)
        repository = MongoTaskRepository(db.tasks)
        repository.ensure_indexes()
        logger.info("✅ Connected to MongoDB")
        logger.info(f"📊 Database: {settings.mongo_db_name}")
        yield _with_faults(repository, settings)
    finally:
        client.close()
        logger.info("✅ MongoDB connection closed")


def get_list_tasks_use_case(repository: TaskRepository) -> ListTasksUseCase:
    return ListTasksUseCase(repository=repository)


def get_get_task_use_case(repository: TaskRepository) -> GetTaskUseCase:
    return GetTaskUseCase(repository=repository)


def get_create_task_use_case(repository: TaskRepository) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=repository)


def get_update_task_status_use_case(
    repository: TaskRepository,
) -> UpdateTaskStatusUseCase:
    return UpdateTaskStatusUseCase(repository=repository)
