import logging
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from core.domain.errors import InvalidTaskIdError, StoreError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.mongo.models.task import TaskDocument

logger = logging.getLogger(__name__)

# _id desempata tareas creadas en el mismo milisegundo.
_LIST_ORDER = [("createdAt", DESCENDING), ("_id", DESCENDING)]


def _now() -> datetime:
    # BSON solo guarda milisegundos.
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _object_id(task_id: str) -> ObjectId:
    try:
        return ObjectId(task_id)
    except (InvalidId, TypeError):
        raise InvalidTaskIdError(task_id)


class MongoTaskRepository(TaskRepository):
    """
    Implementación de TaskRepository usando MongoDB (Synchronous).
    """

    def __init__(self, collection: Collection[Any]) -> None:
        self.collection = collection

    def ensure_indexes(self) -> None:
        try:
            self.collection.create_index(_LIST_ORDER)
        except PyMongoError as e:
            raise StoreError(str(e)) from e

    def list(self) -> list[Task]:
        """
        Lista todas las tareas, de la más reciente a la más antigua.

        Retorna:
            list[Task]: Lista de todas las tareas.
        """
        try:
            docs = list(self.collection.find().sort(_LIST_ORDER))
        except PyMongoError as e:
            logger.error(f"🔴 Error leyendo tareas: {e}")
            raise StoreError(str(e)) from e
        return [self._to_domain(doc) for doc in docs]

    def get(self, task_id: str) -> Task | None:
        """
        Obtiene una tarea por su ID.

        Argumentos:
            task_id (str): El ObjectId de la tarea en hexadecimal.

        Retorna:
            Task | None: La tarea encontrada o None si no existe.
        """
        oid = _object_id(task_id)
        try:
            doc = self.collection.find_one({"_id": oid})
        except PyMongoError as e:
            logger.error(f"🔴 Error leyendo tarea {task_id}: {e}")
            raise StoreError(str(e)) from e
        if not doc:
            return None
        return self._to_domain(doc)

    def create(self, title: str, description: str, status: TaskStatus) -> Task:
        """
        Inserta una tarea nueva. MongoDB asigna el `_id`.

        Retorna:
            Task: La tarea persistida con su ID y fecha de creación.
        """
        try:
            document = TaskDocument(
                title=title,
                description=description,
                status=status,
                created_at=_now(),
            )
        except ValidationError as e:
            raise StoreError(str(e)) from e

        payload = document.to_document()
        try:
            result = self.collection.insert_one(payload)
        except PyMongoError as e:
            logger.error(f"🔴 Error creando tarea: {e}")
            raise StoreError(str(e)) from e

        document.id = result.inserted_id
        return document.to_domain()

    def update_status(self, task_id: str, status: TaskStatus) -> Task | None:
        """
        Cambia solo el estado, en una única escritura atómica del documento.

        Retorna:
            Task | None: La tarea actualizada o None si no existe.
        """
        oid = _object_id(task_id)
        try:
            doc = self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": {"status": status.value}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"🔴 Error actualizando tarea {task_id}: {e}")
            raise StoreError(str(e)) from e
        if not doc:
            return None
        return self._to_domain(doc)

    @staticmethod
    def _to_domain(doc: dict[str, Any]) -> Task:
        try:
            return TaskDocument(**doc).to_domain()
        except ValidationError as e:
            raise StoreError(f"Invalid task document {doc.get('_id')}: {e}") from e
