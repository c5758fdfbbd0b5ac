import re
import threading
from datetime import datetime, timezone
from itertools import count
from uuid import uuid4

from core.domain.errors import InvalidTaskIdError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository

_ID_PATTERN = re.compile(r"[0-9a-f]{32}")


def _parse_id(task_id: str) -> str:
    if not isinstance(task_id, str) or not _ID_PATTERN.fullmatch(task_id):
        raise InvalidTaskIdError(task_id)
    return task_id


class InMemoryTaskRepository(TaskRepository):
    """
    Almacén en memoria para desarrollo local (TASK_STORE=memory) y tests.
    Los datos se pierden al terminar el proceso.
    """

    def __init__(self) -> None:
        self._data: dict[str, tuple[int, Task]] = {}
        self._sequence = count()
        self._lock = threading.Lock()

    def list(self) -> list[Task]:
        with self._lock:
            entries = list(self._data.values())
        entries.sort(key=lambda entry: (entry[1].created_at, entry[0]), reverse=True)
        return [self._copy(task) for _, task in entries]

    def get(self, task_id: str) -> Task | None:
        key = _parse_id(task_id)
        with self._lock:
            entry = self._data.get(key)
        return self._copy(entry[1]) if entry else None

    def create(self, title: str, description: str, status: TaskStatus) -> Task:
        task = Task(
            id=uuid4().hex,
            title=title,
            description=description,
            status=status,
            created_at=datetime.now(timezone.utc),
        )
        with self._lock:
            self._data[task.id] = (next(self._sequence), task)
        return self._copy(task)

    def update_status(self, task_id: str, status: TaskStatus) -> Task | None:
        key = _parse_id(task_id)
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            entry[1].status = status
            return self._copy(entry[1])

    @staticmethod
    def _copy(task: Task) -> Task:
        return Task(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            created_at=task.created_at,
        )
