"""
Repositorio que simula fallos del almacén.

Envuelve a otro TaskRepository y, con la probabilidad configurada, falla antes
de delegar las escrituras. Sirve para probar cómo reacciona un cliente ante un
500; solo se conecta cuando SIMULATED_FAILURE_RATE > 0.
"""

import logging
import random
from typing import Callable

from core.domain.errors import StoreError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class SimulatedStoreError(StoreError):
    """Fallo provocado a propósito, no un error real del almacén."""


class FaultInjectingTaskRepository(TaskRepository):
    def __init__(
        self,
        inner: TaskRepository,
        failure_rate: float,
        rng: Callable[[], float] = random.random,
    ) -> None:
        self._inner = inner
        self.failure_rate = failure_rate
        self._rng = rng
        logger.warning(
            f"⚠️ Fault injection activa: {failure_rate:.0%} de las escrituras fallarán"
        )

    def _maybe_fail(self, message: str) -> None:
        if self._rng() < self.failure_rate:
            logger.warning(f"💥 {message}")
            raise SimulatedStoreError(message)

    def list(self) -> list[Task]:
        return self._inner.list()

    def get(self, task_id: str) -> Task | None:
        return self._inner.get(task_id)

    def create(self, title: str, description: str, status: TaskStatus) -> Task:
        self._maybe_fail("Simulated server error during task creation")
        return self._inner.create(title, description, status)

    def update_status(self, task_id: str, status: TaskStatus) -> Task | None:
        self._maybe_fail("Simulated server error during status update")
        return self._inner.update_status(task_id, status)
