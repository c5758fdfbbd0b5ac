import unittest
from unittest.mock import Mock

from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task_status import (
    UpdateTaskStatusCommand,
    UpdateTaskStatusUseCase,
)
from core.domain.errors import (
    DescriptionTooShortError,
    InvalidTaskIdError,
    StoreError,
    TaskNotFoundError,
    TaskValidationError,
)
from core.domain.models.task import TaskStatus
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository

LONG_DESCRIPTION = "Needs investigation into root cause"


class CoreUseCasesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = InMemoryTaskRepository()

    def _create(self, title: str = "Fix bug", description: str | None = LONG_DESCRIPTION):
        return CreateTaskUseCase(self.repo).execute(
            CreateTaskCommand(title=title, description=description)
        )

    def test_crear_tarea_empieza_en_todo_y_recorta_campos(self) -> None:
        task = self._create(title="  Fix bug  ", description="  algo  ")

        self.assertEqual(task.status, TaskStatus.TODO)
        self.assertEqual(task.title, "Fix bug")
        self.assertEqual(task.description, "algo")
        self.assertIsNotNone(task.created_at)
        self.assertEqual(self.repo.get(task.id), task)

    def test_crear_tarea_sin_descripcion_usa_cadena_vacia(self) -> None:
        task = self._create(description=None)

        self.assertEqual(task.description, "")

    def test_crear_tarea_con_titulo_en_blanco_falla_sin_persistir(self) -> None:
        use_case = CreateTaskUseCase(self.repo)

        for title in ("", "   ", None):
            with self.assertRaises(TaskValidationError):
                use_case.execute(CreateTaskCommand(title=title, description="x"))

        self.assertEqual(self.repo.list(), [])

    def test_listar_tareas_de_mas_reciente_a_mas_antigua(self) -> None:
        first = self._create(title="t1")
        second = self._create(title="t2")
        third = self._create(title="t3")

        tasks = ListTasksUseCase(self.repo).execute()

        self.assertEqual([t.id for t in tasks], [third.id, second.id, first.id])

    def test_obtener_tarea_existente(self) -> None:
        task = self._create()

        self.assertEqual(GetTaskUseCase(self.repo).execute(task.id), task)

    def test_obtener_tarea_inexistente_o_id_mal_formado(self) -> None:
        use_case = GetTaskUseCase(self.repo)

        with self.assertRaises(TaskNotFoundError):
            use_case.execute("0" * 32)
        with self.assertRaises(TaskNotFoundError):
            use_case.execute("no-es-un-id")

    def test_mover_a_done_con_descripcion_larga(self) -> None:
        task = self._create()

        updated = UpdateTaskStatusUseCase(self.repo).execute(
            task.id, UpdateTaskStatusCommand(status="Done")
        )

        self.assertEqual(updated.status, TaskStatus.DONE)
        self.assertEqual(updated.created_at, task.created_at)
        self.assertEqual(self.repo.get(task.id).status, TaskStatus.DONE)

    def test_mover_a_done_con_descripcion_corta_no_cambia_estado(self) -> None:
        task = self._create(title="X", description="short")

        with self.assertRaises(DescriptionTooShortError) as ctx:
            UpdateTaskStatusUseCase(self.repo).execute(
                task.id, UpdateTaskStatusCommand(status="Done")
            )

        self.assertEqual(ctx.exception.current_length, 5)
        self.assertEqual(self.repo.get(task.id).status, TaskStatus.TODO)

    def test_limite_exacto_de_veinte_caracteres(self) -> None:
        use_case = UpdateTaskStatusUseCase(self.repo)
        exact = self._create(description="a" * 20)
        longer = self._create(description="a" * 21)

        with self.assertRaises(DescriptionTooShortError):
            use_case.execute(exact.id, UpdateTaskStatusCommand(status="Done"))
        self.assertEqual(
            use_case.execute(longer.id, UpdateTaskStatusCommand(status="Done")).status,
            TaskStatus.DONE,
        )

    def test_otras_transiciones_no_tienen_restriccion(self) -> None:
        use_case = UpdateTaskStatusUseCase(self.repo)
        task = self._create(description="corta")

        self.assertEqual(
            use_case.execute(task.id, UpdateTaskStatusCommand("In-Progress")).status,
            TaskStatus.IN_PROGRESS,
        )
        self.assertEqual(
            use_case.execute(task.id, UpdateTaskStatusCommand("To-Do")).status,
            TaskStatus.TODO,
        )

    def test_estado_invalido_se_valida_antes_de_buscar_la_tarea(self) -> None:
        repo = Mock()
        use_case = UpdateTaskStatusUseCase(repo)

        for raw in ("Finished", "done", "", None):
            with self.assertRaises(TaskValidationError):
                use_case.execute("cualquiera", UpdateTaskStatusCommand(status=raw))

        repo.get.assert_not_called()
        repo.update_status.assert_not_called()

    def test_actualizar_tarea_inexistente(self) -> None:
        use_case = UpdateTaskStatusUseCase(self.repo)

        with self.assertRaises(TaskNotFoundError):
            use_case.execute("0" * 32, UpdateTaskStatusCommand(status="Done"))
        with self.assertRaises(TaskNotFoundError):
            use_case.execute("zzz", UpdateTaskStatusCommand(status="Done"))

    def test_actualizar_cuando_la_tarea_desaparece_antes_de_escribir(self) -> None:
        task = self._create()
        repo = Mock()
        repo.get.return_value = task
        repo.update_status.return_value = None

        with self.assertRaises(TaskNotFoundError):
            UpdateTaskStatusUseCase(repo).execute(
                task.id, UpdateTaskStatusCommand(status="In-Progress")
            )

    def test_id_mal_formado_del_almacen_se_traduce_a_not_found(self) -> None:
        repo = Mock()
        repo.get.side_effect = InvalidTaskIdError("abc")

        with self.assertRaises(TaskNotFoundError):
            GetTaskUseCase(repo).execute("abc")
        with self.assertRaises(TaskNotFoundError):
            UpdateTaskStatusUseCase(repo).execute(
                "abc", UpdateTaskStatusCommand(status="To-Do")
            )

    def test_error_del_almacen_se_propaga(self) -> None:
        task = self._create()
        repo = Mock()
        repo.get.return_value = task
        repo.update_status.side_effect = StoreError("boom")
        repo.list.side_effect = StoreError("boom")

        with self.assertRaises(StoreError):
            UpdateTaskStatusUseCase(repo).execute(
                task.id, UpdateTaskStatusCommand(status="In-Progress")
            )
        with self.assertRaises(StoreError):
            ListTasksUseCase(repo).execute()


if __name__ == "__main__":
    unittest.main()
