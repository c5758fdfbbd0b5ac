from uuid import UUID

import pytest

from core.domain.errors import InvalidTaskIdError
from core.domain.models.task import TaskStatus
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository


@pytest.fixture
def repo():
    return InMemoryTaskRepository()


def test_create_asigna_id_y_fecha(repo):
    task = repo.create("Title", "Desc", TaskStatus.TODO)

    assert len(task.id) == 32
    assert task.created_at.tzinfo is not None
    assert repo.get(task.id) == task


def test_list_ordena_por_creacion_descendente(repo):
    ids = [repo.create(f"t{i}", "", TaskStatus.TODO).id for i in range(5)]

    assert [t.id for t in repo.list()] == list(reversed(ids))


def test_update_status_solo_cambia_el_estado(repo):
    task = repo.create("Title", "Desc", TaskStatus.TODO)

    updated = repo.update_status(task.id, TaskStatus.IN_PROGRESS)

    assert updated.status == TaskStatus.IN_PROGRESS
    assert (updated.title, updated.description, updated.created_at) == (
        task.title,
        task.description,
        task.created_at,
    )


def test_las_tareas_devueltas_son_copias(repo):
    task = repo.create("Title", "Desc", TaskStatus.TODO)

    task.status = TaskStatus.DONE

    assert repo.get(task.id).status == TaskStatus.TODO


def test_id_inexistente(repo):
    assert repo.get("0" * 32) is None
    assert repo.update_status("0" * 32, TaskStatus.DONE) is None


@pytest.mark.parametrize("bad_id", ["", "abc", "507f1f77bcf86cd799439011"])
def test_id_mal_formado(repo, bad_id):
    with pytest.raises(InvalidTaskIdError):
        repo.get(bad_id)
    with pytest.raises(InvalidTaskIdError):
        repo.update_status(bad_id, TaskStatus.DONE)


def test_solo_acepta_la_forma_canonica_del_id(repo):
    task = repo.create("Title", "Desc", TaskStatus.TODO)
    canonical = UUID(hex=task.id)

    for alias in (str(canonical), f"{{{canonical}}}", canonical.urn, task.id.upper()):
        with pytest.raises(InvalidTaskIdError):
            repo.get(alias)

    assert repo.get(task.id) == task
