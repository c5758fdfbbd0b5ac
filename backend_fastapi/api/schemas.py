from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from core.domain.models.task import Task, TaskStatus


class CreateTaskRequest(BaseModel):
    title: str | None = None
    description: str | None = None


class UpdateTaskStatusRequest(BaseModel):
    status: str | None = None


class TaskOut(BaseModel):
    id: str
    title: str
    description: str
    status: TaskStatus
    created_at: datetime = Field(alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, task: Task) -> "TaskOut":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            created_at=task.created_at,
        )


class TaskEnvelope(BaseModel):
    success: bool = True
    data: TaskOut
    message: str | None = None


class TaskListEnvelope(BaseModel):
    success: bool = True
    data: list[TaskOut]
    message: str | None = None
