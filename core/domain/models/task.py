from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TaskStatus(Enum):
    TODO = "To-Do"
    IN_PROGRESS = "In-Progress"
    DONE = "Done"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


@dataclass(slots=True)
class Task:
    id: str
    title: str
    created_at: datetime
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
