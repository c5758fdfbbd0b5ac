from datetime import datetime

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.domain.models.task import Task, TaskStatus


class TaskDocument(BaseModel):
    """
    Modelo de Task para MongoDB.
    Representa y valida cómo se almacena la tarea en la base de datos.
    """

    id: ObjectId | None = Field(default=None, alias="_id")
    title: str = Field(min_length=1)
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    created_at: datetime = Field(alias="createdAt")

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    @field_validator("description", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    def to_domain(self) -> Task:
        """
        Convierte el documento de MongoDB al modelo de dominio.

        Retorna:
            Task: La entidad de dominio.
        """
        return Task(
            id=str(self.id),
            title=self.title,
            description=self.description,
            status=self.status,
            created_at=self.created_at,
        )

    def to_document(self) -> dict:
        """Documento listo para `insert_one` (sin `_id` si aún no existe)."""
        doc = {
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at,
        }
        if self.id is not None:
            doc["_id"] = self.id
        return doc
