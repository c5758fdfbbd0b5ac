from typing import Any

from fastapi.responses import JSONResponse

from core.domain.errors import StoreError
from infrastructure.fault.task_repository import SimulatedStoreError


def error_response(status_code: int, message: str, **extra: Any) -> JSONResponse:
    """Respuesta `{success: false, message, ...}`; los extras None se omiten."""
    content: dict[str, Any] = {"success": False, "message": message}
    content.update({key: value for key, value in extra.items() if value is not None})
    return JSONResponse(status_code=status_code, content=content)


def store_error_response(error: StoreError, message: str) -> JSONResponse:
    if isinstance(error, SimulatedStoreError):
        return error_response(500, str(error))
    return error_response(500, message, error=str(error))
