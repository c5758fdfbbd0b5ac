import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend_fastapi.api.responses import error_response
from backend_fastapi.api.routes.health import router as health_router
from backend_fastapi.api.routes.tasks import router as tasks_router
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import open_task_repository
from infrastructure.settings import Settings, load_settings

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _validation_message(exc: RequestValidationError) -> str:
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ())[1:])
        messages.append(f"{field}: {err['msg']}" if field else err["msg"])
    return ", ".join(messages) or "Invalid request"


def create_app(
    repository: TaskRepository | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Construye la aplicación.

    Argumentos:
        repository (TaskRepository | None): Almacén ya construido. Si es None,
            se abre el configurado al arrancar y se cierra al apagar.
        settings (Settings | None): Configuración; por defecto la del entorno.
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        if repository is not None:
            yield
            return
        with open_task_repository(settings) as opened:
            app.state.task_repository = opened
            logger.info(f"🚀 API available at {API_PREFIX}")
            yield
            logger.info("🛑 Shutting down gracefully...")

    app = FastAPI(title="Match Day Task Board API", lifespan=lifespan)
    app.state.settings = settings
    if repository is not None:
        app.state.task_repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        return error_response(status.HTTP_400_BAD_REQUEST, _validation_message(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND,
            status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            return error_response(status.HTTP_404_NOT_FOUND, "Route not found")
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error: {exc}")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            error=str(exc) if settings.debug else None,
        )

    app.include_router(tasks_router, prefix=API_PREFIX)
    app.include_router(health_router, prefix=API_PREFIX)
    return app


app = create_app()
