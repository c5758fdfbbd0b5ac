import uvicorn

from infrastructure.settings import load_settings


def run() -> None:
    settings = load_settings()

    print(
        f"Starting server at http://{settings.host}:{settings.port} "
        f"(Reload: {settings.reload}, Store: {settings.task_store})"
    )

    uvicorn.run(
        "backend_fastapi.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()
