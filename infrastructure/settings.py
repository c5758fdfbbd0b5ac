import os
from dataclasses import dataclass, field
from typing import Mapping
from urllib.parse import urlparse

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MONGODB_URI = "mongodb://localhost:27017/match-day-task-board"
DEFAULT_DB_NAME = "match-day-task-board"


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _db_name_from_uri(uri: str) -> str | None:
    path = urlparse(uri).path.lstrip("/")
    return path or None


def _failure_rate(raw: str) -> float:
    try:
        rate = float(raw)
    except ValueError:
        return 0.0
    if rate < 0 or rate > 1:
        return 0.0
    return rate


@dataclass(slots=True)
class Settings:
    mongodb_uri: str = DEFAULT_MONGODB_URI
    mongo_db_name: str = DEFAULT_DB_NAME
    task_store: str = "mongo"
    host: str = "127.0.0.1"
    port: int = 5000
    reload: bool = False
    log_level: str = "info"
    app_env: str = "production"
    simulated_failure_rate: float = 0.0
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = field(default_factory=lambda: ["*"])
    cors_allow_headers: list[str] = field(default_factory=lambda: ["*"])

    @property
    def debug(self) -> bool:
        return self.app_env == "development"


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """
    Construye la configuración a partir de variables de entorno.

    Argumentos:
        env (Mapping[str, str] | None): Entorno explícito; por defecto `os.environ`.

    Retorna:
        Settings: La configuración del servicio.
    """
    e = os.environ if env is None else env

    mongodb_uri = e.get("MONGODB_URI", DEFAULT_MONGODB_URI)
    mongo_db_name = (
        e.get("MONGO_DB_NAME") or _db_name_from_uri(mongodb_uri) or DEFAULT_DB_NAME
    )

    return Settings(
        mongodb_uri=mongodb_uri,
        mongo_db_name=mongo_db_name,
        task_store=e.get("TASK_STORE", "mongo").strip().lower(),
        host=e.get("HOST", "127.0.0.1"),
        port=int(e.get("PORT", "5000")),
        reload=_as_bool(e.get("RELOAD", "false")),
        log_level=e.get("LOG_LEVEL", "info").lower(),
        app_env=e.get("APP_ENV", "production").strip().lower(),
        simulated_failure_rate=_failure_rate(e.get("SIMULATED_FAILURE_RATE", "0")),
        cors_origins=_as_list(e.get("CORS_ORIGINS", "*")),
        cors_allow_credentials=_as_bool(e.get("CORS_ALLOW_CREDENTIALS", "true")),
        cors_allow_methods=_as_list(e.get("CORS_ALLOW_METHODS", "*")),
        cors_allow_headers=_as_list(e.get("CORS_ALLOW_HEADERS", "*")),
    )
