"""Runtime configuration for the tareas backend, read from environment variables."""

import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# Must be a SQLite URL.
DATABASE_URL = os.getenv("TAREAS_DATABASE_URL", "sqlite:///tareas.db")

# Fixed-size pool: at most POOL_SIZE requests talk to the store at once.
POOL_SIZE = int(os.getenv("TAREAS_POOL_SIZE", "5"))
POOL_TIMEOUT = float(os.getenv("TAREAS_POOL_TIMEOUT", "30"))
SQL_ECHO = _env_bool("TAREAS_SQL_ECHO", False)

CORS_ORIGINS = os.getenv("TAREAS_CORS_ORIGINS", "*").split(",")

# When set, every error is answered with 400 regardless of its kind.
FLAT_ERROR_STATUS = _env_bool("TAREAS_FLAT_ERROR_STATUS", False)

HOST = os.getenv("TAREAS_HOST", "0.0.0.0")
PORT = int(os.getenv("TAREAS_PORT", "3000"))
LOG_LEVEL = os.getenv("TAREAS_LOG_LEVEL", "INFO").upper()

DEFAULT_CATEGORIAS = ("Compras", "Trabajo", "Estudio", "Personal", "Otros")
