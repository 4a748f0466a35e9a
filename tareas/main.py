"""FastAPI application for the tareas task tracker backend."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tareas import settings
from tareas.database import create_db_and_tables
from tareas.errors import TareasError, ValidationError
from tareas.routes.categorias import router as categorias_router
from tareas.routes.tareas import router as tareas_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed categories on startup."""
    create_db_and_tables()
    yield


app = FastAPI(title="Tareas API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["Content-Type"],
)

app.include_router(categorias_router)
app.include_router(tareas_router)


def _error_response(error: TareasError) -> JSONResponse:
    status_code = 400 if settings.FLAT_ERROR_STATUS else error.status_code
    return JSONResponse(status_code=status_code, content=error.to_payload())


@app.exception_handler(TareasError)
async def tareas_error_handler(request: Request, exc: TareasError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies and path parameters with the common error envelope."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    message = "Solicitud inválida: " + "; ".join(problems)
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return _error_response(ValidationError(message))


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "tareas-api"}


def run() -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Servidor ejecutándose en http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
