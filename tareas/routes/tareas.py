"""CRUD endpoints for tasks."""

import logging

from fastapi import APIRouter, Depends
from sqlmodel import Session

from tareas import repository
from tareas.database import get_session
from tareas.errors import NotFoundError
from tareas.models import TareaCreate, TareaRead, TareaUpdate
from tareas.update_builder import build_update
from tareas.validation import category_exists, task_exists, validate_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tareas", tags=["tareas"])


def _get_or_404(session: Session, tarea_id: int) -> TareaRead:
    tarea = repository.fetch_tarea(session, tarea_id)
    if tarea is None:
        raise NotFoundError(f"La tarea con ID {tarea_id} no existe")
    return tarea


@router.get("")
def list_tareas(session: Session = Depends(get_session)) -> list[TareaRead]:
    """List tasks: pending ones first, then completed, newest first in each group."""
    return repository.list_tareas(session)


@router.get("/{tarea_id}")
def get_tarea(tarea_id: int, session: Session = Depends(get_session)) -> TareaRead:
    """Get a single task by ID."""
    return _get_or_404(session, tarea_id)


@router.post("", status_code=201)
def create_tarea(body: TareaCreate, session: Session = Depends(get_session)) -> TareaRead:
    """Create a new task in the given category."""
    logger.debug("Received new task: %r", body)
    validate_text("titulo", body.titulo)
    validate_text("descripcion", body.descripcion)
    category_exists(session, body.categoria_id)

    tarea_id = repository.insert_tarea(session, body)
    logger.info("Created task %s in category %s", tarea_id, body.categoria_id)
    return _get_or_404(session, tarea_id)


@router.patch("/{tarea_id}")
def update_tarea(
    tarea_id: int, body: TareaUpdate, session: Session = Depends(get_session)
) -> TareaRead:
    """Update an existing task. Only provided fields are changed.

    Checks run in a fixed order and the first failure is reported: the task
    must exist, then a supplied category must exist, then supplied text
    fields must be non-empty.
    """
    task_exists(session, tarea_id)
    changes = body.supplied()
    if "categoria_id" in changes:
        category_exists(session, changes["categoria_id"])
    for field in ("titulo", "descripcion"):
        if field in changes:
            validate_text(field, changes[field])

    statement = build_update(tarea_id, changes)
    if statement is not None:
        repository.apply_update(session, statement)
        logger.info("Updated task %s: %s", tarea_id, ", ".join(changes))
    return _get_or_404(session, tarea_id)


@router.delete("/{tarea_id}", status_code=204)
def delete_tarea(tarea_id: int, session: Session = Depends(get_session)) -> None:
    """Delete a task by ID."""
    if repository.delete_tarea(session, tarea_id) == 0:
        raise NotFoundError(f"La tarea con ID {tarea_id} no existe")
    logger.info("Deleted task %s", tarea_id)
