"""Statements against the tareas store.

Every query goes through a ``Session`` with bound parameters. Store failures
are rolled back and re-raised as ``PersistenceError`` so handlers only ever
see the error taxonomy.
"""

import logging
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import Update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from tareas.errors import PersistenceError
from tareas.mapper import tarea_from_create, tarea_from_row
from tareas.models import Categoria, CategoriaRead, Tarea, TareaCreate, TareaRead

logger = logging.getLogger(__name__)

# SQLite INTEGER keys are signed 64-bit; ids outside that range never match a row.
MIN_ROW_ID = -(2**63)
MAX_ROW_ID = 2**63 - 1


def _storable_id(value: int) -> bool:
    return MIN_ROW_ID <= value <= MAX_ROW_ID


@contextmanager
def _store_errors(session: Session, action: str):
    """Translate SQLAlchemy failures raised inside the block into PersistenceError."""
    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Error al %s: %s", action, exc)
        raise PersistenceError(f"Error al {action}: {exc}") from exc


def _joined_tareas():
    # INNER JOIN: a task whose category row is gone is not returned.
    return select(
        Tarea.id,
        Tarea.titulo,
        Tarea.descripcion,
        Tarea.completada,
        Categoria.id.label("categoria_id"),
        Categoria.nombre.label("categoria_nombre"),
    ).join(Categoria, Tarea.categoria_id == Categoria.id)


def list_categorias(session: Session) -> list[CategoriaRead]:
    with _store_errors(session, "obtener categorías"):
        rows = session.exec(select(Categoria).order_by(Categoria.nombre)).all()
    return [CategoriaRead(id=row.id, nombre=row.nombre) for row in rows]


def list_tareas(session: Session) -> list[TareaRead]:
    """Incomplete tasks first, then completed ones; newest first within each group."""
    statement = _joined_tareas().order_by(Tarea.completada, Tarea.id.desc())
    with _store_errors(session, "obtener tareas"):
        rows = session.exec(statement).all()
    return [tarea_from_row(row) for row in rows]

def fetch_tarea(session: Session, tarea_id: int) -> Optional[TareaRead]:
    if not _storable_id(tarea_id):
        return None
    statement = _joined_tareas().where(Tarea.id == tarea_id)
    with _store_errors(session, "obtener tarea"):
        row = session.exec(statement).first()
    return tarea_from_row(row) if row is not None else None


def has_categoria(session: Session, categoria_id: int) -> bool:
    if not _storable_id(categoria_id):
        return False
    with _store_errors(session, "verificar categoría"):
        found = session.exec(
            select(Categoria.id).where(Categoria.id == categoria_id)
        ).first()
    return found is not None


def has_tarea(session: Session, tarea_id: int) -> bool:
    if not _storable_id(tarea_id):
        return False
    with _store_errors(session, "verificar tarea"):
        found = session.exec(select(Tarea.id).where(Tarea.id == tarea_id)).first()
    return found is not None


def insert_tarea(session: Session, body: TareaCreate) -> int:
    """Store a new task and return the id assigned by the store."""
    tarea = tarea_from_create(body)
    with _store_errors(session, "crear tarea"):
        session.add(tarea)
        session.commit()
        session.refresh(tarea)
    return tarea.id


def apply_update(session: Session, statement: Update) -> None:
    with _store_errors(session, "actualizar tarea"):
        session.exec(statement)
        session.commit()


def delete_tarea(session: Session, tarea_id: int) -> int:
    """Delete a task and return the number of rows removed (0 or 1)."""
    if not _storable_id(tarea_id):
        return 0
    with _store_errors(session, "borrar tarea"):
        result = session.exec(delete(Tarea).where(Tarea.id == tarea_id))
        session.commit()
    return result.rowcount
