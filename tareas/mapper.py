"""Conversions between stored rows and the API-facing task shape."""

from typing import Any

from tareas.models import CategoriaRead, Tarea, TareaCreate, TareaRead


def tarea_from_row(row: Any) -> TareaRead:
    """Build a ``TareaRead`` from a task row joined with its category.

    *row* is a result row (or plain mapping) with the columns ``id``,
    ``titulo``, ``descripcion``, ``completada``, ``categoria_id`` and
    ``categoria_nombre``.
    """
    values = getattr(row, "_mapping", row)
    return TareaRead(
        id=values["id"],
        titulo=values["titulo"],
        descripcion=values["descripcion"],
        completada=bool(values["completada"]),
        categoria=CategoriaRead(
            id=values["categoria_id"],
            nombre=values["categoria_nombre"],
        ),
    )


def tarea_from_create(body: TareaCreate) -> Tarea:
    """Build the storage row for a new task. New tasks start incomplete."""
    return Tarea(
        titulo=body.titulo,
        descripcion=body.descripcion,
        categoria_id=body.categoria_id,
        completada=False,
    )
