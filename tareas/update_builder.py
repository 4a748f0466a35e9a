"""Builds the UPDATE statement for a partial task update."""

from typing import Any, Mapping, Optional

from sqlalchemy import Update, update

from tareas.models import Tarea

# Columns a partial update may touch, in the order they appear in the SET list.
UPDATABLE_COLUMNS = ("titulo", "descripcion", "categoria_id", "completada")


def build_update(tarea_id: int, changes: Mapping[str, Any]) -> Optional[Update]:
    """Return an UPDATE touching only the columns present in *changes*.

    Values are bound as parameters; column names come from
    ``UPDATABLE_COLUMNS`` only. Returns ``None`` when there is nothing to
    change.

    Raises
    ------
    ValueError
        If *changes* names a column that cannot be updated.
    """
    unknown = set(changes) - set(UPDATABLE_COLUMNS)
    if unknown:
        raise ValueError(f"Cannot update columns: {', '.join(sorted(unknown))}")

    assignments = [
        (column, changes[column]) for column in UPDATABLE_COLUMNS if column in changes
    ]
    if not assignments:
        return None

    return update(Tarea).where(Tarea.id == tarea_id).values(dict(assignments))
