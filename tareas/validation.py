"""Input and referential checks run before any task mutation."""

from sqlmodel import Session

from tareas import repository
from tareas.errors import InvalidReferenceError, NotFoundError, ValidationError

_EMPTY_MESSAGES = {
    "titulo": "El título no puede estar vacío",
    "descripcion": "La descripción no puede estar vacía",
}


def validate_text(field: str, value: str) -> str:
    """Reject a text field that is empty once surrounding whitespace is removed."""
    if not value.strip():
        raise ValidationError(_EMPTY_MESSAGES.get(field, f"{field} no puede estar vacío"))
    return value


def category_exists(session: Session, categoria_id: int) -> None:
    if not repository.has_categoria(session, categoria_id):
        raise InvalidReferenceError(f"La categoría con ID {categoria_id} no existe")


def task_exists(session: Session, tarea_id: int) -> None:
    if not repository.has_tarea(session, tarea_id):
        raise NotFoundError(f"La tarea con ID {tarea_id} no existe")
