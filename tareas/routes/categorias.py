"""Read-only endpoint for the seeded categories."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from tareas import repository
from tareas.database import get_session
from tareas.models import CategoriaRead

router = APIRouter(prefix="/categorias", tags=["categorias"])


@router.get("")
def list_categorias(session: Session = Depends(get_session)) -> list[CategoriaRead]:
    """List all categories sorted by name."""
    return repository.list_categorias(session)
