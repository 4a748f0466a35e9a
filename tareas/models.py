"""Category and task models for the tareas API.

Storage uses flat rows (``Tarea.categoria_id`` is a foreign key); the API
answers with ``TareaRead``, which embeds the category by value.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class Categoria(SQLModel, table=True):
    """Category table. Seeded at startup, read-only afterwards."""
    __tablename__ = "categorias"

    id: Optional[int] = Field(default=None, primary_key=True)
    nombre: str = Field(unique=True)


class Tarea(SQLModel, table=True):
    """Task table."""
    __tablename__ = "tareas"

    id: Optional[int] = Field(default=None, primary_key=True)
    titulo: str
    descripcion: str
    categoria_id: int = Field(foreign_key="categorias.id")
    completada: bool = Field(default=False)


class CategoriaRead(SQLModel):
    id: int
    nombre: str


class TareaRead(SQLModel):
    """Task as returned by the API, with its category embedded."""
    id: int
    titulo: str
    descripcion: str
    categoria: CategoriaRead
    completada: bool


class TareaCreate(SQLModel):
    """Schema for creating a task. Every field is required."""
    titulo: str
    descripcion: str
    categoria_id: int


class TareaUpdate(SQLModel):
    """Schema for a partial update. Omitted or null fields are left untouched."""
    titulo: Optional[str] = None
    descripcion: Optional[str] = None
    categoria_id: Optional[int] = None
    completada: Optional[bool] = None

    def supplied(self) -> dict:
        """Return only the fields the client actually sent with a value."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
