"""Esquemas para la gestión de usuarios."""
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from app.core.roles import Rol
from app.schemas.common import TextoRequerido

PATRON_TELEFONO = r"^\+?[\d\s\-()]{7,15}$"


class UsuarioCreate(BaseModel):
    """Body para crear un usuario. La contraseña se guarda como hash bcrypt."""

    nombre: TextoRequerido = Field(description="Nombre del usuario")
    username: TextoRequerido = Field(description="Nombre de usuario (único)")
    password: str = Field(description="Contraseña en texto", min_length=8)
    rol: Rol = Field(description="Rol del usuario")
    id_centro: UUID | None = Field(default=None, description="Centro al que pertenece")
    email: EmailStr | None = None
    telefono: str | None = Field(default=None, pattern=PATRON_TELEFONO, examples=["+1-809-532-0001"])


class UsuarioUpdate(UsuarioCreate):
    """Body para actualizar un usuario. Sin password se conserva el hash actual."""

    password: str | None = Field(default=None, min_length=8)
