"""Esquemas de tutores."""
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from app.schemas.common import TextoOpcional, TextoRequerido


class TutorIn(BaseModel):
    id_nino: UUID = Field(description="Niño a cargo del tutor")
    nombre: TextoRequerido
    relacion: Literal["Madre", "Padre", "Tutor Legal"]
    nacionalidad: TextoRequerido
    identificacion: TextoOpcional = None
    telefono: TextoOpcional = None
    email: EmailStr | None = None
    direccion: TextoOpcional = None
