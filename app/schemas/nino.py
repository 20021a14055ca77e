"""Esquemas de niños (pacientes)."""
from datetime import date
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from app.schemas.common import TextoOpcional, TextoRequerido


class NinoIn(BaseModel):
    """Body para registrar o actualizar un niño."""

    nombre_completo: TextoRequerido = Field(description="Nombre completo")
    identificacion: TextoRequerido = Field(description="Documento de identidad")
    nacionalidad: Literal["Dominicano", "Extranjero"]
    id_pais_nacimiento: UUID | None = None
    fecha_nacimiento: date
    genero: Literal["M", "F", "O"]
    direccion_residencia: TextoOpcional = None
    latitud: float | None = Field(default=None, ge=-90, le=90)
    longitud: float | None = Field(default=None, ge=-180, le=180)
    id_centro_salud: UUID | None = None
    contacto_principal: Literal["Madre", "Padre", "Tutor"] | None = None
    id_salud_nacional: TextoOpcional = None
