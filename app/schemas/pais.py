"""Esquemas de países."""
from pydantic import BaseModel, Field

from app.schemas.common import EstadoRegistro, TextoRequerido


class PaisIn(BaseModel):
    """Body para crear o actualizar un país."""

    nombre_pais: TextoRequerido = Field(description="Nombre del país", examples=["República Dominicana"])
    codigo_iso: TextoRequerido = Field(description="Código ISO", max_length=3, examples=["DOM"])
    estado: EstadoRegistro = Field(description="Activo o Inactivo")
