"""Esquemas de centros de vacunación."""
from pydantic import BaseModel, Field

from app.schemas.common import TextoOpcional, TextoRequerido


class CentroIn(BaseModel):
    """Body para crear o actualizar un centro de vacunación."""

    nombre_centro: TextoRequerido = Field(description="Nombre del centro")
    nombre_corto: TextoOpcional = None
    direccion: TextoOpcional = None
    latitud: float | None = Field(default=None, ge=-90, le=90)
    longitud: float | None = Field(default=None, ge=-180, le=180)
    telefono: TextoOpcional = None
    director: TextoOpcional = None
    sitio_web: str | None = Field(default=None, pattern=r"^https?://\S+$", description="URL http(s)")
