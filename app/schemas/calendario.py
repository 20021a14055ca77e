"""Esquemas de calendarios nacionales de vacunación."""
from pydantic import BaseModel

from app.schemas.common import EstadoRegistro, TextoOpcional, TextoRequerido


class CalendarioIn(BaseModel):
    nombre_calendario: TextoRequerido
    pais: TextoRequerido
    descripcion: TextoOpcional = None
    estado: EstadoRegistro
