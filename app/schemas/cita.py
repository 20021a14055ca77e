"""Esquemas de citas."""
from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel

from app.schemas.common import TextoOpcional

EstadoCita = Literal["Pendiente", "Confirmada", "Cancelada", "Completada"]


class CitaIn(BaseModel):
    id_nino: UUID
    id_centro: UUID
    id_campana: UUID | None = None
    fecha_cita: datetime
    estado: EstadoCita
    vacuna_programada: TextoOpcional = None
    observaciones: TextoOpcional = None
