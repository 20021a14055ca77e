"""Esquemas de eventos de vacunación."""
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from app.schemas.common import TextoOpcional


class VacunacionIn(BaseModel):
    """Body para registrar o corregir una dosis aplicada."""

    id_nino: UUID
    id_lote: UUID
    id_personal: UUID = Field(description="Personal de salud que aplica la dosis")
    id_centro: UUID | None = None
    fecha_vacunacion: datetime
    dosis_aplicada: int = Field(ge=1)
    sitio_aplicacion: TextoOpcional = None
    observaciones: TextoOpcional = None
