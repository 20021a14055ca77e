"""Esquemas de lotes de vacunas."""
from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from app.schemas.common import TextoOpcional, TextoRequerido


class LoteIn(BaseModel):
    """Body para crear o actualizar un lote de vacunas."""

    id_vacuna: UUID
    numero_lote: TextoRequerido
    cantidad_total: int = Field(ge=1)
    cantidad_disponible: int = Field(ge=0)
    fecha_fabricacion: date
    fecha_vencimiento: date
    id_centro: UUID
    condiciones_almacenamiento: TextoOpcional = None

    @model_validator(mode="after")
    def coherencia(self) -> "LoteIn":
        if self.cantidad_disponible > self.cantidad_total:
            raise ValueError("cantidad_disponible no puede superar cantidad_total")
        if self.fecha_vencimiento <= self.fecha_fabricacion:
            raise ValueError("fecha_vencimiento debe ser posterior a fecha_fabricacion")
        return self
