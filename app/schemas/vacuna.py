"""Esquemas de vacunas."""
from pydantic import BaseModel, Field

from app.schemas.common import TextoRequerido


class VacunaIn(BaseModel):
    nombre: TextoRequerido = Field(description="Nombre comercial de la vacuna", examples=["BCG"])
    fabricante: TextoRequerido = Field(description="Laboratorio fabricante")
    tipo: TextoRequerido = Field(description="Tipo de vacuna")
    dosis_requeridas: int = Field(description="Número de dosis del esquema", ge=1)
