"""Tipos reutilizados por los esquemas de entrada."""
from typing import Annotated, Literal

from pydantic import StringConstraints

# Cadena obligatoria: se recortan espacios y no puede quedar vacía
TextoRequerido = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
TextoOpcional = Annotated[str, StringConstraints(strip_whitespace=True)] | None

EstadoRegistro = Literal["Activo", "Inactivo"]
