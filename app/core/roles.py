"""Roles del sistema y política de acceso por grupo de rutas."""
from enum import Enum


class Rol(str, Enum):
    """Rol asignado a un usuario al aprovisionarlo."""

    ADMINISTRADOR = "administrador"
    DIRECTOR = "director"
    DOCTOR = "doctor"
    RESPONSABLE = "responsable"
    USER = "user"


class EstadoUsuario(str, Enum):
    ACTIVO = "Activo"
    INACTIVO = "Inactivo"


GESTION = frozenset({Rol.ADMINISTRADOR, Rol.DIRECTOR})
PERSONAL_CLINICO = frozenset({Rol.ADMINISTRADOR, Rol.DIRECTOR, Rol.DOCTOR})
PERSONAL_CENTRO = frozenset({Rol.ADMINISTRADOR, Rol.DIRECTOR, Rol.DOCTOR, Rol.RESPONSABLE})

# None = basta con estar autenticado
POLITICA_ACCESO: dict[str, frozenset[Rol] | None] = {
    "paises": None,
    "vacunas": None,
    "tutores": None,
    "ninos": PERSONAL_CENTRO,
    "citas": PERSONAL_CENTRO,
    "vacunaciones": PERSONAL_CLINICO,
    "centros": GESTION,
    "lotes-vacunas": GESTION,
    "calendarios-nacionales": GESTION,
    "reportes": GESTION,
    "usuarios": frozenset({Rol.ADMINISTRADOR}),
}
