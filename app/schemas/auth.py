"""Esquemas para autenticación y JWT."""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class LoginRequest(BaseModel):
    """Body del endpoint de login."""

    username: str = Field(description="Nombre de usuario", min_length=1, examples=["juanperez"])
    password: str = Field(description="Contraseña en texto plano", min_length=1, examples=["password123"])

    @field_validator("username", "password")
    @classmethod
    def no_vacio(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class UsuarioToken(BaseModel):
    """Datos no sensibles del usuario autenticado."""

    user_id: str = Field(description="Identificador del usuario")
    username: str = Field(description="Nombre de usuario")
    role: str = Field(description="Rol del usuario")


class LoginResponse(BaseModel):
    """Respuesta del login: token JWT y perfil básico."""

    message: str = Field(default="Login successful")
    token: str = Field(description="JWT para enviar en header Authorization: Bearer <token>")
    expires_at: datetime = Field(description="Momento (UTC) en que expira el token")
    user: UsuarioToken


class CambiarContrasenaRequest(BaseModel):
    """Body para cambiar la contraseña propia."""

    contrasena_actual: str = Field(description="Contraseña vigente", min_length=1)
    contrasena_nueva: str = Field(description="Nueva contraseña", min_length=8)
