"""Utilidades de seguridad: hash de contraseñas y emisión/verificación de JWT."""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache

import bcrypt
import jwt

from app.core.errors import ConfigurationError, token_expired, token_invalid, token_missing

logger = logging.getLogger(__name__)

# bcrypt solo considera los primeros 72 bytes
_BCRYPT_MAX_BYTES = 72

CLAIMS_REQUERIDOS = ("user_id", "username", "role")


def _a_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(plain_password: str) -> str:
    """Genera el hash bcrypt (con sal aleatoria embebida) de la contraseña en texto."""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(_a_bytes(plain_password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Comprueba si la contraseña en texto coincide con el hash.

    Un hash vacío o mal formado devuelve False en lugar de lanzar.
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(_a_bytes(plain_password), hashed_password.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=1)
def _hash_senuelo() -> str:
    return hash_password("usuario-inexistente")


def preparar_senuelo() -> None:
    """Calcula el hash señuelo por adelantado (al arrancar la aplicación)."""
    _hash_senuelo()


def consumir_verificacion() -> None:
    """Ejecuta una verificación contra un hash señuelo.

    Se usa cuando el usuario no existe para que el tiempo de respuesta
    sea comparable al de una contraseña incorrecta.
    """
    verify_password("usuario-inexistente-x", _hash_senuelo())


@dataclass(frozen=True)
class Principal:
    """Identidad autenticada extraída de un token verificado."""

    user_id: str
    username: str
    role: str

    def claims(self) -> dict[str, str]:
        return {"user_id": self.user_id, "username": self.username, "role": self.role}


@dataclass(frozen=True)
class TokenEmitido:
    token: str
    expires_at: datetime


class TokenService:
    """Emite y verifica JWT firmados con el secreto del servidor."""

    def __init__(
        self,
        secret: str | None,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
        logger: logging.Logger | None = None,
    ):
        if not secret:
            raise ConfigurationError("JWT_SECRET_KEY no está configurado")
        self._secret = secret
        self._algorithm = algorithm
        self._expira = timedelta(minutes=expire_minutes)
        self._logger = logger or logging.getLogger(__name__)

    def issue(self, principal: Principal) -> TokenEmitido:
        """Genera un JWT con user_id, username, role y expiración absoluta."""
        now = datetime.now(timezone.utc)
        expire = now + self._expira
        payload = {**principal.claims(), "iat": now, "exp": expire}
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        self._logger.debug("Token emitido", extra={"username": principal.username, "expira": expire.isoformat()})
        return TokenEmitido(token=token, expires_at=expire)

    def verify(self, token: str | None) -> Principal:
        """Valida firma y expiración; devuelve la identidad o lanza AppError."""
        if not token:
            raise token_missing()
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise token_expired() from None
        except jwt.PyJWTError:
            raise token_invalid() from None
        if not all(isinstance(payload.get(c), str) and payload.get(c) for c in CLAIMS_REQUERIDOS):
            raise token_invalid()
        return Principal(
            user_id=payload["user_id"],
            username=payload["username"],
            role=payload["role"],
        )
