"""Configuración de logging estructurado (JSON) para la aplicación."""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

# Nunca se escriben en el log
CLAVES_SENSIBLES = {"password", "password_hash", "contrasena", "token", "authorization", "secret", "jwt_secret_key"}

_CLAVES_INTERNAS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "taskName", "message",
}


def _redactar(valor: Any) -> Any:
    if isinstance(valor, dict):
        return {
            k: "[REDACTED]" if str(k).lower() in CLAVES_SENSIBLES else _redactar(v)
            for k, v in valor.items()
        }
    if isinstance(valor, (list, tuple)):
        return [_redactar(v) for v in valor]
    return valor


class JSONFormatter(logging.Formatter):
    """Formatea cada registro como una línea JSON con los campos ``extra``."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra = {k: v for k, v in record.__dict__.items() if k not in _CLAVES_INTERNAS and not k.startswith("_")}
        log_obj.update(_redactar(extra))
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_obj, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Configura el logger raíz una sola vez (idempotente)."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    if any(getattr(h, "_sistema_vacunacion", False) for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    handler._sistema_vacunacion = True  # type: ignore[attr-defined]
    root.addHandler(handler)
