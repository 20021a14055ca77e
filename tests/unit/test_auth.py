"""
Tests de extracción del bearer token, auditoría y control de rol.
"""
from unittest.mock import MagicMock

import pytest

from app.core.auth import Autenticador, autorizar, extraer_bearer
from app.core.errors import AppError, ErrorKind
from app.core.roles import GESTION, Rol
from app.core.security import Principal

pytestmark = pytest.mark.unit


class TestExtraerBearer:
    def test_returns_token(self):
        assert extraer_bearer("Bearer abc.def.ghi") == "abc.def.ghi"

    @pytest.mark.parametrize("header", [None, "", "   ", "Bearer ", "Bearer    "])
    def test_missing(self, header):
        with pytest.raises(AppError) as exc_info:
            extraer_bearer(header)
        assert exc_info.value.kind is ErrorKind.TOKEN_MISSING

    @pytest.mark.parametrize("header", ["bearer abc", "Basic dXNlcjpwYXNz", "Token abc", "abc"])
    def test_other_schemes_are_invalid(self, header):
        with pytest.raises(AppError) as exc_info:
            extraer_bearer(header)
        assert exc_info.value.kind is ErrorKind.TOKEN_INVALID


class TestAutenticador:
    def test_success_logs_identity_and_ip(self, tokens):
        audit = MagicMock()
        autenticador = Autenticador(tokens, logger=audit)
        token = tokens.issue(Principal("u-1", "juanperez", "doctor")).token

        principal = autenticador.autenticar(f"Bearer {token}", ip="10.0.0.1")

        assert principal.username == "juanperez"
        audit.info.assert_called_once()
        extra = audit.info.call_args.kwargs["extra"]
        assert extra["username"] == "juanperez"
        assert extra["ip"] == "10.0.0.1"

    def test_failure_logs_reason_and_reraises(self, tokens):
        audit = MagicMock()
        autenticador = Autenticador(tokens, logger=audit)

        with pytest.raises(AppError) as exc_info:
            autenticador.autenticar("Bearer basura", ip="10.0.0.2")

        assert exc_info.value.kind is ErrorKind.TOKEN_INVALID
        audit.warning.assert_called_once()
        extra = audit.warning.call_args.kwargs["extra"]
        assert extra == {"motivo": "TokenInvalid", "ip": "10.0.0.2"}
        audit.info.assert_not_called()


class TestAutorizar:
    def test_role_in_allow_list(self):
        principal = Principal("u-1", "ana", "director")
        assert autorizar(principal, GESTION) is principal

    def test_role_outside_allow_list(self):
        with pytest.raises(AppError) as exc_info:
            autorizar(Principal("u-1", "ana", "doctor"), GESTION)
        assert exc_info.value.kind is ErrorKind.INSUFFICIENT_PERMISSIONS
        assert exc_info.value.status_code == 403

    def test_no_restriction_only_requires_identity(self):
        principal = Principal("u-1", "ana", "user")
        assert autorizar(principal, None) is principal

    def test_plain_strings_are_accepted(self):
        principal = Principal("u-1", "ana", "doctor")
        assert autorizar(principal, ["doctor"]) is principal
        assert autorizar(principal, {Rol.DOCTOR}) is principal

    def test_missing_identity_is_internal_error(self):
        with pytest.raises(AppError) as exc_info:
            autorizar(None, GESTION)
        assert exc_info.value.kind is ErrorKind.INTERNAL_ERROR
        assert exc_info.value.status_code == 500

    def test_missing_identity_is_not_allowed_even_without_restriction(self):
        with pytest.raises(AppError):
            autorizar(None, None)
