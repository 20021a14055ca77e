"""
Tests del hash de contraseñas y del servicio de tokens.
"""
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.core.errors import AppError, ConfigurationError, ErrorKind
from app.core.security import Principal, TokenService, hash_password, verify_password

pytestmark = pytest.mark.unit


class TestPasswordHasher:
    def test_hash_is_salted_and_verifies(self):
        primero = hash_password("password123")
        segundo = hash_password("password123")

        assert primero != segundo
        assert "password123" not in primero
        assert verify_password("password123", primero)
        assert verify_password("password123", segundo)

    def test_wrong_password_is_rejected(self):
        assert not verify_password("otra", hash_password("password123"))

    @pytest.mark.parametrize("malformado", ["", "no-es-un-hash", "$2b$12$corto"])
    def test_malformed_hash_returns_false(self, malformado):
        assert verify_password("password123", malformado) is False

    def test_long_unicode_password_does_not_raise(self):
        largo = "contraseña-ñandú-" * 10
        hashed = hash_password(largo)
        assert verify_password(largo, hashed)


class TestTokenService:
    def test_requires_secret(self):
        with pytest.raises(ConfigurationError):
            TokenService(None)
        with pytest.raises(ConfigurationError):
            TokenService("")

    def test_issue_then_verify_recovers_claims(self, tokens):
        principal = Principal(user_id="u-1", username="juanperez", role="doctor")

        emitido = tokens.issue(principal)

        assert tokens.verify(emitido.token) == principal

    def test_expiration_is_one_hour_window(self, tokens):
        antes = datetime.now(timezone.utc)
        emitido = tokens.issue(Principal("u-1", "juanperez", "doctor"))

        ventana = emitido.expires_at - antes
        assert timedelta(minutes=59) < ventana <= timedelta(minutes=60, seconds=1)

    def test_verify_twice_yields_same_claims(self, tokens):
        emitido = tokens.issue(Principal("u-1", "juanperez", "director"))

        assert tokens.verify(emitido.token) == tokens.verify(emitido.token)

    def test_missing_token(self, tokens):
        with pytest.raises(AppError) as exc_info:
            tokens.verify(None)
        assert exc_info.value.kind is ErrorKind.TOKEN_MISSING

    def test_expired_token(self, tokens):
        pasado = datetime.now(timezone.utc) - timedelta(minutes=5)
        token = jwt.encode(
            {"user_id": "u-1", "username": "juanperez", "role": "doctor", "exp": pasado},
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(AppError) as exc_info:
            tokens.verify(token)
        assert exc_info.value.kind is ErrorKind.TOKEN_EXPIRED
        assert exc_info.value.status_code == 401

    def test_foreign_signature_is_invalid(self, tokens):
        ajeno = TokenService("otro-secreto").issue(Principal("u-1", "juanperez", "administrador"))

        with pytest.raises(AppError) as exc_info:
            tokens.verify(ajeno.token)
        assert exc_info.value.kind is ErrorKind.TOKEN_INVALID

    def test_garbled_token_is_invalid(self, tokens):
        with pytest.raises(AppError) as exc_info:
            tokens.verify("no.es.jwt")
        assert exc_info.value.kind is ErrorKind.TOKEN_INVALID

    def test_token_without_role_claim_is_invalid(self, tokens):
        futuro = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = jwt.encode({"user_id": "u-1", "username": "x", "exp": futuro}, "test-secret", algorithm="HS256")

        with pytest.raises(AppError) as exc_info:
            tokens.verify(token)
        assert exc_info.value.kind is ErrorKind.TOKEN_INVALID

    def test_token_without_exp_is_invalid(self, tokens):
        token = jwt.encode({"user_id": "u-1", "username": "x", "role": "doctor"}, "test-secret", algorithm="HS256")

        with pytest.raises(AppError) as exc_info:
            tokens.verify(token)
        assert exc_info.value.kind is ErrorKind.TOKEN_INVALID
