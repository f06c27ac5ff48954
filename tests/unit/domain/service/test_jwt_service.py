"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from redditclone.config import AuthSettings
from redditclone.domain.model import User
from redditclone.domain.service import JWTService
from redditclone.domain.value import UserId
from redditclone.util.jwt import JWTError, create_token
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

SETTINGS = AuthSettings(jwt_secret="unit-secret")
USER = User(id=UserId("a" * 24), username="alice", password_hash="x")


class TestJWTService:
    """Tests for token issue and verification."""

    def test_round_trip(self):
        service = JWTService(SETTINGS)

        payload = service.verify_token(service.create_token(USER))

        assert payload.user.id == USER.id
        assert payload.user.username == "alice"
        assert payload.exp - payload.iat == 3600

    def test_claims_shape(self):
        service = JWTService(SETTINGS)

        claims = jwt.decode(
            service.create_token(USER), "unit-secret", algorithms=["HS256"]
        )

        assert claims["user"] == {"id": USER.id, "username": "alice"}
        assert {"iat", "exp"} <= set(claims)

    def test_expired(self):
        service = JWTService(SETTINGS)
        token = create_token(
            USER.id,
            USER.username,
            SETTINGS,
            now=datetime.now(timezone.utc) - timedelta(hours=2),
        )

        with pytest.raises(JWTError, match="expired"):
            service.verify_token(token)

    def test_wrong_secret(self):
        service = JWTService(SETTINGS)
        other = JWTService(AuthSettings(jwt_secret="other-secret"))

        with pytest.raises(JWTError):
            service.verify_token(other.create_token(USER))

    def test_unsigned_token_rejected(self):
        service = JWTService(SETTINGS)
        now = int(datetime.now(timezone.utc).timestamp())
        token = jwt.encode(
            {"user": {"id": USER.id, "username": "alice"}, "iat": now, "exp": now + 60},
            key=None,
            algorithm="none",
        )

        with pytest.raises(JWTError):
            service.verify_token(token)

    def test_missing_username_rejected(self):
        service = JWTService(SETTINGS)
        now = int(datetime.now(timezone.utc).timestamp())
        token = jwt.encode(
            {"user": {"id": USER.id}, "iat": now, "exp": now + 60},
            "unit-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError):
            service.verify_token(token)

    @pytest.mark.asyncio
    async def test_container_uses_configured_secret(self, unit_env):
        service = await unit_env.get(JWTService)

        claims = jwt.decode(
            service.create_token(USER), "test-secret", algorithms=["HS256"]
        )

        assert claims["user"]["username"] == "alice"
