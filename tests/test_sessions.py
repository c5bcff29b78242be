"""Tests for session context and signed session tokens."""

import pytest
from itsdangerous import TimestampSigner, URLSafeTimedSerializer

from nexus.errors import ConfigurationError
from nexus.session import Authenticatable, SessionConfig, SessionContext, SessionSigner


class TestSessionContext:
    def test_starts_anonymous(self) -> None:
        assert SessionContext().is_authenticated is False

    def test_mark_authenticated(self) -> None:
        session = SessionContext()
        session.mark_authenticated()
        assert session.is_authenticated is True

    def test_idempotent(self) -> None:
        session = SessionContext()
        session.mark_authenticated()
        session.mark_authenticated()
        assert session.is_authenticated is True

    def test_satisfies_protocol(self) -> None:
        assert isinstance(SessionContext(), Authenticatable)


class TestSessionConfig:
    def test_default_config(self) -> None:
        config = SessionConfig(secret_key="secret")
        assert config.max_age == 86400
        assert config.salt == "nexus-session"

    def test_empty_secret_key_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="secret_key must not be empty"):
            SessionSigner(SessionConfig(secret_key=""))


class TestSessionSigner:
    def test_authenticated_round_trip(self) -> None:
        signer = SessionSigner(SessionConfig(secret_key="test-secret"))
        session = SessionContext()
        session.mark_authenticated()

        loaded = signer.loads(signer.dumps(session))

        assert loaded.is_authenticated is True
        assert loaded.created_at == pytest.approx(session.created_at)

    def test_anonymous_stays_anonymous(self) -> None:
        signer = SessionSigner(SessionConfig(secret_key="test-secret"))
        loaded = signer.loads(signer.dumps(SessionContext()))
        assert loaded.is_authenticated is False

    @pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c"])
    def test_malformed_token(self, token: str | None) -> None:
        signer = SessionSigner(SessionConfig(secret_key="test-secret"))
        assert signer.loads(token).is_authenticated is False

    def test_tampered_token_is_ignored(self) -> None:
        signer = SessionSigner(SessionConfig(secret_key="test-secret"))
        session = SessionContext()
        session.mark_authenticated()
        payload, _, rest = signer.dumps(session).partition(".")
        tampered = f"{payload[::-1]}.{rest}"
        assert signer.loads(tampered).is_authenticated is False

    def test_other_key_is_ignored(self) -> None:
        session = SessionContext()
        session.mark_authenticated()
        token = SessionSigner(SessionConfig(secret_key="key-one")).dumps(session)
        other = SessionSigner(SessionConfig(secret_key="key-two"))
        assert other.loads(token).is_authenticated is False

    def test_expired_token_is_ignored(self) -> None:
        signer = SessionSigner(SessionConfig(secret_key="test-secret", max_age=1))
        serializer = URLSafeTimedSerializer("test-secret", salt="nexus-session")

        class _PastSigner(TimestampSigner):
            def get_timestamp(self) -> int:
                return super().get_timestamp() - 3600

        old = URLSafeTimedSerializer(
            "test-secret", salt="nexus-session", signer=_PastSigner
        ).dumps({"authenticated": True})
        assert serializer.loads(old) == {"authenticated": True}
        assert signer.loads(old).is_authenticated is False

    def test_non_dict_payload(self) -> None:
        serializer = URLSafeTimedSerializer("test-secret", salt="nexus-session")
        signer = SessionSigner(SessionConfig(secret_key="test-secret"))
        assert signer.loads(serializer.dumps(["authenticated"])).is_authenticated is False

    def test_truthy_non_bool_flag_rejected(self) -> None:
        serializer = URLSafeTimedSerializer("test-secret", salt="nexus-session")
        signer = SessionSigner(SessionConfig(secret_key="test-secret"))
        assert signer.loads(serializer.dumps({"authenticated": "yes"})).is_authenticated is False
