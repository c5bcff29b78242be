"""Session context — the authenticated flag and its signed token form.

The entry forms receive a session explicitly and only ever call
``mark_authenticated()`` on it. The shell reads ``is_authenticated``
to decide whether protected screens may be shown.

Between shell invocations the session travels as a signed token
(the same thing a browser keeps in its session cookie). Tokens are
JSON payloads signed with ``itsdangerous``; nothing is stored server-side.
"""

import logging
from dataclasses import dataclass
from time import time
from typing import Any, Protocol, runtime_checkable

from itsdangerous import BadData, URLSafeTimedSerializer

from nexus.errors import ConfigurationError

logger = logging.getLogger("nexus.session")


@runtime_checkable
class Authenticatable(Protocol):
    """What an entry form needs from a session: one capability."""

    def mark_authenticated(self) -> None: ...


class SessionContext:
    """One browsing session's state.

    Usage::

        session = SessionContext()
        form = SignInForm(session, navigator)
        ...
        if session.is_authenticated:
            show_directory()
    """

    __slots__ = ("_authenticated", "created_at")

    def __init__(self, *, authenticated: bool = False, created_at: float | None = None) -> None:
        self._authenticated = authenticated
        self.created_at = time() if created_at is None else created_at

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    def mark_authenticated(self) -> None:
        """Flag the session as signed in. Idempotent."""
        self._authenticated = True

    def to_dict(self) -> dict[str, Any]:
        return {"authenticated": self._authenticated, "__created_at": self.created_at}

    def __repr__(self) -> str:
        return f"SessionContext(authenticated={self._authenticated})"


# -- Configuration --


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Session token configuration.

    ``secret_key`` is required — tokens are signed, not encrypted.
    """

    secret_key: str
    max_age: int = 86400  # 24 hours
    salt: str = "nexus-session"


# -- Signer --


class SessionSigner:
    """Signed session tokens.

    Serializes a ``SessionContext`` to a URL-safe, timestamped, signed
    string, and verifies it on the way back. Anything that fails to
    verify loads as a fresh, unauthenticated session.

    Usage::

        signer = SessionSigner(SessionConfig(secret_key="my-secret-key"))
        token = signer.dumps(session)
        ...
        session = signer.loads(token)
    """

    __slots__ = ("_config", "_serializer")

    def __init__(self, config: SessionConfig) -> None:
        if not config.secret_key:
            msg = "SessionConfig.secret_key must not be empty."
            raise ConfigurationError(msg)

        self._config = config
        self._serializer = URLSafeTimedSerializer(config.secret_key, salt=config.salt)

    def dumps(self, session: SessionContext) -> str:
        """Serialize and sign *session*."""
        return self._serializer.dumps(session.to_dict())

    def loads(self, token: str | None) -> SessionContext:
        """Verify and deserialize *token*."""
        if not token:
            return SessionContext()

        try:
            data = self._serializer.loads(token, max_age=self._config.max_age)
        except BadData:
            logger.debug("Rejected session token that failed verification")
            return SessionContext()

        if not isinstance(data, dict):
            return SessionContext()

        try:
            created_at = float(data.get("__created_at", time()))
        except (TypeError, ValueError):
            return SessionContext()

        return SessionContext(
            authenticated=data.get("authenticated") is True,
            created_at=created_at,
        )
