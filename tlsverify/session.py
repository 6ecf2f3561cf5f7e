"""Session key storage and per-connection session management."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import timedelta

from tlsverify.handshake.base import CipherSuite
from tlsverify.state.core import ConnectionRole, ConnectionState, HandshakeState

DEFAULT_SESSION_TIMEOUT = timedelta(hours=1)


@dataclass
class SessionKeys:
    """Traffic secrets for a negotiated session."""

    cipher_suite: CipherSuite
    client_traffic_secret: bytearray
    server_traffic_secret: bytearray
    created_at: float = field(default_factory=time.time)

    def __post_init__(self) -> None:
        self.client_traffic_secret = bytearray(self.client_traffic_secret)
        self.server_traffic_secret = bytearray(self.server_traffic_secret)

    def is_expired(self, ttl) -> bool:
        """True once more than ``ttl`` has passed, or if the clock went backwards."""
        limit = ttl.total_seconds() if isinstance(ttl, timedelta) else float(ttl)
        elapsed = time.time() - self.created_at
        if elapsed < 0:
            return True
        return elapsed > limit

    def wipe(self) -> None:
        """Overwrite both traffic secrets with zeros in place."""
        for secret in (self.client_traffic_secret, self.server_traffic_secret):
            secret[:] = bytes(len(secret))


class SessionManager:
    """Holds the handshake state and keys of one connection."""

    def __init__(self, state: HandshakeState):
        self.current_state = state
        self.session_keys: SessionKeys | None = None
        self.session_id: bytes | None = None
        self.session_timeout: timedelta = DEFAULT_SESSION_TIMEOUT

    @classmethod
    def new_server(cls) -> "SessionManager":
        return cls(HandshakeState.new_server())

    @property
    def handshake_state(self) -> ConnectionState:
        return self.current_state.state

    @property
    def role(self) -> ConnectionRole:
        return self.current_state.role

    def is_handshake_complete(self) -> bool:
        return self.current_state.is_handshake_complete()

    def set_session_keys(self, cipher_suite, client_traffic_secret, server_traffic_secret) -> None:
        if self.session_keys is not None:
            self.session_keys.wipe()
        self.session_keys = SessionKeys(
            cipher_suite, client_traffic_secret, server_traffic_secret
        )

    def clear_session(self) -> None:
        """Drop the session keys after wiping their secrets."""
        if self.session_keys is not None:
            self.session_keys.wipe()
        self.session_keys = None