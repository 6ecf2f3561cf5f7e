"""Connection roles, states and the handshake state machine wrapper."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto

from tlsverify.handshake.base import CipherSuite, HandshakeMessage


class ConnectionRole(Enum):
    CLIENT = auto()
    SERVER = auto()


class ConnectionState(Enum):
    INITIAL = auto()
    NEGOTIATING = auto()
    HANDSHAKING = auto()
    CONNECTED = auto()
    CLOSING = auto()
    CLOSED = auto()
    FAILED = auto()


class StateHandler(ABC):
    """Role-specific handshake logic driving a ConnectionState."""

    state: ConnectionState = ConnectionState.INITIAL
    selected_cipher_suite: CipherSuite | None = None
    server_name: str | None = None

    @abstractmethod
    def process_message(self, message: HandshakeMessage) -> None:
        """Advance the state with one handshake message or raise."""

    def is_handshake_complete(self) -> bool:
        return self.state is ConnectionState.CONNECTED


class HandshakeState:
    """Tracks the role and state of one side of a handshake."""

    def __init__(self, role: ConnectionRole, handler: StateHandler):
        self.role = role
        self.handler = handler
        self.state = ConnectionState.INITIAL

    @classmethod
    def new_server(cls) -> "HandshakeState":
        from tlsverify.state.server import ServerState

        return cls(ConnectionRole.SERVER, ServerState())

    def process_message(self, message: HandshakeMessage) -> None:
        """Hand the message to the handler; the state follows only on success."""
        self.handler.process_message(message)
        self.state = self.handler.state

    def is_handshake_complete(self) -> bool:
        return self.handler.is_handshake_complete()

    @property
    def selected_cipher_suite(self) -> CipherSuite | None:
        return self.handler.selected_cipher_suite

    @property
    def server_name(self) -> str | None:
        return self.handler.server_name