"""Server-side handshake state handling."""

from __future__ import annotations

from tlsverify.handshake.base import CipherSuite, HandshakeMessage, HandshakeType
from tlsverify.state.core import ConnectionState, StateHandler
from tlsverify.utils import ProtocolError


class ServerState(StateHandler):
    """Handshake progress as seen by a server."""

    def __init__(self):
        self.state = ConnectionState.INITIAL
        self.selected_cipher_suite: CipherSuite | None = None
        self.server_name = None

    def process_message(self, message: HandshakeMessage) -> None:
        msg_type = message.message_type
        if self.state is ConnectionState.INITIAL and msg_type is HandshakeType.CLIENT_HELLO:
            self.state = ConnectionState.NEGOTIATING
        elif self.state is ConnectionState.HANDSHAKING and msg_type is HandshakeType.FINISHED:
            self.state = ConnectionState.CONNECTED
        else:
            raise ProtocolError(
                f"Unexpected message {msg_type.name} in state {self.state.name}"
            )

    def is_handshake_complete(self) -> bool:
        return self.state is ConnectionState.CONNECTED