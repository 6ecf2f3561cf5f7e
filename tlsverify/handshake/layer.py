"""Dispatch of framed handshake messages to their parsers."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from tlsverify.handshake.base import HandshakeMessage, HandshakeMessageHeader, HandshakeType
from tlsverify.handshake.certificate import Certificate
from tlsverify.handshake.certificate_verify import CertificateVerify
from tlsverify.handshake.client_hello import ClientHello
from tlsverify.handshake.encrypted_extensions import EncryptedExtensions
from tlsverify.handshake.finished import Finished
from tlsverify.handshake.server_hello import ServerHello
from tlsverify.utils import ByteReader, ParseError, UnsupportedMessageError

_PARSERS: dict[HandshakeType, Callable[[ByteReader], HandshakeMessage]] = {
    HandshakeType.CLIENT_HELLO: ClientHello.parse,
    HandshakeType.SERVER_HELLO: ServerHello.parse,
    HandshakeType.ENCRYPTED_EXTENSIONS: EncryptedExtensions.parse,
    HandshakeType.CERTIFICATE: Certificate.parse,
    HandshakeType.CERTIFICATE_VERIFY: CertificateVerify.parse,
    HandshakeType.FINISHED: Finished.parse,
}


class HandshakeLayer:
    """Parses handshake messages out of handshake record payloads."""

    def parse_handshake_message(self, data) -> tuple[HandshakeMessage, int]:
        """Parse one message; return it with the number of bytes consumed."""
        data = bytes(data)
        if len(data) < 4:
            raise ParseError("Handshake message too short")
        reader = ByteReader(data)
        header = HandshakeMessageHeader.parse(reader)
        if header.length > reader.remaining:
            raise ParseError("Handshake message length exceeds available data")
        body = reader.read_bytes(header.length)

        parser = _PARSERS.get(header.msg_type)
        if parser is None:
            raise UnsupportedMessageError(
                f"Parsing handshake message type {header.msg_type.name} not yet implemented"
            )
        return parser(ByteReader(body)), reader.pos

    def iter_messages(self, data) -> Iterator[HandshakeMessage]:
        """Yield every handshake message contained in ``data``."""
        data = bytes(data)
        pos = 0
        while pos < len(data):
            message, consumed = self.parse_handshake_message(data[pos:])
            pos += consumed
            yield message