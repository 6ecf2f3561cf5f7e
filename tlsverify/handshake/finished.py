"""The Finished handshake message."""

from __future__ import annotations

from dataclasses import dataclass

from tlsverify.handshake.base import HandshakeMessage, HandshakeType
from tlsverify.utils import ByteReader


@dataclass
class Finished(HandshakeMessage):
    verify_data: bytes = b""

    message_type = HandshakeType.FINISHED

    def __post_init__(self) -> None:
        self.verify_data = bytes(self.verify_data)

    @classmethod
    def parse(cls, reader: ByteReader) -> "Finished":
        """Take every remaining byte of the message as verify data."""
        return cls(reader.read_rest())

    def serialize(self) -> bytes:
        return self.verify_data