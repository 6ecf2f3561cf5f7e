"""Handshake message types, cipher suites and the message header."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from tlsverify.utils import ByteReader, ParseError, encode_u8, encode_u24


class HandshakeType(IntEnum):
    CLIENT_HELLO = 1
    SERVER_HELLO = 2
    NEW_SESSION_TICKET = 4
    END_OF_EARLY_DATA = 5
    ENCRYPTED_EXTENSIONS = 8
    CERTIFICATE = 11
    CERTIFICATE_REQUEST = 13
    CERTIFICATE_VERIFY = 15
    FINISHED = 20
    KEY_UPDATE = 24
    MESSAGE_HASH = 254

    @classmethod
    def parse(cls, value: int) -> "HandshakeType":
        try:
            return cls(value)
        except ValueError:
            raise ParseError(f"Invalid HandshakeType value: {value}") from None


class CipherSuite(IntEnum):
    TLS_AES_128_GCM_SHA256 = 0x1301
    TLS_AES_256_GCM_SHA384 = 0x1302
    TLS_CHACHA20_POLY1305_SHA256 = 0x1303
    TLS_AES_128_CCM_SHA256 = 0x1304
    TLS_AES_128_CCM_8_SHA256 = 0x1305

    @classmethod
    def parse(cls, value: int) -> "CipherSuite":
        try:
            return cls(value)
        except ValueError:
            raise ParseError(f"Invalid CipherSuite value: {value:#06x}") from None


class HandshakeMessage(ABC):
    """A handshake message body that knows its type and wire form."""

    message_type: ClassVar[HandshakeType]

    @abstractmethod
    def serialize(self) -> bytes:
        """Return the encoded message body, without the handshake header."""


@dataclass
class HandshakeMessageHeader:
    msg_type: HandshakeType
    length: int

    @classmethod
    def parse(cls, reader: ByteReader) -> "HandshakeMessageHeader":
        if reader.remaining < 4:
            raise ParseError("Handshake message header too short")
        msg_type = HandshakeType.parse(reader.read_u8())
        length = reader.read_u24()
        return cls(msg_type, length)

    def serialize(self) -> bytes:
        return encode_u8(self.msg_type) + encode_u24(self.length)