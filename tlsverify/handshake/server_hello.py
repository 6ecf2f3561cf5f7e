"""The ServerHello handshake message."""

from __future__ import annotations

from dataclasses import dataclass, field

from tlsverify.handshake.base import CipherSuite, HandshakeMessage, HandshakeType
from tlsverify.handshake.extensions import Extension, ExtensionType, find_extension
from tlsverify.utils import (
    ByteReader,
    ParseError,
    encode_u8,
    encode_u16,
    encode_vector_u8,
    encode_vector_u16,
)

HELLO_RETRY_REQUEST_RANDOM = bytes([
    0xCF, 0x21, 0xAD, 0x74, 0xE5, 0x9A, 0x61, 0x11,
    0xBE, 0x1D, 0x8C, 0x02, 0x1E, 0x65, 0xB8, 0x91,
    0xC2, 0xA2, 0x11, 0x16, 0x7A, 0xBB, 0x8C, 0x5E,
    0x07, 0x9E, 0x09, 0xE2, 0xC8, 0xA8, 0x33, 0x9C,
])


@dataclass
class ServerHello(HandshakeMessage):
    legacy_version: int
    random: bytes
    legacy_session_id_echo: bytes
    cipher_suite: CipherSuite
    legacy_compression_method: int = 0
    extensions: list[Extension] = field(default_factory=list)

    message_type = HandshakeType.SERVER_HELLO

    def __post_init__(self) -> None:
        self.random = bytes(self.random)
        if len(self.random) != 32:
            raise ValueError("ServerHello random must be 32 bytes")
        self.legacy_session_id_echo = bytes(self.legacy_session_id_echo)
        self.extensions = list(self.extensions)

    @classmethod
    def parse(cls, reader: ByteReader) -> "ServerHello":
        legacy_version = reader.read_u16()
        if reader.remaining < 32:
            raise ParseError("ServerHello random field truncated")
        random = reader.read_bytes(32)
        session_id = reader.read_vector_u8()

        if reader.remaining < 2:
            raise ParseError("ServerHello cipher suite field truncated")
        cipher_suite = CipherSuite.parse(reader.read_u16())

        if reader.at_end:
            raise ParseError("ServerHello compression method field truncated")
        compression_method = reader.read_u8()

        extensions: list[Extension] = []
        if not reader.at_end:
            length = reader.read_u16()
            if length > reader.remaining:
                raise ParseError("Extensions length exceeds available data")
            end = reader.pos + length
            while reader.pos < end:
                extensions.append(Extension.parse(reader))

        return cls(
            legacy_version,
            random,
            session_id,
            cipher_suite,
            compression_method,
            extensions,
        )

    def is_hello_retry_request(self) -> bool:
        return self.random == HELLO_RETRY_REQUEST_RANDOM

    def get_extension(self, extension_type: ExtensionType) -> Extension | None:
        return find_extension(self.extensions, extension_type)

    def serialize(self) -> bytes:
        parts = [
            encode_u16(self.legacy_version),
            self.random,
            encode_vector_u8(self.legacy_session_id_echo),
            encode_u16(self.cipher_suite),
            encode_u8(self.legacy_compression_method),
        ]
        if self.extensions:
            parts.append(
                encode_vector_u16(b"".join(ext.serialize() for ext in self.extensions))
            )
        return b"".join(parts)