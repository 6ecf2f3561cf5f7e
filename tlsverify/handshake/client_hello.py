"""The ClientHello handshake message."""

from __future__ import annotations

from dataclasses import dataclass, field

from tlsverify.handshake.base import CipherSuite, HandshakeMessage, HandshakeType
from tlsverify.handshake.extensions import Extension, ExtensionType, find_extension
from tlsverify.utils import (
    ByteReader,
    ParseError,
    encode_u16,
    encode_vector_u8,
    encode_vector_u16,
)


def _parse_extensions(reader: ByteReader) -> list[Extension]:
    extensions: list[Extension] = []
    if reader.at_end:
        return extensions
    length = reader.read_u16()
    if length > reader.remaining:
        raise ParseError("Extensions length exceeds available data")
    end = reader.pos + length
    while reader.pos < end:
        extensions.append(Extension.parse(reader))
    return extensions


@dataclass
class ClientHello(HandshakeMessage):
    legacy_version: int
    random: bytes
    legacy_session_id: bytes = b""
    cipher_suites: list[CipherSuite] = field(default_factory=list)
    legacy_compression_methods: bytes = b"\x00"
    extensions: list[Extension] = field(default_factory=list)

    message_type = HandshakeType.CLIENT_HELLO

    def __post_init__(self) -> None:
        self.random = bytes(self.random)
        if len(self.random) != 32:
            raise ValueError("ClientHello random must be 32 bytes")
        self.legacy_session_id = bytes(self.legacy_session_id)
        self.legacy_compression_methods = bytes(self.legacy_compression_methods)
        self.cipher_suites = list(self.cipher_suites)
        self.extensions = list(self.extensions)

    @classmethod
    def parse(cls, reader: ByteReader) -> "ClientHello":
        legacy_version = reader.read_u16()
        if reader.remaining < 32:
            raise ParseError("ClientHello random field truncated")
        random = reader.read_bytes(32)
        session_id = reader.read_vector_u8()

        suites_bytes = reader.read_vector_u16()
        if len(suites_bytes) % 2:
            raise ParseError("Cipher suites length must be even")
        suites_reader = ByteReader(suites_bytes)
        cipher_suites = []
        while not suites_reader.at_end:
            cipher_suites.append(CipherSuite.parse(suites_reader.read_u16()))

        compression_methods = reader.read_vector_u8()
        extensions = _parse_extensions(reader)
        return cls(
            legacy_version,
            random,
            session_id,
            cipher_suites,
            compression_methods,
            extensions,
        )

    def get_extension(self, extension_type: ExtensionType) -> Extension | None:
        return find_extension(self.extensions, extension_type)

    def serialize(self) -> bytes:
        suites = b"".join(encode_u16(suite) for suite in self.cipher_suites)
        parts = [
            encode_u16(self.legacy_version),
            self.random,
            encode_vector_u8(self.legacy_session_id),
            encode_vector_u16(suites),
            encode_vector_u8(self.legacy_compression_methods),
        ]
        if self.extensions:
            parts.append(
                encode_vector_u16(b"".join(ext.serialize() for ext in self.extensions))
            )
        return b"".join(parts)