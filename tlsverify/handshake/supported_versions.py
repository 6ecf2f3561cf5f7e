"""The supported_versions extension."""

from __future__ import annotations

from dataclasses import dataclass, field

from tlsverify.handshake.extensions import Extension, ExtensionType
from tlsverify.tls import constants
from tlsverify.utils import ByteReader, ParseError, encode_u16, encode_vector_u8


@dataclass
class SupportedVersions:
    versions: list[int] = field(default_factory=list)

    def create_extension(self) -> Extension:
        """Build the ClientHello form: a one-byte length and a version list."""
        body = b"".join(encode_u16(version) for version in self.versions)
        return Extension(ExtensionType.SUPPORTED_VERSIONS, encode_vector_u8(body))

    @staticmethod
    def create_server_extension(selected_version: int) -> Extension:
        """Build the ServerHello form carrying a single selected version."""
        return Extension(ExtensionType.SUPPORTED_VERSIONS, encode_u16(selected_version))

    @classmethod
    def parse_client(cls, reader: ByteReader) -> "SupportedVersions":
        if reader.at_end:
            raise ParseError("SupportedVersions extension truncated")
        length = reader.read_u8()
        if length % 2:
            raise ParseError("SupportedVersions list length must be even")
        if length > reader.remaining:
            raise ParseError("SupportedVersions extension truncated")
        return cls([reader.read_u16() for _ in range(length // 2)])

    @staticmethod
    def parse_server(reader: ByteReader) -> int:
        if reader.remaining < 2:
            raise ParseError("ServerHello SupportedVersions extension truncated")
        return reader.read_u16()

    def supports_tls13(self) -> bool:
        return constants.TLS13 in self.versions