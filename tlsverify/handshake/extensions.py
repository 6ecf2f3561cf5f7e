"""Generic TLS extension framing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from tlsverify.utils import ByteReader, ParseError, encode_u16, encode_vector_u16


class ExtensionType(IntEnum):
    SERVER_NAME = 0
    MAX_FRAGMENT_LENGTH = 1
    SUPPORTED_GROUPS = 10
    SIGNATURE_ALGORITHMS = 13
    USE_SRTP = 14
    HEARTBEAT = 15
    APPLICATION_LAYER_PROTOCOL_NEGOTIATION = 16
    SIGNED_CERTIFICATE_TIMESTAMP = 18
    CLIENT_CERTIFICATE_TYPE = 19
    SERVER_CERTIFICATE_TYPE = 20
    PADDING = 21
    RECORD_SIZE_LIMIT = 28
    PRE_SHARED_KEY = 41
    EARLY_DATA = 42
    SUPPORTED_VERSIONS = 43
    COOKIE = 44
    PSK_KEY_EXCHANGE_MODES = 45
    CERTIFICATE_AUTHORITIES = 47
    OID_FILTERS = 48
    POST_HANDSHAKE_AUTH = 49
    SIGNATURE_ALGORITHMS_CERT = 50
    KEY_SHARE = 51

    @classmethod
    def parse(cls, value: int) -> "ExtensionType":
        try:
            return cls(value)
        except ValueError:
            raise ParseError(f"Invalid ExtensionType value: {value}") from None


@dataclass
class Extension:
    extension_type: ExtensionType
    data: bytes = b""

    def __post_init__(self) -> None:
        self.data = bytes(self.data)

    @classmethod
    def parse(cls, reader: ByteReader) -> "Extension":
        if reader.remaining < 4:
            raise ParseError("Extension too short")
        extension_type = ExtensionType.parse(reader.read_u16())
        length = reader.read_u16()
        if length > reader.remaining:
            raise ParseError("Extension data length exceeds available data")
        return cls(extension_type, reader.read_bytes(length))

    def serialize(self) -> bytes:
        return encode_u16(self.extension_type) + encode_vector_u16(self.data)


def find_extension(
    extensions: Iterable[Extension], extension_type: ExtensionType
) -> Extension | None:
    """Return the first extension of the given type, or None."""
    return next((ext for ext in extensions if ext.extension_type == extension_type), None)