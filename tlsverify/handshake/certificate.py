"""The Certificate handshake message."""

from __future__ import annotations

from dataclasses import dataclass, field

from tlsverify.handshake.base import HandshakeMessage, HandshakeType
from tlsverify.handshake.extensions import Extension
from tlsverify.utils import (
    ByteReader,
    ParseError,
    encode_vector_u8,
    encode_vector_u16,
    encode_vector_u24,
)


@dataclass
class CertificateEntry:
    """One certificate in the chain together with its per-entry extensions."""

    cert_data: bytes
    extensions: list[Extension] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.cert_data = bytes(self.cert_data)
        self.extensions = list(self.extensions)

    @classmethod
    def parse(cls, reader: ByteReader) -> "CertificateEntry":
        cert_length = reader.read_u24()
        if cert_length > reader.remaining:
            raise ParseError("Certificate entry truncated")
        cert_data = reader.read_bytes(cert_length)

        extensions_length = reader.read_u16()
        if extensions_length > reader.remaining:
            raise ParseError("Certificate extensions truncated")
        end = reader.pos + extensions_length
        extensions = []
        while reader.pos < end:
            extensions.append(Extension.parse(reader))
        return cls(cert_data, extensions)

    def serialize(self) -> bytes:
        extensions = b"".join(ext.serialize() for ext in self.extensions)
        return encode_vector_u24(self.cert_data) + encode_vector_u16(extensions)


@dataclass
class Certificate(HandshakeMessage):
    """A certificate chain as carried in the handshake."""

    cert_request_context: bytes = b""
    certificate_list: list[CertificateEntry] = field(default_factory=list)

    message_type = HandshakeType.CERTIFICATE

    def __post_init__(self) -> None:
        self.cert_request_context = bytes(self.cert_request_context)
        self.certificate_list = list(self.certificate_list)

    @classmethod
    def parse(cls, reader: ByteReader) -> "Certificate":
        context_length = reader.read_u8()
        if context_length > reader.remaining:
            raise ParseError("Certificate request context truncated")
        context = reader.read_bytes(context_length)

        certs_length = reader.read_u24()
        if certs_length > reader.remaining:
            raise ParseError("Certificate list truncated")
        end = reader.pos + certs_length
        entries = []
        while reader.pos < end:
            entries.append(CertificateEntry.parse(reader))
        return cls(context, entries)

    def serialize(self) -> bytes:
        certs = b"".join(entry.serialize() for entry in self.certificate_list)
        return encode_vector_u8(self.cert_request_context) + encode_vector_u24(certs)