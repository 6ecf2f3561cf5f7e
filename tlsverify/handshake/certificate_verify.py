"""The CertificateVerify handshake message and signature schemes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from tlsverify.handshake.base import HandshakeMessage, HandshakeType
from tlsverify.utils import ByteReader, ParseError, encode_u16, encode_vector_u16


class SignatureScheme(IntEnum):
    RSA_PKCS1_SHA256 = 0x0401
    RSA_PKCS1_SHA384 = 0x0501
    RSA_PKCS1_SHA512 = 0x0601
    ECDSA_SECP256R1_SHA256 = 0x0403
    ECDSA_SECP384R1_SHA384 = 0x0503
    ECDSA_SECP521R1_SHA512 = 0x0603
    RSA_PSS_RSAE_SHA256 = 0x0804
    RSA_PSS_RSAE_SHA384 = 0x0805
    RSA_PSS_RSAE_SHA512 = 0x0806
    ED25519 = 0x0807
    ED448 = 0x0808


@dataclass
class CertificateVerify(HandshakeMessage):
    algorithm: SignatureScheme
    signature: bytes

    message_type = HandshakeType.CERTIFICATE_VERIFY

    def __post_init__(self) -> None:
        self.signature = bytes(self.signature)

    @classmethod
    def parse(cls, reader: ByteReader) -> "CertificateVerify":
        if reader.remaining < 4:
            raise ParseError("CertificateVerify message truncated")
        value = reader.read_u16()
        try:
            algorithm = SignatureScheme(value)
        except ValueError:
            raise ParseError(f"Unsupported signature algorithm: {value:#06x}") from None
        length = reader.read_u16()
        if length > reader.remaining:
            raise ParseError("Signature data truncated")
        return cls(algorithm, reader.read_bytes(length))

    def serialize(self) -> bytes:
        return encode_u16(self.algorithm) + encode_vector_u16(self.signature)