import pytest

from tlsverify.handshake.base import HandshakeType
from tlsverify.handshake.certificate_verify import CertificateVerify, SignatureScheme
from tlsverify.utils import ByteReader, ParseError

SIGNATURE = bytes(range(1, 17))


def test_certificate_verify_parsing():
    data = bytes([0x08, 0x04, 0x00, 0x10]) + SIGNATURE
    reader = ByteReader(data)
    cert_verify = CertificateVerify.parse(reader)
    assert cert_verify.algorithm == SignatureScheme.RSA_PSS_RSAE_SHA256
    assert len(cert_verify.signature) == 16
    assert cert_verify.signature[0] == 0x01
    assert cert_verify.signature[15] == 0x10
    assert reader.pos == len(data)


def test_certificate_verify_serialization():
    cert_verify = CertificateVerify(SignatureScheme.RSA_PSS_RSAE_SHA256, SIGNATURE)
    serialized = cert_verify.serialize()
    assert len(serialized) == 4 + len(SIGNATURE)
    assert serialized[:4] == bytes([0x08, 0x04, 0x00, 0x10])
    assert serialized[4:] == SIGNATURE


def test_invalid_signature_algorithm():
    data = bytes([0xFF, 0xFF, 0x00, 0x10]) + SIGNATURE
    with pytest.raises(ParseError, match="Unsupported signature algorithm"):
        CertificateVerify.parse(ByteReader(data))


@pytest.mark.parametrize("scheme", list(SignatureScheme))
def test_roundtrip_every_scheme(scheme):
    original = CertificateVerify(scheme, b"sig")
    assert CertificateVerify.parse(ByteReader(original.serialize())) == original


def test_truncated_header():
    with pytest.raises(ParseError, match="truncated"):
        CertificateVerify.parse(ByteReader(b"\x08\x04\x00"))


def test_truncated_signature():
    with pytest.raises(ParseError, match="Signature data truncated"):
        CertificateVerify.parse(ByteReader(b"\x08\x04\x00\x10\x01"))


def test_message_type():
    msg = CertificateVerify(SignatureScheme.ED25519, b"")
    assert msg.message_type == HandshakeType.CERTIFICATE_VERIFY