import pytest

from tlsverify.handshake.base import (
    CipherSuite,
    HandshakeMessage,
    HandshakeMessageHeader,
    HandshakeType,
)
from tlsverify.utils import ByteReader, ParseError


def test_handshake_header_parsing():
    reader = ByteReader(bytes([0x01, 0x00, 0x00, 0x03, 0xAA, 0xBB, 0xCC]))
    header = HandshakeMessageHeader.parse(reader)
    assert header.msg_type == HandshakeType.CLIENT_HELLO
    assert header.length == 3
    assert reader.pos == 4


def test_handshake_header_serialization():
    header = HandshakeMessageHeader(HandshakeType.CLIENT_HELLO, 3)
    assert header.serialize() == bytes([0x01, 0x00, 0x00, 0x03])


def test_invalid_handshake_type():
    reader = ByteReader(bytes([0x30, 0x00, 0x00, 0x03, 0xAA, 0xBB, 0xCC]))
    with pytest.raises(ParseError):
        HandshakeMessageHeader.parse(reader)


def test_header_too_short():
    with pytest.raises(ParseError, match="too short"):
        HandshakeMessageHeader.parse(ByteReader(b"\x01\x00\x00"))


def test_header_roundtrip():
    header = HandshakeMessageHeader(HandshakeType.FINISHED, 0x123456)
    parsed = HandshakeMessageHeader.parse(ByteReader(header.serialize()))
    assert parsed == header


def test_cipher_suite_parse():
    assert CipherSuite.parse(0x1303) is CipherSuite.TLS_CHACHA20_POLY1305_SHA256
    with pytest.raises(ParseError, match="0x1306"):
        CipherSuite.parse(0x1306)


def test_handshake_type_values():
    assert HandshakeType.parse(254) is HandshakeType.MESSAGE_HASH
    assert HandshakeType.parse(15) is HandshakeType.CERTIFICATE_VERIFY
    with pytest.raises(ParseError):
        HandshakeType.parse(3)


def test_handshake_message_is_abstract():
    with pytest.raises(TypeError):
        HandshakeMessage()