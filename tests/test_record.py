import pytest

from tlsverify.record import RecordLayer, TlsRecord
from tlsverify.tls.types import ContentType
from tlsverify.utils import ParseError, ProtocolError

RECORD_DATA = bytes([22, 0x03, 0x03, 0x00, 0x05, 0x01, 0x02, 0x03, 0x04, 0x05])


def test_record_parsing():
    record, pos = RecordLayer().parse_record(RECORD_DATA)
    assert record.record_type == ContentType.HANDSHAKE
    assert record.content_type == ContentType.HANDSHAKE
    assert record.legacy_version == 0x0303
    assert record.fragment == RECORD_DATA[5:10]
    assert pos == 10


def test_record_serialization():
    record = TlsRecord(ContentType.HANDSHAKE, 0x0303, bytes([1, 2, 3, 4, 5]))
    assert RecordLayer().serialize_record(record) == RECORD_DATA


def test_record_too_large():
    layer = RecordLayer()
    layer.set_max_fragment_length(10)
    record = TlsRecord(ContentType.HANDSHAKE, 0x0303, bytes(11))
    with pytest.raises(ProtocolError):
        layer.serialize_record(record)


def test_invalid_content_type():
    data = bytes([25, 0x03, 0x03, 0x00, 0x05, 0x01, 0x02, 0x03, 0x04, 0x05])
    with pytest.raises(ParseError):
        RecordLayer().parse_record(data)


def test_process_multiple_records():
    data = RECORD_DATA + bytes([21, 0x03, 0x03, 0x00, 0x02, 0x01, 0x02])
    records = RecordLayer().process_records(data)
    assert len(records) == 2
    assert records[0].record_type == ContentType.HANDSHAKE
    assert len(records[0].fragment) == 5
    assert records[1].record_type == ContentType.ALERT
    assert len(records[1].fragment) == 2


def test_process_ignores_trailing_partial_header():
    records = RecordLayer().process_records(RECORD_DATA + b"\x16\x03")
    assert len(records) == 1


def test_process_short_first_record_raises():
    with pytest.raises(ParseError, match="Record too short"):
        RecordLayer().process_records(b"\x16\x03\x03")


def test_fragment_exceeds_available_data():
    with pytest.raises(ParseError, match="exceeds available data"):
        RecordLayer().parse_record(RECORD_DATA[:8])


def test_parse_fragment_over_limit():
    layer = RecordLayer()
    layer.set_max_fragment_length(4)
    with pytest.raises(ProtocolError):
        layer.parse_record(RECORD_DATA)


def test_set_max_fragment_length_over_tls_limit():
    with pytest.raises(ProtocolError):
        RecordLayer().set_max_fragment_length(16385)


def test_roundtrip():
    layer = RecordLayer()
    record = TlsRecord(ContentType.APPLICATION_DATA, 0x0303, b"payload")
    parsed, consumed = layer.parse_record(layer.serialize_record(record))
    assert parsed == record
    assert consumed == 5 + len(b"payload")