"""The TLS record layer: framing of records on the wire."""

from __future__ import annotations

from dataclasses import dataclass

from tlsverify.tls.types import ContentType
from tlsverify.utils import ByteReader, ParseError, ProtocolError, encode_u8, encode_u16

_RECORD_HEADER_SIZE = 5
_TLS_MAX_FRAGMENT_LENGTH = 16384


@dataclass
class TlsRecord:
    content_type: ContentType
    legacy_version: int
    fragment: bytes

    def __post_init__(self) -> None:
        self.fragment = bytes(self.fragment)

    @property
    def record_type(self) -> ContentType:
        return self.content_type


class RecordLayer:
    """Parses and serializes plaintext TLS records."""

    def __init__(self):
        self.max_fragment_length = _TLS_MAX_FRAGMENT_LENGTH

    def _check_length(self, length: int) -> None:
        if length > self.max_fragment_length:
            raise ProtocolError(
                f"Record fragment length {length} exceeds maximum allowed "
                f"{self.max_fragment_length}"
            )

    def parse_record(self, data) -> tuple[TlsRecord, int]:
        """Parse one record; return it with the number of bytes consumed."""
        reader = ByteReader(data)
        if len(reader) < _RECORD_HEADER_SIZE:
            raise ParseError("Record too short")
        content_type = ContentType.parse(reader.read_u8())
        legacy_version = reader.read_u16()
        length = reader.read_u16()
        if length > reader.remaining:
            raise ParseError("Record fragment length exceeds available data")
        self._check_length(length)
        fragment = reader.read_bytes(length)
        return TlsRecord(content_type, legacy_version, fragment), reader.pos

    def process_records(self, data) -> list[TlsRecord]:
        """Parse all complete records; a short trailing fragment is ignored."""
        data = bytes(data)
        records = []
        pos = 0
        while pos < len(data):
            if pos > 0 and len(data) - pos < _RECORD_HEADER_SIZE:
                break
            record, consumed = self.parse_record(data[pos:])
            records.append(record)
            pos += consumed
        return records

    def serialize_record(self, record: TlsRecord) -> bytes:
        self._check_length(len(record.fragment))
        return (
            encode_u8(record.content_type)
            + encode_u16(record.legacy_version)
            + encode_u16(len(record.fragment))
            + record.fragment
        )

    def set_max_fragment_length(self, length: int) -> None:
        if length > _TLS_MAX_FRAGMENT_LENGTH:
            raise ProtocolError("Max fragment length exceeds TLS limit")
        self.max_fragment_length = length