"""The key_share extension entry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from tlsverify.utils import ByteReader, ParseError, encode_u16, encode_vector_u16


class NamedGroup(IntEnum):
    SECP256R1 = 0x0017
    SECP384R1 = 0x0018
    SECP521R1 = 0x0019
    X25519 = 0x001D
    X448 = 0x001E
    FFDHE2048 = 0x0100
    FFDHE3072 = 0x0101
    FFDHE4096 = 0x0102
    FFDHE6144 = 0x0103
    FFDHE8192 = 0x0104

    @classmethod
    def parse(cls, value: int) -> "NamedGroup":
        try:
            return cls(value)
        except ValueError:
            raise ParseError(f"Invalid NamedGroup value: {value:#06x}") from None


@dataclass
class KeyShareEntry:
    group: NamedGroup
    key_exchange: bytes

    def __post_init__(self) -> None:
        self.key_exchange = bytes(self.key_exchange)

    @classmethod
    def parse(cls, reader: ByteReader) -> "KeyShareEntry":
        if reader.remaining < 4:
            raise ParseError("KeyShareEntry too short")
        group = NamedGroup.parse(reader.read_u16())
        return cls(group, reader.read_vector_u16())

    def serialize(self) -> bytes:
        return encode_u16(self.group) + encode_vector_u16(self.key_exchange)