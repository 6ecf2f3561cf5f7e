"""Big-endian wire encoding helpers and the error hierarchy."""

from __future__ import annotations


class TlsError(Exception):
    """Base class for every error raised by this package."""


class ParseError(TlsError):
    """Raised when wire data is malformed or truncated."""


class ProtocolError(TlsError):
    """Raised when a peer violates the protocol."""


class UnsupportedMessageError(TlsError):
    """Raised when a message type is recognised but not handled."""


class ByteReader:
    """Sequential reader over a byte string with a moving position."""

    def __init__(self, data):
        self.data = bytes(data)
        self.pos = 0

    def __len__(self) -> int:
        return len(self.data)

    @property
    def remaining(self) -> int:
        """Number of bytes not yet consumed."""
        return len(self.data) - self.pos

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    def _take(self, length: int, what: str) -> bytes:
        if self.pos + length > len(self.data):
            raise ParseError(f"Unexpected end of data while reading {what}")
        chunk = self.data[self.pos:self.pos + length]
        self.pos += length
        return chunk

    def read_u8(self) -> int:
        return self._take(1, "u8")[0]

    def read_u16(self) -> int:
        return int.from_bytes(self._take(2, "u16"), "big")

    def read_u24(self) -> int:
        return int.from_bytes(self._take(3, "u24"), "big")

    def read_u32(self) -> int:
        return int.from_bytes(self._take(4, "u32"), "big")

    def read_bytes(self, length: int) -> bytes:
        return self._take(length, f"{length} bytes")

    def read_vector_u8(self) -> bytes:
        return self.read_bytes(self.read_u8())

    def read_vector_u16(self) -> bytes:
        return self.read_bytes(self.read_u16())

    def read_vector_u24(self) -> bytes:
        return self.read_bytes(self.read_u24())

    def read_rest(self) -> bytes:
        """Consume and return every remaining byte."""
        chunk = self.data[self.pos:]
        self.pos = len(self.data)
        return chunk


def _encode_int(value: int, size: int, name: str) -> bytes:
    if not 0 <= value < 1 << (8 * size):
        raise ValueError(f"Value too large for {name}")
    return value.to_bytes(size, "big")


def encode_u8(value: int) -> bytes:
    return _encode_int(value, 1, "u8")


def encode_u16(value: int) -> bytes:
    return _encode_int(value, 2, "u16")


def encode_u24(value: int) -> bytes:
    return _encode_int(value, 3, "u24")


def encode_u32(value: int) -> bytes:
    return _encode_int(value, 4, "u32")


def _encode_vector(data, size: int, name: str) -> bytes:
    payload = bytes(data)
    if len(payload) >= 1 << (8 * size):
        raise ValueError(f"Data too large for {name} length prefix")
    return len(payload).to_bytes(size, "big") + payload


def encode_vector_u8(data) -> bytes:
    return _encode_vector(data, 1, "u8")


def encode_vector_u16(data) -> bytes:
    return _encode_vector(data, 2, "u16")


def encode_vector_u24(data) -> bytes:
    return _encode_vector(data, 3, "u24")


def validate_length(data, expected: int) -> None:
    """Raise ParseError unless ``data`` has exactly ``expected`` bytes."""
    if len(data) != expected:
        raise ParseError(f"Invalid length: expected {expected}, got {len(data)}")