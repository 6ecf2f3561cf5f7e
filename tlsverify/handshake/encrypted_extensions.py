"""The EncryptedExtensions handshake message."""

from __future__ import annotations

from dataclasses import dataclass, field

from tlsverify.handshake.base import HandshakeMessage, HandshakeType
from tlsverify.handshake.extensions import Extension, ExtensionType, find_extension
from tlsverify.utils import ByteReader, ParseError, encode_vector_u16


@dataclass
class EncryptedExtensions(HandshakeMessage):
    extensions: list[Extension] = field(default_factory=list)

    message_type = HandshakeType.ENCRYPTED_EXTENSIONS

    def __post_init__(self) -> None:
        self.extensions = list(self.extensions)

    @classmethod
    def parse(cls, reader: ByteReader) -> "EncryptedExtensions":
        length = reader.read_u16()
        if length > reader.remaining:
            raise ParseError("EncryptedExtensions message truncated")
        end = reader.pos + length
        extensions = []
        while reader.pos < end:
            extensions.append(Extension.parse(reader))
        return cls(extensions)

    def get_extension(self, extension_type: ExtensionType) -> Extension | None:
        return find_extension(self.extensions, extension_type)

    def serialize(self) -> bytes:
        return encode_vector_u16(b"".join(ext.serialize() for ext in self.extensions))