# tlsverify

Tools for working with TLS 1.3 wire data. The package reads and writes
plaintext records and parses and builds handshake messages. It also tracks
the server side of a handshake and holds session traffic secrets. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

- `tlsverify.utils`
  - `ByteReader` reads big-endian `u8`/`u16`/`u24`/`u32` integers and
    length-prefixed vectors from a byte string. It also provides `read_rest()`.
  - `encode_u8` … `encode_u32` and `encode_vector_u8` … `encode_vector_u24`
    write the same forms. They raise `ValueError` when a value does not fit.
  - `validate_length` checks that data has an exact length.
  - Errors: `TlsError` and its subclasses `ParseError`, `ProtocolError` and
    `UnsupportedMessageError`.
- `tlsverify.record`
  - `TlsRecord` holds `content_type`, `legacy_version` and `fragment`.
  - `RecordLayer` handles records:
    - `parse_record` parses one record.
    - `process_records` parses every complete record and ignores a short
      trailing piece.
    - `serialize_record` writes a record.
    - `set_max_fragment_length` sets the fragment limit. The default limit
      is 16384 bytes, and it cannot be raised above that.
- `tlsverify.tls.constants`: version numbers (`TLS13`, `TLS12`, …), record
  type numbers, size limits and `LEGACY_VERSION`.
- `tlsverify.tls.types`
  - `ContentType` has a strict `parse` and a lenient `from_byte`. The lenient
    one maps unknown values to `APPLICATION_DATA`.
  - `AlertLevel` and `AlertDescription`.
- `tlsverify.handshake`
  - `base`: `HandshakeType`, `CipherSuite`, the abstract `HandshakeMessage`
    and `HandshakeMessageHeader`.
  - `extensions`: `ExtensionType`, `Extension` and `find_extension`.
  - `key_share`: `NamedGroup` and `KeyShareEntry`.
  - `supported_versions`: `SupportedVersions`, with the client and server
    forms of the extension.
  - The message modules are `client_hello` (`ClientHello`), `server_hello`
    (`ServerHello`), `encrypted_extensions` (`EncryptedExtensions`),
    `certificate` (`Certificate`, `CertificateEntry`), `certificate_verify`
    (`CertificateVerify`, `SignatureScheme`) and `finished` (`Finished`).
  - `layer`: `HandshakeLayer` parses framed handshake messages.
    - `parse_handshake_message` returns the message and the bytes consumed.
    - `iter_messages` yields every message in a buffer.
    - A known type without a parser raises `UnsupportedMessageError`.
- `tlsverify.state`
  - `core`: `ConnectionRole`, `ConnectionState`, the abstract `StateHandler`
    and `HandshakeState`.
  - `server`: `ServerState`.
- `tlsverify.session`
  - `SessionKeys` holds a cipher suite and two traffic secrets.
    - `is_expired(ttl)` takes a `timedelta` or a number of seconds.
    - `wipe()` zeroes the secrets in place.
  - `SessionManager` holds a `HandshakeState`, the session keys, a session id
    and a timeout. The timeout defaults to one hour.

## Examples

Records:

```python
from tlsverify.record import RecordLayer
from tlsverify.tls.types import ContentType

data = bytes([22, 0x03, 0x03, 0x00, 0x05, 1, 2, 3, 4, 5])
layer = RecordLayer()
record, consumed = layer.parse_record(data)
assert record.content_type is ContentType.HANDSHAKE
assert record.fragment == bytes([1, 2, 3, 4, 5])
assert consumed == 10
assert layer.serialize_record(record) == data
```

Handshake messages:

```python
from tlsverify.handshake.base import CipherSuite, HandshakeMessageHeader, HandshakeType
from tlsverify.handshake.layer import HandshakeLayer
from tlsverify.handshake.server_hello import ServerHello
from tlsverify.handshake.supported_versions import SupportedVersions
from tlsverify.tls.constants import TLS12, TLS13

hello = ServerHello(
    TLS12,
    bytes(range(1, 33)),
    b"",
    CipherSuite.TLS_AES_128_GCM_SHA256,
    0,
    [SupportedVersions.create_server_extension(TLS13)],
)
body = hello.serialize()
framed = HandshakeMessageHeader(HandshakeType.SERVER_HELLO, len(body)).serialize() + body

message, consumed = HandshakeLayer().parse_handshake_message(framed)
assert message == hello
assert consumed == len(framed)
```

Low-level encoding:

```python
from tlsverify.utils import ByteReader, encode_u16, encode_vector_u8

payload = encode_u16(0x0303) + encode_vector_u8(b"\x12\x34")
reader = ByteReader(payload)
assert reader.read_u16() == 0x0303
assert reader.read_vector_u8() == b"\x12\x34"
```

## What it does not do

- It opens no network connections. It has no encryption or decryption of
  records and no key derivation.
- It does not check signatures, and it does not verify `Finished` data.
  `CertificateVerify` and `Finished` are only parsed and serialized.
- It does no X.509 parsing or certificate chain validation. Certificates are
  carried as opaque bytes.
- It has no client-side state machine.
- `ServerState` only moves from `INITIAL` to `NEGOTIATING` on a `ClientHello`,
  and from `HANDSHAKING` to `CONNECTED` on a `Finished`. Nothing in the
  package moves it from `NEGOTIATING` to `HANDSHAKING`.
- It has no command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```