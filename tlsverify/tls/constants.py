"""Protocol constants for TLS 1.3."""

TLS13 = 0x0304

TLS12 = 0x0303
TLS11 = 0x0302
TLS10 = 0x0301

RECORD_TYPE_CHANGE_CIPHER_SPEC = 20
RECORD_TYPE_ALERT = 21
RECORD_TYPE_HANDSHAKE = 22
RECORD_TYPE_APPLICATION_DATA = 23

MAX_RECORD_SIZE = 16384 + 256
MAX_HANDSHAKE_SIZE = 65536
MAX_EARLY_DATA_SIZE = 14336

# TLS 1.2 version number carried in legacy fields for compatibility.
LEGACY_VERSION = TLS12