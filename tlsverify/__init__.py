"""Parse, serialize and track TLS 1.3 records and handshake messages."""

__version__ = "0.1.0"