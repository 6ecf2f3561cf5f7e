import pytest

from tlsverify.handshake.base import CipherSuite
from tlsverify.handshake.client_hello import ClientHello
from tlsverify.handshake.finished import Finished
from tlsverify.handshake.server_hello import ServerHello
from tlsverify.state.core import ConnectionState
from tlsverify.state.server import ServerState
from tlsverify.utils import ProtocolError


def _client_hello():
    return ClientHello(0x0303, bytes(32), b"", [CipherSuite.TLS_AES_128_GCM_SHA256])


def test_initial_state():
    server = ServerState()
    assert server.state is ConnectionState.INITIAL
    assert server.is_handshake_complete() is False
    assert server.selected_cipher_suite is None
    assert server.server_name is None


def test_client_hello_in_initial_negotiates():
    server = ServerState()
    server.process_message(_client_hello())
    assert server.state is ConnectionState.NEGOTIATING
    assert server.is_handshake_complete() is False


def test_second_client_hello_rejected():
    server = ServerState()
    server.process_message(_client_hello())
    with pytest.raises(ProtocolError, match="Unexpected message CLIENT_HELLO"):
        server.process_message(_client_hello())
    assert server.state is ConnectionState.NEGOTIATING


def test_finished_in_initial_rejected():
    server = ServerState()
    with pytest.raises(ProtocolError, match="in state INITIAL"):
        server.process_message(Finished(b"\x00"))
    assert server.state is ConnectionState.INITIAL


def test_finished_while_handshaking_connects():
    server = ServerState()
    server.state = ConnectionState.HANDSHAKING
    server.process_message(Finished(b"\x01\x02\x03"))
    assert server.state is ConnectionState.CONNECTED
    assert server.is_handshake_complete() is True


def test_server_hello_always_rejected():
    server = ServerState()
    hello = ServerHello(0x0303, bytes(32), b"", CipherSuite.TLS_AES_128_GCM_SHA256)
    with pytest.raises(ProtocolError):
        server.process_message(hello)
    assert server.state is ConnectionState.INITIAL