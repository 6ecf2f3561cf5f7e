"""Connection states and the server-side handshake state machine."""