"""TLS 1.3 handshake messages, extensions and message framing."""