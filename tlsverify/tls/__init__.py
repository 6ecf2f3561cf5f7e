"""TLS protocol constants and shared enumerations."""