[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tlsverify"
version = "0.1.0"
description = "Parse, serialize and track TLS 1.3 records and handshake messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["tls", "tls13", "handshake", "record", "parser", "protocol"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tlsverify"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
