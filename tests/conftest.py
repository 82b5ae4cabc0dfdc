import struct
import zlib

import pytest

from python_lab_screenshot.errors   import Connect_Failed, Receive_Failed
from python_lab_screenshot.plugin   import Screenshot_Plugin
from python_lab_screenshot.registry import Plugin_Registry

# Smallest valid images, enough for Pillow to tell the format
def png_chunk(tag, data):
    return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", zlib.crc32(tag + data) & 0xFFFFFFFF)


PNG_IMAGE = (
    b"\x89PNG\r\n\x1a\n"
    + png_chunk(b"IHDR", struct.pack(">IIBBBBB", 1, 1, 8, 2, 0, 0, 0))
    + png_chunk(b"IDAT", zlib.compress(b"\x00\xff\x00\x00"))
    + png_chunk(b"IEND", b"")
)

BMP_IMAGE = (
    b"BM" + (58).to_bytes(4, "little") + b"\x00\x00\x00\x00" + (54).to_bytes(4, "little")
    + (40).to_bytes(4, "little") + (1).to_bytes(4, "little") + (1).to_bytes(4, "little")
    + (1).to_bytes(2, "little") + (24).to_bytes(2, "little") + (0).to_bytes(4, "little")
    + (4).to_bytes(4, "little") + (2835).to_bytes(4, "little") + (2835).to_bytes(4, "little")
    + (0).to_bytes(4, "little") + (0).to_bytes(4, "little")
    + b"\x00\x00\xff\x00"
)


class Fake_Session:
    """
    Records what is sent and answers from a list of canned responses.
    """

    def __init__(self, address, responses, fail_receive=False):
        self.address      = address
        self.responses    = list(responses)
        self.fail_receive = fail_receive
        self.sent         = []
        self.connected    = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.disconnect()

    def send(self, command):
        self.sent.append(command)

    def receive(self, max_length):
        if self.fail_receive:
            raise Receive_Failed(self.address, "timeout")
        return self.responses.pop(0)[:max_length]

    def ask(self, command, max_length):
        self.send(command)
        return self.receive(max_length)

    def disconnect(self):
        self.connected = False


class Fake_Transport:
    def __init__(self, responses=(), fail_connect=False, fail_receive=False):
        self.responses    = responses
        self.fail_connect = fail_connect
        self.fail_receive = fail_receive
        self.sessions     = []

    def connect(self, address, timeout):
        if self.fail_connect:
            raise Connect_Failed(address, "unreachable")

        session = Fake_Session(address, self.responses, self.fail_receive)
        session.timeout = timeout
        self.sessions.append(session)
        return session

    @property
    def sent(self):
        return [cmd for session in self.sessions for cmd in session.sent]


@pytest.fixture
def fake_transport():
    return Fake_Transport()


def plugin_make(name, patterns=None, image=PNG_IMAGE, image_format="png", calls=None):
    def capture(address, timeout):
        if calls is not None:
            calls.append((name, address, timeout))
        return image

    return Screenshot_Plugin(
        name              = name,
        description       = f"{name} test instrument",
        identity_patterns = patterns,
        image_format      = image_format,
        capture           = capture,
    )


@pytest.fixture
def registry():
    return Plugin_Registry()
