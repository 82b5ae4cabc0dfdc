"""
┌────────────────────────────────────────┐
│ IEEE 488.2 definite length blocks      │
└────────────────────────────────────────┘

 Many instruments frame binary answers as #<n><length><data>, where n
 is the number of digits of length.

 October 2026
"""

import re

from .. import transport
from ..errors import Receive_Failed

IMAGE_SIZE_MAX = 0x400000 # 4 MB

_RE_HEADER = re.compile(rb"#([1-9])")


def block_data(address, response: bytes) -> bytes:
    """
    Returns the payload of a definite length block. Trailing bytes
    (usually a newline) after the payload are dropped.
    """

    mt = _RE_HEADER.match(response)
    if not mt:
        raise Receive_Failed(address, f"missing block header in {response[:16]!r}")

    digits = int(mt.group(1))
    start  = 2 + digits
    length = response[2:start]
    if len(length) != digits or not length.isdigit():
        raise Receive_Failed(address, f"malformed block header {response[:start]!r}")

    length = int(length)
    data   = response[start:start+length]
    if len(data) != length:
        raise Receive_Failed(address, f"truncated block: got {len(data)} of {length} bytes")

    return data


def query_image(address, timeout, *commands, block=True) -> bytes:
    """
    Sends commands in order, then reads the image answered to the last
    one. With block=True, the answer is unwrapped from its block header.
    """

    with transport.connect(address, timeout) as session:
        for command in commands:
            session.send(command)

        response = session.receive(IMAGE_SIZE_MAX)

    return block_data(address, response) if block else response
