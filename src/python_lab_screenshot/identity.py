"""
┌────────────────────────────────────────┐
│ Instrument identity query              │
└────────────────────────────────────────┘

 October 2026
"""

import logging

from . import transport

IDENTITY_QUERY = "*IDN?"
ID_LENGTH_MAX  = 65536

log = logging.getLogger("Identity resolver")


def identity_get(address: str, timeout: float, connect=None) -> str:
    """
    Asks the instrument for its identity string. Connect_Failed and
    Receive_Failed are raised as is when the exchange fails.
    """

    # Looked up at call time so the transport can be swapped in tests
    if connect is None:
        connect = transport.connect

    with connect(address, timeout) as session:
        response = session.ask(IDENTITY_QUERY, ID_LENGTH_MAX)

    identity = response.decode("ascii", errors="replace")

    # Remove trailing newline
    if identity.endswith("\n"):
        identity = identity[:-1]

    log.debug(f"Instrument identity: {identity!r}")
    return identity
