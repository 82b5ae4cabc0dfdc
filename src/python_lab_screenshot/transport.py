"""
┌────────────────────────────────────────────┐
│ Instrument sessions over VXI-11 and USBTMC │
└────────────────────────────────────────────┘

 LAN instruments are reached with VXI-11, either by host name / IP
 address or with a full "TCPIP::<host>::INSTR" resource string.
 Resource strings starting with "USB" go through USBTMC instead.

 October 2026
"""

import logging
import usbtmc
import vxi11

from usbtmc.usbtmc import UsbtmcException
from vxi11.rpc     import RPCError
from vxi11.vxi11   import Vxi11Exception

from .errors       import Connect_Failed, Receive_Failed, Send_Failed

# Anything the instrument libraries raise when the link misbehaves.
# Socket timeouts and USB errors are both OSError, a link dropped in the
# middle of an RPC reply is EOFError.
TRANSPORT_ERRORS = (Vxi11Exception, RPCError, UsbtmcException, OSError, EOFError)

log = logging.getLogger("Instrument transport")


def is_usb_resource(address: str) -> bool:
    return address.upper().startswith("USB")


class Instrument_Session:
    def __init__(self, address, dev, timeout):
        self.address = address
        self.dev     = dev
        self.timeout = timeout
        self.log     = logging.getLogger(f"Session {address}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.disconnect()

    # ┌────────────────────────────────────────┐
    # │ Exchange                               │
    # └────────────────────────────────────────┘

    def send(self, command):
        if isinstance(command, str):
            command = command.encode("ascii")

        self.log.debug(f"TX: {command!r}")
        try:
            self.dev.write_raw(command)
        except TRANSPORT_ERRORS as exc:
            raise Send_Failed(self.address, exc) from exc

    def receive(self, max_length: int) -> bytes:
        try:
            data = self.dev.read_raw(max_length)
        except TRANSPORT_ERRORS as exc:
            raise Receive_Failed(self.address, exc) from exc

        data = bytes(data[:max_length])
        if len(data) <= 80: self.log.debug(f"RX: {data!r}")
        else:               self.log.debug(f"RX: {len(data)} bytes")

        return data

    def ask(self, command, max_length: int) -> bytes:
        self.send(command)
        return self.receive(max_length)

    def disconnect(self):
        if self.dev is None:
            return

        try:
            dev_close(self.dev)
        finally:
            self.dev = None


def dev_close(dev):
    try:
        dev.close()
    except TRANSPORT_ERRORS as exc:
        log.warning(f"Disconnect failed: {exc}")


def connect(address: str, timeout: float) -> Instrument_Session:
    """
    Opens a session to the instrument at address. timeout is in seconds
    and applies to every following operation of the session.
    """

    log.debug(f"Connect to {address}, timeout = {timeout}s")

    dev = None
    try:
        if is_usb_resource(address):
            dev = usbtmc.Instrument(address)
        else:
            dev = vxi11.Instrument(address)

        dev.timeout = timeout
        dev.open()

    except (*TRANSPORT_ERRORS, ValueError) as exc:
        # A half opened link may still hold a socket
        if dev is not None: dev_close(dev)
        raise Connect_Failed(address, exc) from exc

    return Instrument_Session(address, dev, timeout)
