"""
┌────────────────────────────────────────┐
│ Tektronix oscilloscopes                │
└────────────────────────────────────────┘

 The DPO/MSO 2000 answer a hardcopy request with the PNG file. The older
 TDS2000 only send BMP hardcopies, and only through their USB device
 port, so use them with a "USB::0x0699::0x036A::INSTR" like address.

 October 2026
"""

from ..plugin import Screenshot_Plugin
from .block   import query_image


def dpo2000_capture(address, timeout):
    return query_image(address, timeout, "save:image:fileformat png", "hardcopy start", block=False)


def tds2000_capture(address, timeout):
    # Sets the port to USB and the format to BMP, then reads the hardcopy image
    return query_image(address, timeout, "HARDC:PORT USB;FORMAT BMP", "HARDC START", block=False)


tektronix_2000 = Screenshot_Plugin(
    name              = "tektronix-2000",
    description       = "Tektronix DPO/MSO 2000 series oscilloscope",
    identity_patterns = "TEKTRONIX DPO2... MSO2...",
    image_format      = "png",
    capture           = dpo2000_capture,
)

tektronix_tds2000 = Screenshot_Plugin(
    name              = "tektronix-tds2000",
    description       = "Tektronix TDS 2000 series oscilloscope (USB)",
    identity_patterns = "TEKTRONIX TDS.2...",
    image_format      = "bmp",
    capture           = tds2000_capture,
)
