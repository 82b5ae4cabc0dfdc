"""
┌────────────────────────────────────────────┐
│ Keysight InfiniiVision 2000X oscilloscopes │
└────────────────────────────────────────────┘

 October 2026
"""

from ..plugin import Screenshot_Plugin
from .block   import query_image


def iv2000x_capture(address, timeout):
    return query_image(address, timeout, ":display:data? png, color")


keysight_iv2000x = Screenshot_Plugin(
    name              = "keysight-iv2000x",
    description       = "Keysight InfiniiVision 2000X series oscilloscope",
    identity_patterns = "KEYSIGHT AGILENT DSO-X.2... MSO-X.2...",
    image_format      = "png",
    capture           = iv2000x_capture,
)
