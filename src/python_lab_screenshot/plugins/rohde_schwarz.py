"""
┌────────────────────────────────────────┐
│ Rohde & Schwarz HMO1000 oscilloscopes  │
└────────────────────────────────────────┘

 October 2026
"""

from ..plugin import Screenshot_Plugin
from .block   import query_image


def hmo1000_capture(address, timeout):
    return query_image(address, timeout, "hcop:form png", "hcop:data?")


rs_hmo1000 = Screenshot_Plugin(
    name              = "rs-hmo1000",
    description       = "Rohde & Schwarz HMO 1000 series oscilloscope",
    identity_patterns = "Rohde&Schwarz ROHDE&SCHWARZ HMO1...",
    image_format      = "png",
    capture           = hmo1000_capture,
)
