"""
┌────────────────────────────────────────┐
│ Siglent SDM3000 digital multimeters    │
└────────────────────────────────────────┘

 October 2026
"""

from ..plugin import Screenshot_Plugin
from .block   import query_image


def sdm3000_capture(address, timeout):
    # Raw BMP data, no block header
    return query_image(address, timeout, "scdp", block=False)


siglent_sdm3000 = Screenshot_Plugin(
    name              = "siglent-sdm3000",
    description       = "Siglent SDM 3000/3000X series digital multimeter",
    identity_patterns = "SIGLENT TECHNOLOGIES Siglent Technologies SDM3...",
    image_format      = "bmp",
    capture           = sdm3000_capture,
)
