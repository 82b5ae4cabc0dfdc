"""
┌────────────────────────────────────────┐
│ Rigol DS/MSO 1000 and 2000 series      │
└────────────────────────────────────────┘

 Both families answer the same display query with a BMP image wrapped
 in a block.

 October 2026
"""

from ..plugin import Screenshot_Plugin
from .block   import query_image


def rigol_capture(address, timeout):
    return query_image(address, timeout, ":display:data?")


rigol_1000 = Screenshot_Plugin(
    name              = "rigol-1000",
    description       = "Rigol DS/MSO 1000 series oscilloscope",
    identity_patterns = "RIGOL DS1... MSO1...",
    image_format      = "bmp",
    capture           = rigol_capture,
)

rigol_2000 = Screenshot_Plugin(
    name              = "rigol-2000",
    description       = "Rigol DS/MSO 2000 series oscilloscope",
    identity_patterns = "RIGOL DS2... MSO2...",
    image_format      = "bmp",
    capture           = rigol_capture,
)
