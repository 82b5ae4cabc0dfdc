"""
┌────────────────────────────────────────┐
│ Screenshot dispatcher                  │
└────────────────────────────────────────┘

 Picks the plugin, runs its capture and writes the image.

 October 2026
"""

import logging

from .dump     import Screenshot_Dump, image_format_guess
from .errors   import Missing_Address, Receive_Failed
from .identity import identity_get
from .selector import plugin_select

DEFAULT_TIMEOUT = 15.0 # s


class Screenshot_Dispatcher:
    def __init__(self, registry, identify=identity_get, dump_class=Screenshot_Dump):
        self.registry   = registry
        self.identify   = identify
        self.dump_class = dump_class
        self.log        = logging.getLogger("Screenshot dispatcher")

    def run(self, address, plugin_name="", filename=None, timeout=DEFAULT_TIMEOUT):
        """
        Takes one screenshot from the instrument at address and returns
        the path of the written file. Errors are raised, never retried.
        """

        if not address:
            raise Missing_Address()

        plugin = plugin_select(self.registry, address, plugin_name, timeout, identify=self.identify)

        self.log.debug(f"Capture with {plugin.name}, timeout = {timeout}s")
        data = plugin.capture(address, timeout)
        if not data:
            raise Receive_Failed(address, "empty image")

        format_tag = image_format_guess(data, plugin.image_format)
        self.log.debug(f"Received {len(data)} bytes of {format_tag} image")

        return self.dump_class(address, filename).write(data, format_tag)
