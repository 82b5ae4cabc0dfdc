"""
┌────────────────────────────────────────┐
│ Registry of screenshot plugins         │
└────────────────────────────────────────┘

 Filled once at startup, then only read.

 October 2026
"""

import logging

from .errors import Duplicate_Plugin, Registry_Full

PLUGIN_LIST_SIZE_MAX = 50


class Plugin_Registry:
    def __init__(self, capacity=PLUGIN_LIST_SIZE_MAX):
        """
        capacity is the maximum number of plugins, None for no limit.
        """

        self.capacity = capacity
        self.plugins  = []
        self.log      = logging.getLogger("Plugin registry")

    def __len__(self):
        return len(self.plugins)

    def __iter__(self):
        return self.list()

    def __contains__(self, name):
        return self.find_by_name(name) is not None

    # ┌────────────────────────────────────────┐
    # │ Registration                           │
    # └────────────────────────────────────────┘

    def register(self, plugin):
        if (self.capacity is not None) and (len(self.plugins) >= self.capacity):
            raise Registry_Full(self.capacity)

        if self.find_by_name(plugin.name) is not None:
            raise Duplicate_Plugin(plugin.name)

        self.log.debug(f"Register plugin {plugin.name}")
        self.plugins.append(plugin)

    # ┌────────────────────────────────────────┐
    # │ Lookup                                 │
    # └────────────────────────────────────────┘

    def list(self):
        """
        Iterates over the plugins in registration order. Each call gives
        a new iterator.
        """

        for plugin in self.plugins:
            yield plugin

    def find_by_name(self, name):
        for plugin in self.plugins:
            if plugin.name == name:
                return plugin

        return None

    # ┌────────────────────────────────────────┐
    # │ Pretty print                           │
    # └────────────────────────────────────────┘

    def plugin_table(self) -> str:
        # Names are right aligned on the longest one
        width = max((len(plugin.name) for plugin in self.list()), default=0)

        lines = [f"{'Name':>{width}}   Description"]
        lines.extend(f"{plugin.name:>{width}}   {plugin.description}" for plugin in self.list())

        return "\n".join(lines)
