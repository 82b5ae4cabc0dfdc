"""
┌────────────────────────────────────────┐
│ Screenshot plugin selection            │
└────────────────────────────────────────┘

 A plugin is picked either by its name, or by matching the instrument
 identity string against the identity patterns of every plugin. In the
 latter case the plugin with the most matching patterns wins, and the
 first registered one wins a tie.

 October 2026
"""

import logging

from .errors   import (
    Connect_Failed,
    Identity_Unavailable,
    No_Plugin_Detected,
    Receive_Failed,
    Unknown_Plugin,
)
from .identity import identity_get

log = logging.getLogger("Plugin selector")


def plugin_by_name(registry, name):
    plugin = registry.find_by_name(name)
    if plugin is None:
        raise Unknown_Plugin(name)

    return plugin


def plugin_detect(registry, identity: str):
    """
    Returns the plugin whose identity patterns match identity the most.
    Raises No_Plugin_Detected if no pattern of any plugin matches.
    """

    winner    = None
    count_max = 0

    for plugin in registry.list():
        # Plugins without patterns can only be chosen by name
        if not plugin.autodetectable:
            continue

        count = plugin.match_count(identity)
        log.debug(f"{plugin.name}: {count} matching pattern(s)")

        # Strictly greater: first registered plugin wins a tie
        if count > count_max:
            winner    = plugin
            count_max = count

    if winner is None:
        raise No_Plugin_Detected(identity)

    return winner


def plugin_select(registry, address: str, plugin_name: str, timeout: float, identify=identity_get):
    """
    Explicit name if given, autodetection from the instrument identity
    otherwise. The instrument is not queried when a name is given.
    """

    if plugin_name:
        return plugin_by_name(registry, plugin_name)

    try:
        identity = identify(address, timeout)
    except (Connect_Failed, Receive_Failed) as exc:
        raise Identity_Unavailable(address) from exc

    plugin = plugin_detect(registry, identity)
    log.info(f"Loaded {plugin.name} screenshot plugin")

    return plugin
