"""
===================================
Screenshot plugins
===================================
"""

from ..registry     import Plugin_Registry

from .keysight      import keysight_iv2000x
from .rigol         import rigol_1000, rigol_2000
from .rohde_schwarz import rs_hmo1000
from .siglent       import siglent_sdm3000
from .tektronix     import tektronix_2000, tektronix_tds2000

# Registration order matters: the first one wins an autodetection tie
PLUGINS = [
    keysight_iv2000x,
    rigol_1000,
    rigol_2000,
    rs_hmo1000,
    siglent_sdm3000,
    tektronix_2000,
    tektronix_tds2000,
]


def plugins_register(registry):
    for plugin in PLUGINS:
        registry.register(plugin)

    return registry


def registry_default():
    return plugins_register(Plugin_Registry())
