"""
===================================
Python lab screenshot
===================================
:Date: October 2026
"""

from .dispatch import Screenshot_Dispatcher, DEFAULT_TIMEOUT
from .errors   import Screenshot_Error
from .plugin   import Screenshot_Plugin
from .registry import Plugin_Registry
from .plugins  import registry_default
