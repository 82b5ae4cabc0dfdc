"""
┌────────────────────────────────────────┐
│ Screenshot plugin description          │
└────────────────────────────────────────┘

 A plugin is a plain value: a name, a description, the patterns used to
 recognize the instrument from its identity string, and the function
 that grabs the image.

 October 2026
"""

import re

from dataclasses import dataclass, field
from typing      import Callable, Tuple


@dataclass(frozen=True)
class Screenshot_Plugin:
    name:              str
    description:       str
    capture:           Callable[[str, float], bytes] = field(repr=False, compare=False)
    identity_patterns: Tuple[str, ...]                = ()
    image_format:      str                            = "bin" # Used when the image type can't be guessed

    def __post_init__(self):
        if not self.name:
            raise ValueError("Plugin name must not be empty")

        # Patterns can be declared as one whitespace separated string
        patterns = self.identity_patterns
        if patterns is None:
            patterns = ()
        elif isinstance(patterns, str):
            patterns = patterns.split()

        patterns = tuple(patterns)

        regexes = []
        for pattern in patterns:
            try:
                regexes.append(re.compile(pattern))
            except re.error as exc:
                raise ValueError(f"Invalid identity pattern {pattern!r} for plugin {self.name!r}: {exc}") from exc

        # Frozen dataclass: bypass __setattr__
        object.__setattr__(self, "identity_patterns", patterns)
        object.__setattr__(self, "_regexes",          tuple(regexes))

    @property
    def autodetectable(self) -> bool:
        return len(self.identity_patterns) > 0

    def match_count(self, identity: str) -> int:
        """
        Number of identity patterns found anywhere in the identity string.
        Each pattern is tried independently, case sensitive, not anchored.
        """

        return sum(1 for regex in self._regexes if regex.search(identity))
