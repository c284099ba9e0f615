"""Connection descriptor parsing.

A descriptor is one of::

    ""                      public mode, no environment
    "<env>"                 public mode with an environment qualifier
    "<key>|<secret>"        secure mode
    "<key>|<secret>|<env>"  secure mode with an environment qualifier
"""

from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "|"


@dataclass(frozen=True)
class ConnectionDescriptor:
    """Transport configuration parsed from a descriptor string."""

    key: str = ""
    secret: str = ""
    env: str = ""

    @property
    def is_secure(self) -> bool:
        """True when OAuth credentials are configured."""
        return bool(self.key)


def parse_descriptor(dsn: str) -> ConnectionDescriptor:
    """Parse a descriptor string. Never fails.

    Any shape other than one or two separators is taken as a bare
    environment qualifier.
    """
    parts = dsn.split(SEPARATOR)
    if len(parts) == 2:
        return ConnectionDescriptor(key=parts[0], secret=parts[1])
    if len(parts) == 3:
        return ConnectionDescriptor(key=parts[0], secret=parts[1], env=parts[2])
    return ConnectionDescriptor(env=dsn)
