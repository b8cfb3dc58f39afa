"""Routes configuration.

RoutesConfig is a frozen dataclass: immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RoutesConfig:
    """Routes configuration. Immutable after creation.

    Override what you need::

        config = RoutesConfig(default_channel="get")
    """

    # Channel used by lookups that do not name one
    default_channel: str = "client"

    # Log a warning when a forward route replaces an earlier registration
    warn_on_overwrite: bool = True
