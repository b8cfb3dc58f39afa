"""Boomerang exception hierarchy.

Only the registration side raises. Lookups in either direction report
failure through sentinel return values (``NOT_FOUND`` / ``(None, None)``).
"""


class BoomerangError(Exception):
    """Base for all boomerang-specific errors."""


class ConfigurationError(BoomerangError):
    """Raised when route registration input is invalid.

    Typically raised at import time while the route table is being
    declared, e.g. an unknown REST endpoint name.
    """


class UnknownChannelError(ConfigurationError):
    """Raised when a route is registered on a channel that does not exist."""

    def __init__(self, channel: object) -> None:
        from boomerang.routing.table import Channel

        allowed = ", ".join(c.value for c in Channel)
        super().__init__(f"Unknown channel {channel!r}. Expected one of: {allowed}")
        self.channel = channel


class RoutesFrozenError(ConfigurationError):
    """Raised when registering a route after the tables have been frozen."""

    def __init__(self, detail: str = "Cannot add routes after the route tables are frozen.") -> None:
        super().__init__(detail)
