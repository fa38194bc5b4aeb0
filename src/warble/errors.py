"""Warble exception hierarchy.

Shared across the pattern compiler, both routers, and the router factory
so every module raises and catches the same types.

A failed ``match`` is not an error: routers return ``None`` for that.
"""


class WarbleError(Exception):
    """Base for all warble-specific errors."""


class ConfigurationError(WarbleError):
    """Raised when router configuration is invalid.

    Typically surfaces at startup, while the application builds its router.
    """


class RouteDefinitionError(ConfigurationError):
    """A route pattern is structurally invalid.

    Raised synchronously by ``add()``. Registration must abort: a router
    never keeps a half-inserted route.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid route pattern {pattern!r}: {reason}")
