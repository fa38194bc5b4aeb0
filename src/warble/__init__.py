"""Warble — an HTTP routing engine with two matching strategies.

Maps ``(method, path)`` to a registered handler and extracts path
parameters. Pick the strategy that fits the application:

- ``TrieRouter``: static beats parameter beats wildcard, whatever the
  registration order.
- ``RegexRouter``: the first registered pattern that matches wins.

Basic usage::

    from warble import TrieRouter

    router = TrieRouter()
    router.add("GET", "/users/:id(\\d+)", show_user)
    router.add("GET", "/assets/*path", serve_asset)

    match = router.match("GET", "/users/42")
    if match is not None:
        match.handler, match.params  # show_user, {"id": "42"}
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "RegexRouter",
    "Route",
    "RouteDefinitionError",
    "RouteGroup",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "TrieRouter",
    "WarbleError",
    "create_router",
    "format_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import warble`` fast while providing a clean top-level API.
    """
    if name in ("RegexRouter", "Route", "RouteGroup", "RouteMatch", "Router", "TrieRouter"):
        from warble import routing as _routing

        return getattr(_routing, name)

    if name in ("RouterConfig", "create_router"):
        from warble import config as _config

        return getattr(_config, name)

    if name == "format_routes":
        from warble.routing.table import format_routes

        return format_routes

    if name in ("ConfigurationError", "RouteDefinitionError", "WarbleError"):
        from warble import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
