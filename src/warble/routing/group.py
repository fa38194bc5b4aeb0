"""Route groups: register many routes under a shared path prefix.

A group is a thin registration helper in front of any ``Router``::

    api = RouteGroup(router, "/api")
    v1 = api.group("/v1")
    v1.get("/users/:id", show_user)               # GET /api/v1/users/:id
    v1.post(["/users", "/accounts"], create_user) # two patterns, one handler

    @v1.route("DELETE", "/users/:id")
    def delete_user(ctx): ...

Groups only rewrite patterns; matching is entirely the router's business.
"""

from collections.abc import Callable, Sequence

from warble.routing.contract import Router
from warble.routing.pattern import SEPARATOR, split_path
from warble.routing.route import Handler


def join_paths(prefix: str, pattern: str) -> str:
    """Join a prefix and a pattern, collapsing duplicate separators.

    ``join_paths("/api/", "/users")`` -> ``"/api/users"``;
    ``join_paths("/api", "/")`` -> ``"/api"``.
    """
    parts = split_path(prefix) + split_path(pattern)
    return SEPARATOR + SEPARATOR.join(parts)


class RouteGroup:
    """Prefix-scoped registration helper."""

    __slots__ = ("_prefix", "_router")

    def __init__(self, router: Router, prefix: str = "") -> None:
        self._router = router
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return join_paths(self._prefix, "")

    def add(self, method: str, patterns: str | Sequence[str], handler: Handler) -> None:
        """Register *handler* for every pattern in *patterns*, prefixed."""
        if isinstance(patterns, str):
            patterns = [patterns]
        for pattern in patterns:
            self._router.add(method, join_paths(self._prefix, pattern), handler)

    def group(self, prefix: str) -> "RouteGroup":
        """Return a nested group whose prefix extends this one."""
        return RouteGroup(self._router, join_paths(self._prefix, prefix))

    def route(
        self, method: str, patterns: str | Sequence[str]
    ) -> Callable[[Handler], Handler]:
        """Decorator form of ``add``. Returns the handler unchanged."""

        def decorator(handler: Handler) -> Handler:
            self.add(method, patterns, handler)
            return handler

        return decorator

    def get(self, patterns: str | Sequence[str], handler: Handler) -> None:
        self.add("GET", patterns, handler)

    def post(self, patterns: str | Sequence[str], handler: Handler) -> None:
        self.add("POST", patterns, handler)

    def put(self, patterns: str | Sequence[str], handler: Handler) -> None:
        self.add("PUT", patterns, handler)

    def patch(self, patterns: str | Sequence[str], handler: Handler) -> None:
        self.add("PATCH", patterns, handler)

    def delete(self, patterns: str | Sequence[str], handler: Handler) -> None:
        self.add("DELETE", patterns, handler)

    def head(self, patterns: str | Sequence[str], handler: Handler) -> None:
        self.add("HEAD", patterns, handler)

    def options(self, patterns: str | Sequence[str], handler: Handler) -> None:
        self.add("OPTIONS", patterns, handler)
