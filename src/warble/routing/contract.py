"""Router protocol shared by the trie and regex implementations.

Any object with this shape is a router; no base class required::

    router.add("GET", "/users/:id", show_user)
    match = router.match("GET", "/users/42")
    if match is not None:
        match.handler, match.params["id"]

Registration (``add``) happens single-threaded at startup. After that
``match`` only reads router state, so it may be called concurrently
from any number of threads as long as nobody calls ``add`` meanwhile.
The router does not enforce this.
"""

from typing import Protocol, runtime_checkable

from warble.routing.route import Handler, Route, RouteMatch


@runtime_checkable
class Router(Protocol):
    """Register routes and resolve ``(method, path)`` pairs."""

    def add(self, method: str, pattern: str, handler: Handler) -> None:
        """Register *handler* for *method* and *pattern*.

        Raises ``RouteDefinitionError`` for structurally invalid patterns.
        """
        ...

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Resolve a request. ``None`` means no route matched.

        Wrong method and wrong path are indistinguishable here.
        """
        ...

    @property
    def routes(self) -> list[Route]:
        """All registered routes in registration order."""
        ...
