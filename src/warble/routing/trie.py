"""Trie router: one prefix tree per HTTP method.

Matching walks the tree one path component at a time and, at every node,
prefers a static child, then the parameter child, then the wildcard
child, independent of registration order. When a preferred branch fails
deeper down the walk backtracks and tries the next one.
"""

import logging
import re
from dataclasses import dataclass

from warble.routing.pattern import SegmentKind, compile_constraint, split_path
from warble.routing.route import Handler, Route, RouteMatch, normalize_method

logger = logging.getLogger("warble.routing")


class _TrieNode:
    """A node in a method's route tree. Mutated only by ``add()``."""

    __slots__ = ("children", "handlers", "param_child", "wildcard_child")

    def __init__(self) -> None:
        # Static segment children: "users" -> node
        self.children: dict[str, _TrieNode] = {}
        # Single parameter child (only one param edge per level)
        self.param_child: _ParamEdge | None = None
        # Single wildcard child, always a leaf
        self.wildcard_child: _WildcardEdge | None = None
        # Terminal handlers at this node, keyed by HTTP method
        self.handlers: dict[str, Handler] = {}


@dataclass(slots=True)
class _ParamEdge:
    """A parameter edge. Name and constraint come from the first registration."""

    name: str
    constraint: str | None
    regex: re.Pattern[str] | None
    node: _TrieNode

    def accepts(self, part: str) -> bool:
        return self.regex is None or self.regex.fullmatch(part) is not None


@dataclass(slots=True)
class _WildcardEdge:
    """A wildcard edge: consumes every remaining component."""

    name: str
    node: _TrieNode


class TrieRouter:
    """Prefix-tree router with static > param > wildcard priority.

    Usage::

        router = TrieRouter()
        router.add("GET", "/users/:id", show_user)
        router.add("GET", "/users/me", show_me)
        router.match("GET", "/users/me").handler   # show_me
        router.match("GET", "/users/42").params    # {"id": "42"}

    Two parameters at the same position share one edge: the first
    registration fixes its name and constraint, later ones reuse it.
    Registering the same method and pattern twice replaces the handler.
    """

    __slots__ = ("_log_registrations", "_roots", "_routes")

    def __init__(self, *, log_registrations: bool = True) -> None:
        self._roots: dict[str, _TrieNode] = {}
        self._routes: list[Route] = []
        self._log_registrations = log_registrations

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._routes)

    def add(self, method: str, pattern: str, handler: Handler) -> None:
        """Register *handler* for *method* and *pattern*.

        Raises ``RouteDefinitionError`` before touching the tree if the
        pattern is invalid, so a failed ``add`` leaves no partial route.
        """
        route = Route.build(method, pattern, handler)
        node = self._roots.setdefault(route.method, _TrieNode())

        for seg in route.segments:
            match seg.kind:
                case SegmentKind.STATIC:
                    node = node.children.setdefault(seg.literal, _TrieNode())
                case SegmentKind.PARAM:
                    node = self._param_edge(node, seg.name, seg.pattern, route).node
                case SegmentKind.OPTIONAL:
                    # Parameter omitted: the current node is terminal too
                    self._set_handler(node, route)
                    node = self._param_edge(node, seg.name, seg.pattern, route).node
                case SegmentKind.WILDCARD:
                    if node.wildcard_child is None:
                        node.wildcard_child = _WildcardEdge(name=seg.name, node=_TrieNode())
                    elif node.wildcard_child.name != seg.name:
                        logger.warning(
                            "Route %s %s: wildcard %r reuses existing wildcard %r",
                            route.method,
                            route.pattern,
                            seg.name,
                            node.wildcard_child.name,
                        )
                    node = node.wildcard_child.node

        self._set_handler(node, route)
        self._routes.append(route)
        if self._log_registrations:
            logger.debug("Registered %s %s (trie)", route.method, route.pattern)

    def _param_edge(
        self,
        node: _TrieNode,
        name: str,
        constraint: str | None,
        route: Route,
    ) -> _ParamEdge:
        edge = node.param_child
        if edge is None:
            edge = _ParamEdge(
                name=name,
                constraint=constraint,
                regex=compile_constraint(constraint) if constraint is not None else None,
                node=_TrieNode(),
            )
            node.param_child = edge
        elif edge.name != name or edge.constraint != constraint:
            logger.warning(
                "Route %s %s: parameter %r reuses existing parameter %r (constraint %r)",
                route.method,
                route.pattern,
                name,
                edge.name,
                edge.constraint,
            )
        return edge

    @staticmethod
    def _set_handler(node: _TrieNode, route: Route) -> None:
        if route.method in node.handlers and node.handlers[route.method] is not route.handler:
            logger.warning(
                "Route %s %s replaces a previously registered handler",
                route.method,
                route.pattern,
            )
        node.handlers[route.method] = route.handler

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Match a request method and path.

        Returns a ``RouteMatch`` on success, ``None`` otherwise.
        """
        method = normalize_method(method)
        root = self._roots.get(method)
        if root is None:
            return None

        params: dict[str, str] = {}
        node = self._match_node(root, split_path(path), 0, params)
        if node is None:
            return None
        return RouteMatch.create(node.handlers[method], params)

    def allowed_methods(self, path: str) -> frozenset[str]:
        """Methods that have a route matching *path*.

        Lets callers tell "wrong method" from "wrong path", which
        ``match`` alone cannot.
        """
        parts = split_path(path)
        return frozenset(
            method
            for method, root in self._roots.items()
            if self._match_node(root, parts, 0, {}) is not None
        )

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str],
    ) -> _TrieNode | None:
        """Recursively match path parts against the tree.

        Bindings are written into *params* on descent and removed again
        when a branch fails.
        """
        # All parts consumed: this node must be terminal
        if index == len(parts):
            return node if node.handlers else None

        part = parts[index]

        # 1. Try static child first (exact match)
        child = node.children.get(part)
        if child is not None:
            result = self._match_node(child, parts, index + 1, params)
            if result is not None:
                return result

        # 2. Try parameter child
        edge = node.param_child
        if edge is not None and edge.accepts(part):
            previous = params.get(edge.name)
            params[edge.name] = part
            result = self._match_node(edge.node, parts, index + 1, params)
            if result is not None:
                return result
            # backtrack
            if previous is None:
                del params[edge.name]
            else:
                params[edge.name] = previous

        # 3. Try wildcard: consumes the rest of the path
        wildcard = node.wildcard_child
        if wildcard is not None and wildcard.node.handlers:
            params[wildcard.name] = "/".join(parts[index:])
            return wildcard.node

        return None
