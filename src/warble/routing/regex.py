"""Regex router: ordered, fully anchored patterns per HTTP method.

Every route compiles to one regular expression. Matching scans a
method's list in registration order and the first full match wins;
specificity plays no part, so a general pattern registered early
shadows a specific one registered later.
"""

import logging
import re
from dataclasses import dataclass

from warble.errors import RouteDefinitionError
from warble.routing.pattern import (
    DEFAULT_PARAM_PATTERN,
    SEPARATOR,
    SegmentKind,
    compile_constraint,
    param_names,
)
from warble.routing.route import Handler, Route, RouteMatch, normalize_method

logger = logging.getLogger("warble.routing")


@dataclass(frozen=True, slots=True)
class _CompiledRoute:
    """A route with its anchored matcher.

    ``group_indices[i]`` is the regex group holding ``param_names[i]``.
    Custom constraints may contain groups of their own, so parameter
    groups are not necessarily consecutive.
    """

    route: Route
    regex: re.Pattern[str]
    param_names: tuple[str, ...]
    group_indices: tuple[int, ...]


def compile_route(route: Route) -> _CompiledRoute:
    """Translate a route's segments into one anchored regular expression.

    Examples::

        "/"                 -> ^/$
        "/users/:id"        -> ^/users/([^/]+)$
        "/users/:id(\\d+)?" -> ^/users(?:/(\\d+))?$
        "/files/*path"      -> ^/files/(.*)$
        "/:id?"             -> ^(?:(?:/([^/]+))?|/)$

    Raises ``RouteDefinitionError`` when a constraint that compiles on its
    own is invalid inside the combined expression (inline global flags,
    a group name reused across parameters, numbered backreferences).
    """
    parts: list[str] = ["^"]
    group_indices: list[int] = []
    next_group = 1

    if not route.segments:
        parts.append("/")

    for seg in route.segments:
        match seg.kind:
            case SegmentKind.STATIC:
                parts.append("/" + re.escape(seg.literal))
                continue
            case SegmentKind.PARAM:
                expr = seg.pattern or DEFAULT_PARAM_PATTERN
                parts.append(f"/({expr})")
            case SegmentKind.OPTIONAL:
                expr = seg.pattern or DEFAULT_PARAM_PATTERN
                parts.append(f"(?:/({expr}))?")
            case SegmentKind.WILDCARD:
                expr = ""
                parts.append("/(.*)")

        group_indices.append(next_group)
        inner_groups = compile_constraint(expr).groups if expr else 0
        next_group += 1 + inner_groups

    # Every segment may be omitted: the root path selects that form
    if route.segments and all(seg.kind is SegmentKind.OPTIONAL for seg in route.segments):
        parts = ["^(?:", *parts[1:], "|/)"]

    parts.append("$")
    try:
        regex = re.compile("".join(parts))
    except re.error as exc:
        raise RouteDefinitionError(
            route.pattern, f"constraints do not combine into a valid expression: {exc}"
        ) from exc

    return _CompiledRoute(
        route=route,
        regex=regex,
        param_names=param_names(route.segments),
        group_indices=tuple(group_indices),
    )


def _with_leading_separator(path: str) -> str:
    return path if path.startswith(SEPARATOR) else SEPARATOR + path


class RegexRouter:
    """Registration-ordered regex router.

    Usage::

        router = RegexRouter()
        router.add("GET", "/users/:id", by_id)
        router.add("GET", "/users/:name", by_name)
        router.match("GET", "/users/alice").handler   # by_id, registered first
    """

    __slots__ = ("_log_registrations", "_routes", "_table")

    def __init__(self, *, log_registrations: bool = True) -> None:
        self._table: dict[str, list[_CompiledRoute]] = {}
        self._routes: list[Route] = []
        self._log_registrations = log_registrations

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._routes)

    def add(self, method: str, pattern: str, handler: Handler) -> None:
        """Compile *pattern* and append it to *method*'s list.

        Raises ``RouteDefinitionError`` for structurally invalid patterns.
        """
        route = Route.build(method, pattern, handler)
        compiled = compile_route(route)
        self._table.setdefault(route.method, []).append(compiled)
        self._routes.append(route)
        if self._log_registrations:
            logger.debug(
                "Registered %s %s (regex %s)", route.method, route.pattern, compiled.regex.pattern
            )

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Return the first registered route whose pattern matches *path*."""
        entries = self._table.get(normalize_method(method))
        if not entries:
            return None

        path = _with_leading_separator(path)

        for entry in entries:
            found = entry.regex.fullmatch(path)
            if found is None:
                continue
            params: dict[str, str] = {}
            for name, group in zip(entry.param_names, entry.group_indices, strict=True):
                value = found.group(group)
                # Omitted optional parameters do not participate
                if value is not None:
                    params[name] = value
            return RouteMatch.create(entry.route.handler, params)

        return None

    def allowed_methods(self, path: str) -> frozenset[str]:
        """Methods that have a route matching *path*."""
        path = _with_leading_separator(path)
        return frozenset(
            method
            for method, entries in self._table.items()
            if any(entry.regex.fullmatch(path) for entry in entries)
        )
