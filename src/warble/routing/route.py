"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

from warble.routing.pattern import Segment, parse_pattern

# Handlers are opaque to the router: stored and handed back, never called
Handler: TypeAlias = Any


def normalize_method(method: str) -> str:
    return method.upper()


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route.

    Created by ``Route.build()`` during ``add()``. Immutable thereafter.
    """

    method: str
    pattern: str
    segments: tuple[Segment, ...]
    handler: Handler = field(compare=False)

    @classmethod
    def build(cls, method: str, pattern: str, handler: Handler) -> "Route":
        """Parse and validate *pattern*, normalizing *method* to upper case.

        Raises ``RouteDefinitionError`` for structurally invalid patterns.
        """
        return cls(
            method=normalize_method(method),
            pattern=pattern,
            segments=parse_pattern(pattern),
            handler=handler,
        )


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``params`` is a read-only view over a dict created for this match
    alone; item assignment raises ``TypeError``.
    """

    handler: Handler
    params: Mapping[str, str]

    @classmethod
    def create(cls, handler: Handler, params: dict[str, str]) -> "RouteMatch":
        # Copy so later backtracking in the caller cannot leak into the view
        return cls(handler=handler, params=MappingProxyType(dict(params)))
