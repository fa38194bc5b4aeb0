"""Route pattern compiler.

Parses a path template into an ordered tuple of typed segments::

    "/users"               -> (Static("users"),)
    "/users/:id"           -> (Static("users"), Param("id"))
    "/users/:id(\\d+)"     -> (Static("users"), Param("id", r"\\d+"))
    "/users/:id?"          -> (Static("users"), OptionalParam("id"))
    "/assets/*path"        -> (Static("assets"), Wildcard("path"))

Both routers consume the same segments, so structural validation lives
here and only here.
"""

import functools
import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias

from warble.errors import RouteDefinitionError

SEPARATOR = "/"

# Constraint used when a parameter does not declare one
DEFAULT_PARAM_PATTERN = r"[^/]+"

# :name, :name(constraint), either with an optional trailing "?"
_PARAM_TOKEN = re.compile(r"^:(?P<name>\w+)(?:\((?P<pattern>.+)\))?(?P<optional>\?)?$")
_WILDCARD_TOKEN = re.compile(r"^\*(?P<name>\w+)$")


class SegmentKind(Enum):
    """Tag for the closed set of segment variants."""

    STATIC = "static"
    PARAM = "param"
    OPTIONAL = "optional"
    WILDCARD = "wildcard"


@dataclass(frozen=True, slots=True)
class Static:
    """Literal text, matched verbatim and case-sensitively."""

    kind: ClassVar[SegmentKind] = SegmentKind.STATIC

    literal: str


@dataclass(frozen=True, slots=True)
class Param:
    """Exactly one path component, captured under ``name``."""

    kind: ClassVar[SegmentKind] = SegmentKind.PARAM

    name: str
    pattern: str | None = None


@dataclass(frozen=True, slots=True)
class OptionalParam:
    """A parameter whose component (and leading separator) may be absent."""

    kind: ClassVar[SegmentKind] = SegmentKind.OPTIONAL

    name: str
    pattern: str | None = None


@dataclass(frozen=True, slots=True)
class Wildcard:
    """All remaining components, joined by the separator. Always last."""

    kind: ClassVar[SegmentKind] = SegmentKind.WILDCARD

    name: str


Segment: TypeAlias = Static | Param | OptionalParam | Wildcard


def split_path(path: str) -> list[str]:
    """Split a request path or pattern into its non-empty components.

    ``"/"`` and ``""`` both yield ``[]`` (the root route).
    """
    return [part for part in path.split(SEPARATOR) if part]


@functools.lru_cache(maxsize=256)
def compile_constraint(pattern: str) -> re.Pattern[str]:
    """Compile a custom parameter constraint.

    Raises ``re.error`` for invalid syntax; ``parse_pattern`` converts that
    into a ``RouteDefinitionError`` naming the offending route.
    """
    return re.compile(pattern)


def parse_pattern(pattern: str) -> tuple[Segment, ...]:
    """Parse a route pattern into segments, validating its structure.

    Raises ``RouteDefinitionError`` when:

    - a wildcard is not the final segment,
    - a ``:`` or ``*`` token has no valid name,
    - a custom constraint is not a valid regular expression.
    """
    parts = split_path(pattern)
    segments: list[Segment] = []

    for index, part in enumerate(parts):
        if part.startswith("*"):
            token = _WILDCARD_TOKEN.match(part)
            if token is None:
                raise RouteDefinitionError(pattern, f"malformed wildcard segment {part!r}")
            if index != len(parts) - 1:
                raise RouteDefinitionError(
                    pattern, f"wildcard segment {part!r} must be the last segment"
                )
            segments.append(Wildcard(token["name"]))
        elif part.startswith(":"):
            token = _PARAM_TOKEN.match(part)
            if token is None:
                raise RouteDefinitionError(pattern, f"malformed parameter segment {part!r}")
            constraint = token["pattern"]
            if constraint is not None:
                try:
                    compile_constraint(constraint)
                except re.error as exc:
                    raise RouteDefinitionError(
                        pattern, f"invalid constraint {constraint!r} for {token['name']!r}: {exc}"
                    ) from exc
            if token["optional"]:
                segments.append(OptionalParam(token["name"], constraint))
            else:
                segments.append(Param(token["name"], constraint))
        else:
            segments.append(Static(part))

    return tuple(segments)


def param_names(segments: tuple[Segment, ...]) -> tuple[str, ...]:
    """Names of every capturing segment, in declaration order."""
    return tuple(seg.name for seg in segments if seg.kind is not SegmentKind.STATIC)
