"""Route table formatting for debugging route configuration.

Prints registered routes with method, pattern, and handler name::

    METHOD  PATH          HANDLER
    ------------------------------
    GET     /users/:id    show_user
    POST    /users        create_user
"""

from collections.abc import Iterable

from warble.routing.route import Handler, Route


def handler_name(handler: Handler) -> str:
    name = getattr(handler, "__qualname__", None) or getattr(handler, "__name__", None)
    return name if isinstance(name, str) else repr(handler)


def format_routes(routes: Iterable[Route]) -> str:
    """Render *routes* as a table, in the order given."""
    rows = [(route.method, route.pattern, handler_name(route.handler)) for route in routes]
    if not rows:
        return "No routes registered."

    max_method = max(6, *(len(r[0]) for r in rows))  # "METHOD" header
    max_path = max(4, *(len(r[1]) for r in rows))  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    lines = [fmt.format("METHOD", "PATH", "HANDLER")]
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    lines.append("-" * min(sep_len, 80))
    lines.extend(fmt.format(*row).rstrip() for row in rows)
    return "\n".join(lines)
