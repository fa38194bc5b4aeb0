"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from warble.errors import ConfigurationError
from warble.routing.contract import Router
from warble.routing.regex import RegexRouter
from warble.routing.trie import TrieRouter

ROUTER_KINDS: dict[str, type[TrieRouter] | type[RegexRouter]] = {
    "trie": TrieRouter,
    "regex": RegexRouter,
}

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(kind="regex", log_registrations=False)
    """

    # "trie" (specificity priority) or "regex" (registration order)
    kind: str = "trie"

    # DEBUG log line for every add()
    log_registrations: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RouterConfig":
        """Build a config from ``WARBLE_ROUTER`` and ``WARBLE_LOG_REGISTRATIONS``.

        Unset variables keep their defaults. Raises ``ConfigurationError``
        for a boolean variable that is not a recognizable boolean.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        kind = env.get("WARBLE_ROUTER", defaults.kind).strip().lower()

        raw = env.get("WARBLE_LOG_REGISTRATIONS")
        if raw is None:
            log_registrations = defaults.log_registrations
        elif raw.strip().lower() in _TRUE:
            log_registrations = True
        elif raw.strip().lower() in _FALSE:
            log_registrations = False
        else:
            msg = f"WARBLE_LOG_REGISTRATIONS must be a boolean, got {raw!r}"
            raise ConfigurationError(msg)

        return cls(kind=kind, log_registrations=log_registrations)


def create_router(config: RouterConfig | None = None) -> Router:
    """Build the router implementation selected by *config*.

    Defaults to a ``TrieRouter``. Raises ``ConfigurationError`` for an
    unknown ``kind``.
    """
    config = config or RouterConfig()
    try:
        router_cls = ROUTER_KINDS[config.kind]
    except KeyError:
        known = ", ".join(sorted(ROUTER_KINDS))
        msg = f"Unknown router kind {config.kind!r}. Expected one of: {known}"
        raise ConfigurationError(msg) from None
    return router_cls(log_registrations=config.log_registrations)
