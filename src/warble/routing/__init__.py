"""Routing: two matchers behind one ``add`` / ``match`` contract.

``TrieRouter`` resolves by specificity (static, then parameter, then
wildcard). ``RegexRouter`` resolves by registration order.
"""

from warble.routing.contract import Router
from warble.routing.group import RouteGroup
from warble.routing.regex import RegexRouter
from warble.routing.route import Route, RouteMatch
from warble.routing.trie import TrieRouter

__all__ = ["RegexRouter", "Route", "RouteGroup", "RouteMatch", "Router", "TrieRouter"]
